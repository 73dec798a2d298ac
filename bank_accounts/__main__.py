"""Allow ``python -m bank_accounts``."""

import sys

from bank_accounts.cli import main

sys.exit(main())
