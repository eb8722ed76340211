"""Entry point for ``python -m punch_payroll``."""

import sys

from punch_payroll.cli import main

if __name__ == "__main__":
    sys.exit(main())
