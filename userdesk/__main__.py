"""Allow ``python -m userdesk``."""

import sys

from userdesk.infrastructure.cli.app import main

if __name__ == "__main__":  # pragma: no cover - interactive entry point
    sys.exit(main())
