"""Allow ``python -m restservice``."""

import sys

from restservice.server.application import main

if __name__ == "__main__":
    sys.exit(main())
