"""Allow ``python -m vlcremote``."""

import sys

from vlcremote.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
