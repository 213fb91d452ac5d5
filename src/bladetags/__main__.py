"""Allow ``python -m bladetags``."""
import sys

from bladetags.cli._dispatcher import main

if __name__ == "__main__":
    sys.exit(main())
