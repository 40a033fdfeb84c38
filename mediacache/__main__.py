"""Allow running the CLI with ``python -m mediacache``."""
import sys

from mediacache.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
