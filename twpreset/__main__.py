"""
Entry point for running twpreset as a module: python -m twpreset
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
