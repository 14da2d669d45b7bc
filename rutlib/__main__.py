"""
Entry point for running rutlib as a module.

Usage:
    python -m rutlib parse 17.951.585-7
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
