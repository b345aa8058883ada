"""
Entry point for running htmlquill as a module.

Usage:
    python -m htmlquill convert page.html --output tree.json
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
