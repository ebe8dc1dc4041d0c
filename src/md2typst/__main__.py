#!/usr/bin/env python3
"""Run the md2typst command line interface.

Usage:
    python -m md2typst report.md -o report.pdf
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
