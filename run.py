#!/usr/bin/env python3
"""
Run the valuation report web server.

Shortcut for ``python -m reporting.cli serve``; extra arguments are passed
through (e.g. ``python run.py --port 9000``).
"""

import sys

from reporting.cli import main


if __name__ == "__main__":
    sys.exit(main(["serve", *sys.argv[1:]]))
