#!/usr/bin/env python3
"""
posix-time

Entry point for running without installation.
Usage: python main.py convert '%d-%b-%y'
"""

import sys

from posix_time.cli import main

if __name__ == "__main__":
    sys.exit(main())
