"""This module provides the entry point for running the trie self-checks."""

import sys

from src.selfcheck.cli import main

if __name__ == "__main__":
    sys.exit(main())
