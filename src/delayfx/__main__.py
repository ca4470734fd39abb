"""
Entry point for running delayfx as a module

Copyright (c) 2026 delayfx contributors

MIT License
"""

import sys

from delayfx.cli import main

if __name__ == "__main__":
    sys.exit(main())
