#!/usr/bin/env python3
"""
Taqti - Hindi / Hinglish Bahr Analyzer

Main entry point for analyzing poems from the command line.
"""

import sys
from pathlib import Path

# Add the taqti package to the path
sys.path.insert(0, str(Path(__file__).parent))

from taqti.interface.cli_interface import main

if __name__ == "__main__":
    sys.exit(main())
