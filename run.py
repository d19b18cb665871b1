#!/usr/bin/env python3
"""
run.py - Main entry point for the Connect Four core CLI

    python run.py replay --moves 0,6,1,6,2,6,3
    python run.py --debug benchmark --iterations 5000
"""

import sys

from connect4core.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
