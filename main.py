#!/usr/bin/env python3
"""
Minesweeper - main entry point.

Usage:
    python main.py [--width W] [--height H] [--bombs B] [--seed S]
                   [--show-solution] [--verbose]
"""
import sys

from src.minesweeper.cli import main


if __name__ == "__main__":
    sys.exit(main())
