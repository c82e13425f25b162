#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--preset {easy,medium,hard}] [--rows R --cols C --mines M]
                   [--seed N]
"""
from src.minesweeper.cli import main


if __name__ == "__main__":
    main()
