#!/usr/bin/env python3
"""
Game of Life Terminal Runner

Creates a universe, ticks it on a fixed cadence and prints each generation.

    python scripts/run_universe.py --pattern glider --width 20 --height 20
"""

import os
import sys

# Add repo root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from game_of_life.cli import main


if __name__ == "__main__":
    sys.exit(main())
