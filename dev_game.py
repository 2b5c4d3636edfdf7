#!/usr/bin/env python3
"""
Development Mode Game Launcher

Runs Breakout from the repository root without installing the package.

Usage:
    python dev_game.py
    python dev_game.py --seed 7 --log-level DEBUG
    python dev_game.py --help
"""

import os
import sys

# Ensure project root is on path
_project_root = os.path.dirname(os.path.abspath(__file__))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from games.Breakout.main import main


if __name__ == '__main__':
    sys.exit(main())
