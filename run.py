#!/usr/bin/env python3
"""
XZAP Launcher
==============
Run this script to start the game.
"""

from xzap.main import main

if __name__ == "__main__":
    main()
