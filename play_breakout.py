#!/usr/bin/env python3
"""
Main script to launch Brick Breaker with PyGame graphical interface
"""

from brick_breaker.gui.game_app import main

if __name__ == "__main__":
    main()
