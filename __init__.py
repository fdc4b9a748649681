"""
Tic Tac Toe
===========
Two players take turns on one machine, clicking cells of a 3x3 grid
drawn as a 2D sprite scene. O always moves first.

Packages:
- logic:  board state, move rules, win detection
- render: window geometry, sprites, frame composition
"""

__version__ = "1.0.0"
