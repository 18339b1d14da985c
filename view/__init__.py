"""
View module for TicTacToe.
Draws the board with Pillow for the Tkinter window.
"""

from .config import ViewConfig
from .board_renderer import BoardRenderer
