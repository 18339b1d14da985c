"""
View configuration for TicTacToe.
Sizes, colors and fonts for the board image and the window.
"""


class ViewConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board.
    """

    # ==================== WINDOW SETTINGS ====================
    WINDOW_TITLE = "Tic Tac Toe"
    WINDOW_BG = "#1a1a2e"

    # ==================== BOARD SETTINGS ====================
    # Size of one cell in pixels
    CELL_SIZE_PX = 120

    # Gap around the grid
    MARGIN_PX = 10

    # Total board image size
    BOARD_SIZE_PX = CELL_SIZE_PX * 3 + MARGIN_PX * 2  # 380px

    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 10

    # Fraction of a cell left empty around a mark
    MARK_PADDING = 0.22

    # ==================== COLORS (RGB) ====================
    BOARD_BG = (22, 33, 62)
    GRID_COLOR = (0, 212, 255)
    X_COLOR = (248, 113, 113)
    O_COLOR = (16, 185, 129)
    WIN_HIGHLIGHT = (255, 215, 0)
    WIN_CELL_BG = (6, 95, 70)

    # ==================== FONTS ====================
    TITLE_FONT = ("Segoe UI", 16, "bold")
    STATUS_FONT = ("Segoe UI", 12)
    BUTTON_FONT = ("Segoe UI", 10, "bold")
