"""
Display configuration for TicTacToe.
Board drawing sizes, colour themes and UI timings.
"""


class DisplayConfig:
    """
    Configuration class for display settings.
    Change these values to restyle the board!
    """

    # ==================== BOARD DRAWING ====================
    BOARD_SIZE = 3
    CELL_SIZE_PX = 120
    BOARD_SIZE_PX = CELL_SIZE_PX * BOARD_SIZE  # 360 pixels

    GRID_LINE_WIDTH = 4
    MARK_LINE_WIDTH = 10
    WIN_LINE_WIDTH = 8

    # Gap between a mark and its cell border
    MARK_PADDING_PX = 28

    # ==================== THEMES ====================
    # Colours are RGB tuples so they can go straight to Pillow
    THEMES = {
        "light": {
            "background": (248, 250, 252),
            "grid": (51, 65, 85),
            "x": (239, 68, 68),
            "o": (59, 130, 246),
            "win_cell": (254, 240, 138),
            "win_line": (22, 163, 74),
            "text": (15, 23, 42),
        },
        "dark": {
            "background": (26, 26, 46),
            "grid": (0, 212, 255),
            "x": (248, 113, 113),
            "o": (16, 185, 129),
            "win_cell": (63, 63, 20),
            "win_line": (255, 215, 0),
            "text": (255, 255, 255),
        },
    }
    DEFAULT_THEME = "light"

    # ==================== TIMINGS ====================
    # Pause before the computer moves, so it looks like it is thinking
    AI_DELAY_MS = 800

    # Pause before the result is announced
    GAME_OVER_DELAY_MS = 500

    # Countdown tick
    TIMER_TICK_MS = 1000

    def theme(self, name: str) -> dict:
        """Colours for a theme; unknown names use the default theme."""
        return self.THEMES.get(name, self.THEMES[self.DEFAULT_THEME])
