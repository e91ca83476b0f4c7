"""
Board renderer for TicTacToe.
Draws the board as a Pillow image for the UI and for screenshots.
"""

from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from .config import DisplayConfig


class BoardRenderer:
    """
    Draws a 3x3 board with its marks.

    Winning cells are shaded and a line is drawn through them.
    """

    def __init__(self, config: Optional[DisplayConfig] = None):
        self.config = config if config is not None else DisplayConfig()

    def cell_box(self, index: int) -> Tuple[int, int, int, int]:
        """
        Pixel box of a cell.

        Args:
            index: Cell index (0-8), row-major.

        Returns:
            (left, top, right, bottom)
        """
        size = self.config.CELL_SIZE_PX
        row, col = divmod(index, self.config.BOARD_SIZE)
        return (col * size, row * size, (col + 1) * size, (row + 1) * size)

    def cell_center(self, index: int) -> Tuple[int, int]:
        left, top, right, bottom = self.cell_box(index)
        return ((left + right) // 2, (top + bottom) // 2)

    def cell_at(self, x: int, y: int) -> Optional[int]:
        """Cell index under a pixel position, or None outside the board."""
        size = self.config.CELL_SIZE_PX
        if not (0 <= x < self.config.BOARD_SIZE_PX and 0 <= y < self.config.BOARD_SIZE_PX):
            return None
        return (y // size) * self.config.BOARD_SIZE + (x // size)

    def render(
        self,
        board: Sequence[str],
        win_pattern: Optional[Sequence[int]] = None,
        theme: str = DisplayConfig.DEFAULT_THEME
    ) -> Image.Image:
        """
        Draw the board.

        Args:
            board: The 9 cells ("", "X" or "O").
            win_pattern: Winning cells to highlight, if any.
            theme: Name of a theme in DisplayConfig.THEMES.

        Returns:
            RGB image of BOARD_SIZE_PX x BOARD_SIZE_PX.
        """
        colors = self.config.theme(theme)
        size = self.config.BOARD_SIZE_PX

        image = Image.new("RGB", (size, size), colors["background"])
        draw = ImageDraw.Draw(image)

        # Shade winning cells first so the grid and marks go on top
        if win_pattern:
            for index in win_pattern:
                draw.rectangle(self.cell_box(index), fill=colors["win_cell"])

        self._draw_grid(draw, colors["grid"])

        for index, mark in enumerate(board):
            if mark == "X":
                self._draw_x(draw, index, colors["x"])
            elif mark == "O":
                self._draw_o(draw, index, colors["o"])

        if win_pattern:
            start = self.cell_center(win_pattern[0])
            end = self.cell_center(win_pattern[-1])
            draw.line([start, end], fill=colors["win_line"], width=self.config.WIN_LINE_WIDTH)

        return image

    def save(
        self,
        path: str,
        board: Sequence[str],
        win_pattern: Optional[Sequence[int]] = None,
        theme: str = DisplayConfig.DEFAULT_THEME
    ):
        """Render the board and write it to ``path`` (format from the extension)."""
        self.render(board, win_pattern, theme).save(path)

    def _draw_grid(self, draw: ImageDraw.ImageDraw, color):
        size = self.config.BOARD_SIZE_PX
        width = self.config.GRID_LINE_WIDTH
        for i in range(1, self.config.BOARD_SIZE):
            offset = i * self.config.CELL_SIZE_PX
            draw.line([(offset, 0), (offset, size)], fill=color, width=width)
            draw.line([(0, offset), (size, offset)], fill=color, width=width)

    def _draw_x(self, draw: ImageDraw.ImageDraw, index: int, color):
        left, top, right, bottom = self._mark_box(index)
        width = self.config.MARK_LINE_WIDTH
        draw.line([(left, top), (right, bottom)], fill=color, width=width)
        draw.line([(left, bottom), (right, top)], fill=color, width=width)

    def _draw_o(self, draw: ImageDraw.ImageDraw, index: int, color):
        draw.ellipse(self._mark_box(index), outline=color, width=self.config.MARK_LINE_WIDTH)

    def _mark_box(self, index: int) -> Tuple[int, int, int, int]:
        pad = self.config.MARK_PADDING_PX
        left, top, right, bottom = self.cell_box(index)
        return (left + pad, top + pad, right - pad, bottom - pad)
