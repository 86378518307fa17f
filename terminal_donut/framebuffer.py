"""Glyph grid with a parallel reciprocal-depth buffer."""

from terminal_donut.errors import ConfigurationError

CURSOR_HOME = "\033[H"


class Framebuffer:
    """
    A `width × height` grid of glyphs plus a z-buffer of reciprocal depths.

    A depth of 0 means nothing has been drawn, so any visible point wins the cell. A
    write only lands if its reciprocal depth is strictly larger than what the cell
    already holds; on a tie the first writer stays.

    Both grids are indexed `[row][col]`.
    """

    def __init__(self, width: int, height: int, blank: str = " ") -> None:
        if width <= 0 or height <= 0:
            raise ConfigurationError(f"framebuffer must be at least 1x1, got {width}x{height}")
        if len(blank) != 1:
            raise ConfigurationError(f"blank must be a single character, got {blank!r}")
        self.width = width
        self.height = height
        self.blank = blank
        self.glyphs = [[blank] * width for _ in range(height)]
        self.depth = [[0.0] * width for _ in range(height)]

    def contains(self, col: int, row: int) -> bool:
        """True if `(col, row)` lies inside the grid."""
        return 0 <= col < self.width and 0 <= row < self.height

    def write(self, col: int, row: int, glyph: str, depth: float) -> bool:
        """
        Depth-test a glyph against the cell and store it if it is closer.

        Args:
            col (int): Column of the cell.
            row (int): Row of the cell.
            glyph (str): Glyph to store.
            depth (float): Reciprocal depth of the sample.

        Returns:
            bool: True if the cell was overwritten; False if the sample was hidden or
            the cell lies outside the grid.
        """
        if not self.contains(col, row) or depth <= self.depth[row][col]:
            return False
        self.depth[row][col] = depth
        self.glyphs[row][col] = glyph
        return True

    def glyph_at(self, col: int, row: int) -> str:
        """Glyph currently stored at `(col, row)`."""
        return self.glyphs[row][col]

    def depth_at(self, col: int, row: int) -> float:
        """Reciprocal depth currently stored at `(col, row)`; 0 if nothing was drawn."""
        return self.depth[row][col]

    def clear(self) -> None:
        """Reset every glyph to blank and every depth to 0, in place."""
        for glyph_row, depth_row in zip(self.glyphs, self.depth):
            glyph_row[:] = [self.blank] * self.width
            depth_row[:] = [0.0] * self.width

    def rows(self) -> list[str]:
        """
        Glyph grid as text, without border or control sequences.

        Returns:
            list[str]: One string of `width` glyphs per row, top row first.
        """
        return ["".join(row) for row in self.glyphs]

    def render(self, border: bool = True) -> str:
        """
        Text for one frame.

        Starts with a cursor-home sequence and a newline so consecutive frames overwrite
        each other, then one line per row. With `border`, the grid is framed by
        `/-\\` on top, `|` on the sides and `\\-/` at the bottom.
        """
        lines = self.rows()
        if border:
            edge = "-" * self.width
            lines = ["/" + edge + "\\"] + ["|" + line + "|" for line in lines] + ["\\" + edge + "/"]
        return CURSOR_HOME + "\n" + "".join(line + "\n" for line in lines)
