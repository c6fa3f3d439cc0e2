"""The visible window onto a sheet."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Viewport:
    """A window of ``view_rows`` by ``view_cols`` cells whose top-left cell is
    ``(top_row, left_col)``. Visual coordinates start at 1."""

    top_row: int
    left_col: int
    view_rows: int
    view_cols: int

    def to_absolute(self, visual_row: int, visual_col: int) -> tuple[int, int]:
        """Map on-screen coordinates to sheet coordinates."""
        return self.top_row + visual_row - 1, self.left_col + visual_col - 1

    def to_relative(self, abs_row: int, abs_col: int) -> tuple[int, int]:
        """Map sheet coordinates to on-screen coordinates."""
        return abs_row - self.top_row + 1, abs_col - self.left_col + 1

    def is_visible(self, abs_row: int, abs_col: int) -> bool:
        """Tell whether a sheet cell lies inside the window."""
        return (
            self.top_row <= abs_row < self.top_row + self.view_rows
            and self.left_col <= abs_col < self.left_col + self.view_cols
        )