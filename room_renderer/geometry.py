"""Room grid geometry.

``RoomGrid`` is the immutable descriptor shared by every draw call: how many
columns and rows a room has and how many pixels each cell spans. It maps a
``(column, row)`` coordinate to the pixel rectangle the cell occupies.
"""

from dataclasses import dataclass
from typing import Tuple

from room_renderer.types import CellRect


DEFAULT_ROOM_MAX_COLUMNS = 50
DEFAULT_ROOM_MAX_ROWS = 50
DEFAULT_CELL_PIXEL_SIZE = 50


class OutOfBoundsError(IndexError):
    """Raised when a draw call addresses a cell outside the room."""

    def __init__(self, column: int, row: int, columns: int, rows: int):
        super().__init__(f"Out of bounds: {(column, row)} for grid {columns}x{rows}")
        self.column = column
        self.row = row


@dataclass(frozen=True)
class RoomGrid:
    """Room dimensions in cells and the pixel size of one cell.

    Attributes:
        columns: Number of cells horizontally.
        rows: Number of cells vertically.
        cell_pixel_size: Edge length of a cell in pixels.
    """

    columns: int = DEFAULT_ROOM_MAX_COLUMNS
    rows: int = DEFAULT_ROOM_MAX_ROWS
    cell_pixel_size: int = DEFAULT_CELL_PIXEL_SIZE

    def __post_init__(self) -> None:
        for name in ("columns", "rows", "cell_pixel_size"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")

    def image_dimensions(self) -> Tuple[int, int]:
        """Return ``(width, height)`` of an image holding the whole room."""
        return (
            self.columns * self.cell_pixel_size,
            self.rows * self.cell_pixel_size,
        )

    def cell_rect(self, column: int, row: int) -> CellRect:
        """Return ``(x0, y0, x1, y1)`` of a cell; upper bounds are exclusive."""
        x0 = column * self.cell_pixel_size
        y0 = row * self.cell_pixel_size
        return x0, y0, x0 + self.cell_pixel_size, y0 + self.cell_pixel_size

    def is_in_bounds(self, column: int, row: int) -> bool:
        return 0 <= column < self.columns and 0 <= row < self.rows

    def check_bounds(self, column: int, row: int) -> None:
        if not self.is_in_bounds(column, row):
            raise OutOfBoundsError(column, row, self.columns, self.rows)

    def check_image_size(self, size: Tuple[int, int]) -> None:
        """Raise ``ValueError`` unless ``size`` matches :meth:`image_dimensions`."""
        expected = self.image_dimensions()
        if tuple(size) != expected:
            raise ValueError(f"Image size {tuple(size)} does not match grid {expected}")


DEFAULT_GRID = RoomGrid()
