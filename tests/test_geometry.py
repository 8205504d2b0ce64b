import pytest

from room_renderer.geometry import (
    DEFAULT_CELL_PIXEL_SIZE,
    DEFAULT_GRID,
    DEFAULT_ROOM_MAX_COLUMNS,
    DEFAULT_ROOM_MAX_ROWS,
    OutOfBoundsError,
    RoomGrid,
)


def test_default_grid_dimensions() -> None:
    assert DEFAULT_GRID.columns == DEFAULT_ROOM_MAX_COLUMNS == 50
    assert DEFAULT_GRID.rows == DEFAULT_ROOM_MAX_ROWS == 50
    assert DEFAULT_GRID.cell_pixel_size == DEFAULT_CELL_PIXEL_SIZE
    assert DEFAULT_GRID.image_dimensions() == (50 * 50, 50 * 50)


def test_image_dimensions_non_square() -> None:
    grid = RoomGrid(columns=7, rows=3, cell_pixel_size=10)
    assert grid.image_dimensions() == (70, 30)


@pytest.mark.parametrize(
    "column, row, expected",
    [
        (0, 0, (0, 0, 32, 32)),
        (1, 0, (32, 0, 64, 32)),
        (0, 1, (0, 32, 32, 64)),
        (49, 49, (1568, 1568, 1600, 1600)),
    ],
)
def test_cell_rect(column: int, row: int, expected: tuple[int, int, int, int]) -> None:
    grid = RoomGrid(cell_pixel_size=32)
    assert grid.cell_rect(column, row) == expected


def test_cell_rects_are_square_and_tile_the_image() -> None:
    grid = RoomGrid(columns=4, rows=3, cell_pixel_size=5)
    covered: set[tuple[int, int]] = set()
    for row in range(grid.rows):
        for column in range(grid.columns):
            x0, y0, x1, y1 = grid.cell_rect(column, row)
            assert x1 - x0 == y1 - y0 == grid.cell_pixel_size
            pixels = {(x, y) for x in range(x0, x1) for y in range(y0, y1)}
            assert not (pixels & covered)
            covered |= pixels
    width, height = grid.image_dimensions()
    assert covered == {(x, y) for x in range(width) for y in range(height)}


def test_adjacent_cells_are_contiguous() -> None:
    grid = RoomGrid(cell_pixel_size=16)
    _, _, right_edge, bottom_edge = grid.cell_rect(3, 3)
    assert grid.cell_rect(4, 3)[0] == right_edge
    assert grid.cell_rect(3, 4)[1] == bottom_edge


@pytest.mark.parametrize(
    "column, row, inside",
    [
        (0, 0, True),
        (49, 49, True),
        (50, 0, False),
        (0, 50, False),
        (-1, 0, False),
        (0, -1, False),
    ],
)
def test_is_in_bounds(column: int, row: int, inside: bool) -> None:
    assert DEFAULT_GRID.is_in_bounds(column, row) is inside


def test_check_bounds_raises() -> None:
    grid = RoomGrid(columns=5, rows=4)
    with pytest.raises(OutOfBoundsError, match=r"\(5, 0\) for grid 5x4") as exc_info:
        grid.check_bounds(5, 0)
    assert isinstance(exc_info.value, IndexError)
    assert (exc_info.value.column, exc_info.value.row) == (5, 0)
    grid.check_bounds(4, 3)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"columns": 0},
        {"rows": -2},
        {"cell_pixel_size": 0},
        {"columns": 2.5},
        {"rows": True},
    ],
)
def test_invalid_grid_rejected(kwargs: dict[str, object]) -> None:
    with pytest.raises(ValueError):
        RoomGrid(**kwargs)  # type: ignore[arg-type]


def test_check_image_size() -> None:
    grid = RoomGrid(columns=2, rows=3, cell_pixel_size=4)
    grid.check_image_size((8, 12))
    with pytest.raises(ValueError, match="does not match"):
        grid.check_image_size((9, 12))
