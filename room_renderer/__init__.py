"""room_renderer
=================

Render a rectangular game room to a raster image.

Each cell takes a terrain fill, optionally a resource marker and a structure
marker, and the whole room can be finished with a grid overlay::

    from room_renderer import create_image, draw_terrain_tile, draw_grid, Terrain

    image = create_image()
    draw_terrain_tile(image, 0, 0, Terrain.PLAIN)
    draw_grid(image)
    image.save("room.png")

Later draws overwrite earlier ones within a cell, so paint terrain, then
resources, then structures, then the grid.
"""

from .compositor import (
    DEFAULT_BACKGROUND_COLOR,
    RoomRenderer,
    create_image,
    draw_buildable_structure_tile,
    draw_resource_tile,
    draw_terrain_tile,
    draw_text,
    save_image,
)
from .geometry import (
    DEFAULT_CELL_PIXEL_SIZE,
    DEFAULT_GRID,
    DEFAULT_ROOM_MAX_COLUMNS,
    DEFAULT_ROOM_MAX_ROWS,
    OutOfBoundsError,
    RoomGrid,
)
from .overlay import GRID_LINE_COLOR, draw_grid
from .palette import DEFAULT_PALETTE, FillSpec, Palette, render_fill
from .types import BuildableStructure, Pattern, Resource, Terrain

__all__ = [
    "BuildableStructure",
    "DEFAULT_BACKGROUND_COLOR",
    "DEFAULT_CELL_PIXEL_SIZE",
    "DEFAULT_GRID",
    "DEFAULT_PALETTE",
    "DEFAULT_ROOM_MAX_COLUMNS",
    "DEFAULT_ROOM_MAX_ROWS",
    "FillSpec",
    "GRID_LINE_COLOR",
    "OutOfBoundsError",
    "Palette",
    "Pattern",
    "Resource",
    "RoomGrid",
    "RoomRenderer",
    "Terrain",
    "create_image",
    "draw_buildable_structure_tile",
    "draw_grid",
    "draw_resource_tile",
    "draw_terrain_tile",
    "draw_text",
    "render_fill",
    "save_image",
]
