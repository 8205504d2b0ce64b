"""Sample room.

Paints a small, hand-placed layout: plain ground everywhere, a swamp patch
with walls around it, a source, a catalyst deposit and one extension.

Run ``python -m room_renderer.examples.sample_room -o room.png``.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence, Tuple

from PIL import Image

from room_renderer.compositor import RoomRenderer, save_image
from room_renderer.geometry import RoomGrid
from room_renderer.types import BuildableStructure, Resource, Terrain

Cell = Tuple[int, int]

SWAMP_CELLS: List[Cell] = [(20, 20)]
WALL_CELLS: List[Cell] = [(21, 20), (21, 21), (20, 21)]
RESOURCE_CELLS: List[Tuple[Cell, Resource]] = [
    ((10, 20), Resource.SOURCE),
    ((20, 10), Resource.CATALYST),
]
STRUCTURE_CELLS: List[Tuple[Cell, BuildableStructure]] = [
    ((10, 10), BuildableStructure.EXTENSION),
]


def generate(grid: RoomGrid = RoomGrid(cell_pixel_size=32)) -> Image.Image:
    """Render the sample layout onto a fresh image for ``grid``."""
    renderer = RoomRenderer(grid=grid)
    image = renderer.create_image()

    for row in range(grid.rows):
        for column in range(grid.columns):
            renderer.draw_terrain_tile(image, column, row, Terrain.PLAIN)
    for column, row in SWAMP_CELLS:
        renderer.draw_terrain_tile(image, column, row, Terrain.SWAMP)
    for column, row in WALL_CELLS:
        renderer.draw_terrain_tile(image, column, row, Terrain.WALL)

    for (column, row), resource in RESOURCE_CELLS:
        renderer.draw_resource_tile(image, column, row, resource)
    for (column, row), structure in STRUCTURE_CELLS:
        renderer.draw_buildable_structure_tile(image, column, row, structure)

    renderer.draw_grid(image)
    return image


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Render the sample room to PNG.")
    parser.add_argument("-o", "--output", default="room.png", help="Output file")
    parser.add_argument(
        "--cell-size", type=int, default=32, help="Pixel size of one cell"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)-5s:%(name)s: %(message)s",
    )
    image = generate(RoomGrid(cell_pixel_size=args.cell_size))
    save_image(image, args.output)


if __name__ == "__main__":
    main()
