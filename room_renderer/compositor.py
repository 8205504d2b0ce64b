"""Tile compositor.

Free functions that paint tiles into a caller-owned RGBA image. The image is
passed to every call; nothing here keeps canvas state. Layering is purely a
matter of call order: each draw overwrites its whole cell, so callers paint
terrain, then resources, then structures, then the grid overlay.
"""

import logging
import os
from typing import Union

from PIL import Image, ImageDraw, ImageFont

from room_renderer.geometry import DEFAULT_GRID, RoomGrid
from room_renderer.overlay import GRID_LINE_COLOR, draw_grid
from room_renderer.palette import DEFAULT_PALETTE, FillSpec, Palette, render_fill
from room_renderer.types import RGBA, BuildableStructure, Resource, Terrain

logger = logging.getLogger(__name__)

DEFAULT_BACKGROUND_COLOR: RGBA = (0, 0, 0, 255)
DEFAULT_TEXT_COLOR: RGBA = (255, 255, 255, 255)
TEXT_OFFSET = 2


def create_image(grid: RoomGrid = DEFAULT_GRID) -> Image.Image:
    """Allocate an RGBA image sized for ``grid`` filled with the background."""
    width, height = grid.image_dimensions()
    logger.debug("Creating %dx%d room image", width, height)
    return Image.new("RGBA", (width, height), DEFAULT_BACKGROUND_COLOR)


def _paint_cell(
    image: Image.Image, column: int, row: int, fill: FillSpec, grid: RoomGrid
) -> None:
    grid.check_image_size(image.size)
    grid.check_bounds(column, row)
    x0, y0, _, _ = grid.cell_rect(column, row)
    image.paste(render_fill(fill, grid.cell_pixel_size), (x0, y0))


def draw_terrain_tile(
    image: Image.Image,
    column: int,
    row: int,
    terrain: Terrain,
    grid: RoomGrid = DEFAULT_GRID,
    palette: Palette = DEFAULT_PALETTE,
) -> None:
    _paint_cell(image, column, row, palette.fill_for_terrain(terrain), grid)


def draw_resource_tile(
    image: Image.Image,
    column: int,
    row: int,
    resource: Resource,
    grid: RoomGrid = DEFAULT_GRID,
    palette: Palette = DEFAULT_PALETTE,
) -> None:
    _paint_cell(image, column, row, palette.fill_for_resource(resource), grid)


def draw_buildable_structure_tile(
    image: Image.Image,
    column: int,
    row: int,
    structure: BuildableStructure,
    grid: RoomGrid = DEFAULT_GRID,
    palette: Palette = DEFAULT_PALETTE,
) -> None:
    _paint_cell(image, column, row, palette.fill_for_structure(structure), grid)


def draw_text(
    image: Image.Image,
    column: int,
    row: int,
    text: str,
    grid: RoomGrid = DEFAULT_GRID,
    color: RGBA = DEFAULT_TEXT_COLOR,
) -> None:
    """
    Write a short label (typically a number) near the top-left of a cell.

    Glyphs are clipped to the cell so long labels never bleed into neighbours.
    """
    grid.check_image_size(image.size)
    grid.check_bounds(column, row)
    rect = grid.cell_rect(column, row)
    cell = image.crop(rect)
    ImageDraw.Draw(cell).text(
        (TEXT_OFFSET, TEXT_OFFSET), text, fill=color, font=ImageFont.load_default()
    )
    image.paste(cell, rect[:2])


def save_image(image: Image.Image, path: Union[str, os.PathLike[str]]) -> None:
    """Encode ``image`` to ``path``; the format follows the file extension."""
    image.save(path)
    logger.info("Saved %dx%d room image to %s", image.width, image.height, path)


class RoomRenderer:
    """Binds a grid and palette so call sites only pass image and tiles."""

    grid: RoomGrid
    palette: Palette

    def __init__(
        self,
        grid: RoomGrid = DEFAULT_GRID,
        palette: Palette = DEFAULT_PALETTE,
    ):
        self.grid = grid
        self.palette = palette

    def create_image(self) -> Image.Image:
        return create_image(self.grid)

    def draw_terrain_tile(
        self, image: Image.Image, column: int, row: int, terrain: Terrain
    ) -> None:
        draw_terrain_tile(image, column, row, terrain, self.grid, self.palette)

    def draw_resource_tile(
        self, image: Image.Image, column: int, row: int, resource: Resource
    ) -> None:
        draw_resource_tile(image, column, row, resource, self.grid, self.palette)

    def draw_buildable_structure_tile(
        self, image: Image.Image, column: int, row: int, structure: BuildableStructure
    ) -> None:
        draw_buildable_structure_tile(
            image, column, row, structure, self.grid, self.palette
        )

    def draw_text(self, image: Image.Image, column: int, row: int, text: str) -> None:
        draw_text(image, column, row, text, self.grid)

    def draw_grid(self, image: Image.Image, color: RGBA = GRID_LINE_COLOR) -> None:
        draw_grid(image, self.grid, color)
