"""Cell boundary overlay.

Drawn last in a rendering session so tile fills never cover the lines.
"""

import logging

from PIL import Image, ImageDraw

from room_renderer.geometry import DEFAULT_GRID, RoomGrid
from room_renderer.types import RGBA

logger = logging.getLogger(__name__)

GRID_LINE_COLOR: RGBA = (255, 255, 255, 128)


def draw_grid(
    image: Image.Image, grid: RoomGrid = DEFAULT_GRID, color: RGBA = GRID_LINE_COLOR
) -> None:
    """
    Replace every pixel on a cell boundary with ``color``.

    Lines sit at each multiple of ``grid.cell_pixel_size`` and span the full
    image. The boundaries at ``columns`` and ``rows`` fall on the exclusive
    image edge and are not drawn.
    """
    grid.check_image_size(image.size)
    width, height = image.size
    size = grid.cell_pixel_size
    # Plain Draw (no blend mode) writes the RGBA value as is.
    draw = ImageDraw.Draw(image)
    for x in range(0, width, size):
        draw.line([(x, 0), (x, height - 1)], fill=color, width=1)
    for y in range(0, height, size):
        draw.line([(0, y), (width - 1, y)], fill=color, width=1)
    logger.debug("Drew %dx%d grid overlay", grid.columns, grid.rows)
