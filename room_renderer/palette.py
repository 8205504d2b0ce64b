"""Tile palette and fill rasterisation.

A :class:`Palette` maps every member of each tile category to a
:class:`FillSpec`. Tables are persistent maps and are checked for totality at
construction time, so a lookup can never fall through to a default.

Fill specs rasterise to square RGBA tiles that cover the whole cell:

* ``SOLID`` paints the base color only.
* ``BORDER`` frames the cell with the accent color.
* ``DOT`` paints a centered accent disc.
* ``RING`` paints a centered accent annulus.
"""

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Mapping, Optional, Type

import numpy as np
import numpy.typing as npt
from PIL import Image
from pyrsistent import pmap
from pyrsistent.typing import PMap

from room_renderer.types import RGBA, BuildableStructure, Pattern, Resource, Terrain

BoolArray = npt.NDArray[np.bool_]
UInt8Array = npt.NDArray[np.uint8]


@dataclass(frozen=True)
class FillSpec:
    """How a tile paints its cell.

    Attributes:
        color: Base RGBA color covering the whole cell.
        pattern: Shape drawn on top of the base.
        accent: RGBA color of the pattern shape; required unless ``SOLID``.
    """

    color: RGBA
    pattern: Pattern = Pattern.SOLID
    accent: Optional[RGBA] = None

    def __post_init__(self) -> None:
        if self.pattern != Pattern.SOLID and self.accent is None:
            raise ValueError(f"Pattern {self.pattern} requires an accent color")


def _check_total(
    table: Mapping[Enum, FillSpec], enum_type: Type[Enum], category: str
) -> None:
    unknown = [key for key in table if not isinstance(key, enum_type)]
    if unknown:
        raise ValueError(f"{category} palette has unknown entries: {unknown}")
    missing = [member.name for member in enum_type if member not in table]
    if missing:
        raise ValueError(
            f"{category} palette is missing entries for: {', '.join(missing)}"
        )


@dataclass(frozen=True)
class Palette:
    """Total mapping from tile variants to fills, one table per category."""

    terrain: PMap[Terrain, FillSpec]
    resource: PMap[Resource, FillSpec]
    structure: PMap[BuildableStructure, FillSpec]

    def __post_init__(self) -> None:
        # Accept plain mappings but store them frozen.
        object.__setattr__(self, "terrain", pmap(self.terrain))
        object.__setattr__(self, "resource", pmap(self.resource))
        object.__setattr__(self, "structure", pmap(self.structure))
        _check_total(self.terrain, Terrain, "Terrain")
        _check_total(self.resource, Resource, "Resource")
        _check_total(self.structure, BuildableStructure, "BuildableStructure")

    def fill_for_terrain(self, terrain: Terrain) -> FillSpec:
        return self.terrain[terrain]

    def fill_for_resource(self, resource: Resource) -> FillSpec:
        return self.resource[resource]

    def fill_for_structure(self, structure: BuildableStructure) -> FillSpec:
        return self.structure[structure]


PLAIN_COLOR: RGBA = (43, 43, 43, 255)
SWAMP_COLOR: RGBA = (35, 37, 19, 255)
WALL_COLOR: RGBA = (17, 17, 17, 255)


def _on_plain(pattern: Pattern, accent: RGBA) -> FillSpec:
    return FillSpec(color=PLAIN_COLOR, pattern=pattern, accent=accent)


DEFAULT_TERRAIN_FILLS: PMap[Terrain, FillSpec] = pmap(
    {
        Terrain.PLAIN: FillSpec(PLAIN_COLOR),
        Terrain.SWAMP: FillSpec(SWAMP_COLOR),
        Terrain.WALL: FillSpec(WALL_COLOR),
    }
)

DEFAULT_RESOURCE_FILLS: PMap[Resource, FillSpec] = pmap(
    {
        Resource.SOURCE: _on_plain(Pattern.DOT, (255, 231, 66, 255)),
        Resource.HYDROGEN: _on_plain(Pattern.RING, (220, 220, 220, 255)),
        Resource.OXYGEN: _on_plain(Pattern.RING, (180, 180, 180, 255)),
        Resource.KEANIUM: _on_plain(Pattern.RING, (160, 113, 255, 255)),
        Resource.LEMERGIUM: _on_plain(Pattern.RING, (0, 244, 162, 255)),
        Resource.UTRIUM: _on_plain(Pattern.RING, (80, 215, 249, 255)),
        Resource.ZYNTHIUM: _on_plain(Pattern.RING, (253, 210, 128, 255)),
        Resource.CATALYST: _on_plain(Pattern.RING, (255, 102, 102, 255)),
    }
)

DEFAULT_STRUCTURE_FILLS: PMap[BuildableStructure, FillSpec] = pmap(
    {
        BuildableStructure.CONSTRUCTED_WALL: FillSpec((60, 60, 60, 255)),
        BuildableStructure.CONTAINER: _on_plain(Pattern.BORDER, (177, 149, 82, 255)),
        BuildableStructure.CONTROLLER: _on_plain(Pattern.RING, (150, 150, 255, 255)),
        BuildableStructure.EXTENSION: _on_plain(Pattern.DOT, (240, 240, 240, 255)),
        BuildableStructure.EXTRACTOR: _on_plain(Pattern.RING, (120, 120, 120, 255)),
        BuildableStructure.FACTORY: _on_plain(Pattern.BORDER, (170, 0, 170, 255)),
        BuildableStructure.LAB: _on_plain(Pattern.DOT, (119, 119, 255, 255)),
        BuildableStructure.LINK: _on_plain(Pattern.DOT, (255, 170, 0, 255)),
        BuildableStructure.NUKER: _on_plain(Pattern.DOT, (255, 50, 50, 255)),
        BuildableStructure.OBSERVER: _on_plain(Pattern.RING, (140, 220, 140, 255)),
        BuildableStructure.POWER_SPAWN: _on_plain(Pattern.RING, (255, 60, 60, 255)),
        BuildableStructure.RAMPART: _on_plain(Pattern.BORDER, (0, 160, 60, 255)),
        BuildableStructure.ROAD: FillSpec((102, 102, 102, 255)),
        BuildableStructure.SPAWN: _on_plain(Pattern.RING, (255, 231, 66, 255)),
        BuildableStructure.STORAGE: _on_plain(Pattern.BORDER, (255, 231, 66, 255)),
        BuildableStructure.TERMINAL: _on_plain(Pattern.BORDER, (160, 160, 220, 255)),
        BuildableStructure.TOWER: _on_plain(Pattern.DOT, (150, 220, 255, 255)),
    }
)

DEFAULT_PALETTE = Palette(
    terrain=DEFAULT_TERRAIN_FILLS,
    resource=DEFAULT_RESOURCE_FILLS,
    structure=DEFAULT_STRUCTURE_FILLS,
)


def pattern_mask(pattern: Pattern, size: int) -> BoolArray:
    """Return a ``size x size`` mask of the pixels painted with the accent."""
    yy, xx = np.mgrid[0:size, 0:size]
    center = (size - 1) / 2.0
    dist2 = (xx - center) ** 2 + (yy - center) ** 2
    if pattern == Pattern.SOLID:
        return np.zeros((size, size), dtype=np.bool_)
    if pattern == Pattern.BORDER:
        t = max(1, size // 8)
        return (xx < t) | (yy < t) | (xx >= size - t) | (yy >= size - t)
    if pattern == Pattern.DOT:
        return dist2 <= (size * 0.3) ** 2
    if pattern == Pattern.RING:
        return (dist2 <= (size * 0.4) ** 2) & (dist2 >= (size * 0.25) ** 2)
    raise ValueError(f"Unsupported pattern: {pattern}")


@lru_cache(maxsize=256)
def render_fill(fill: FillSpec, size: int) -> Image.Image:
    """
    Rasterise ``fill`` into a ``size x size`` RGBA tile. Tiles are cached and
    shared; treat them as read-only.
    """
    arr: UInt8Array = np.empty((size, size, 4), dtype=np.uint8)
    arr[...] = fill.color
    if fill.accent is not None:
        arr[pattern_mask(fill.pattern, size)] = fill.accent
    return Image.fromarray(arr)
