"""Tile categories and common type aliases.

The three tile categories are closed enumerations. Every member must have an
entry in each :class:`~room_renderer.palette.Palette`; adding a member without
one makes palette construction fail instead of rendering a blank tile.
"""

from enum import StrEnum, auto
from typing import Tuple


RGBA = Tuple[int, int, int, int]
CellRect = Tuple[int, int, int, int]


class Terrain(StrEnum):
    """Base ground classification of a cell."""

    PLAIN = auto()
    SWAMP = auto()
    WALL = auto()


class Resource(StrEnum):
    """Harvestable map features drawn over terrain."""

    SOURCE = auto()
    HYDROGEN = auto()
    OXYGEN = auto()
    KEANIUM = auto()
    LEMERGIUM = auto()
    UTRIUM = auto()
    ZYNTHIUM = auto()
    CATALYST = auto()


class BuildableStructure(StrEnum):
    """Constructible objects drawn over terrain and resources."""

    CONSTRUCTED_WALL = auto()
    CONTAINER = auto()
    CONTROLLER = auto()
    EXTENSION = auto()
    EXTRACTOR = auto()
    FACTORY = auto()
    LAB = auto()
    LINK = auto()
    NUKER = auto()
    OBSERVER = auto()
    POWER_SPAWN = auto()
    RAMPART = auto()
    ROAD = auto()
    SPAWN = auto()
    STORAGE = auto()
    TERMINAL = auto()
    TOWER = auto()


class Pattern(StrEnum):
    """Procedural shape painted with a fill's accent color."""

    SOLID = auto()
    BORDER = auto()
    DOT = auto()
    RING = auto()
