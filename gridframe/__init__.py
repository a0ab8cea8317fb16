"""Lay out and frame tabular data for display in the terminal."""

from gridframe.border import Border, Borders, HorizontalLine, VerticalLine
from gridframe.config import GridConfig
from gridframe.data_structures import DiInt, Offset, Position, Shape
from gridframe.dimension import SpannedGridDimension, dimensions
from gridframe.entity import Entity, EntityMap
from gridframe.grid import Grid
from gridframe.outline import highlight, outline
from gridframe.records import IterRecords, ListRecords

__app_name__ = "gridframe"
__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    "Border",
    "Borders",
    "DiInt",
    "Entity",
    "EntityMap",
    "Grid",
    "GridConfig",
    "HorizontalLine",
    "IterRecords",
    "ListRecords",
    "Offset",
    "Position",
    "Shape",
    "SpannedGridDimension",
    "VerticalLine",
    "dimensions",
    "highlight",
    "outline",
]
