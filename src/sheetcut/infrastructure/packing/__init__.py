"""Placement engines and the factory that selects between them.

Importing this package registers every built-in engine with
``PackerFactory``.
"""

from .factory import PackerFactory

# Engine modules register themselves on import; keep them after the factory.
from .grid_packer import GRID_CELL_SIZE, MAX_GRID_CELLS, GridHeuristicPacker, OccupancyGrid
from .maxrects_packer import MaxRectsBin, MaxRectsPacker, Placement

__all__ = [
    "GRID_CELL_SIZE",
    "GridHeuristicPacker",
    "MAX_GRID_CELLS",
    "MaxRectsBin",
    "MaxRectsPacker",
    "OccupancyGrid",
    "PackerFactory",
    "Placement",
]
