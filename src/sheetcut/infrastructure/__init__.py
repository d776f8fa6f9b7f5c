"""Infrastructure layer - placement engines and output formatters."""

from .packing import (
    GridHeuristicPacker,
    MaxRectsBin,
    MaxRectsPacker,
    OccupancyGrid,
    PackerFactory,
)
from .formatters import JsonExporter, LayoutReportFormatter, result_to_dict

__all__ = [
    # Packing
    "GridHeuristicPacker",
    "MaxRectsBin",
    "MaxRectsPacker",
    "OccupancyGrid",
    "PackerFactory",
    # Formatters
    "JsonExporter",
    "LayoutReportFormatter",
    "result_to_dict",
]
