"""Domain layer - value objects, exceptions and pure packing services."""

from .exceptions import GridCapacityError, PackingConfigurationError, UnknownPackerError
from .services import PanelAdjuster, calculate_stats, expand_stock
from .value_objects import (
    AdjustedPanel,
    CalculationResult,
    CalculationStats,
    Currency,
    Cut,
    FitRule,
    PackerSettings,
    PackerType,
    PanelLayout,
    RequiredPanel,
    StockPanel,
    Unit,
)

__all__ = [
    "AdjustedPanel",
    "CalculationResult",
    "CalculationStats",
    "Currency",
    "Cut",
    "FitRule",
    "GridCapacityError",
    "PackerSettings",
    "PackerType",
    "PackingConfigurationError",
    "PanelAdjuster",
    "PanelLayout",
    "RequiredPanel",
    "StockPanel",
    "Unit",
    "UnknownPackerError",
    "calculate_stats",
    "expand_stock",
]
