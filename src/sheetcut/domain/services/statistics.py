"""Post-hoc statistics over a finished calculation."""

from __future__ import annotations

from typing import Sequence

from ..value_objects import (
    AdjustedPanel,
    CalculationStats,
    PackerSettings,
    PanelLayout,
    StockPanel,
)

__all__ = ["calculate_stats", "expand_stock"]


def expand_stock(stock_panels: Sequence[StockPanel]) -> list[StockPanel]:
    """One entry per sheet instance, in caller order, quantity expanded in place."""
    return [panel for panel in stock_panels for _ in range(panel.quantity)]


def calculate_stats(
    layouts: Sequence[PanelLayout],
    opened_sheets: Sequence[StockPanel],
    required_units: Sequence[AdjustedPanel],
    settings: PackerSettings,
) -> CalculationStats:
    """Compute aggregate statistics for a calculation.

    Args:
        layouts: Layouts of the opened sheet instances.
        opened_sheets: The sheet instance behind each layout, same order.
        required_units: Every required unit, placed or not.
        settings: Calculation settings; controls cost aggregation.

    Returns:
        Statistics for the calculation.
    """
    total_stock_area = sum(sheet.area for sheet in opened_sheets)
    total_required_area = sum(unit.area for unit in required_units)
    material_yield = (
        total_required_area / total_stock_area * 100 if total_stock_area > 0 else 0.0
    )

    estimated_cost = None
    if settings.calculate_price:
        estimated_cost = sum(sheet.price or 0.0 for sheet in opened_sheets)

    return CalculationStats(
        total_stock_area=total_stock_area,
        total_required_area=total_required_area,
        material_yield=material_yield,
        stock_panels_used=sum(1 for layout in layouts if not layout.is_empty),
        total_cut_length=sum(
            cut.perimeter for layout in layouts for cut in layout.cuts
        ),
        estimated_cost=estimated_cost,
    )
