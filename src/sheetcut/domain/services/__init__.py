"""Domain services for sheet cutting.

This package provides the pure building blocks shared by the placement
engines:
- geometry: rectangle tests, free space splitting and grid fit scoring
- panel_adjuster: edge trimming and banding adjustments
- statistics: aggregate figures over a finished calculation
"""

from .geometry import (
    Rect,
    common_interval_length,
    grid_fit_score,
    is_contained_in,
    prune_contained,
    rect_area,
    rects_intersect,
    split_free_rect,
)
from .panel_adjuster import PanelAdjuster
from .statistics import calculate_stats, expand_stock

__all__ = [
    "PanelAdjuster",
    "Rect",
    "calculate_stats",
    "common_interval_length",
    "expand_stock",
    "grid_fit_score",
    "is_contained_in",
    "prune_contained",
    "rect_area",
    "rects_intersect",
    "split_free_rect",
]
