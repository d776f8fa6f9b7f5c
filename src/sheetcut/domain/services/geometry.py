"""Geometry and scoring primitives shared by the placement engines.

Everything here is a pure function of its arguments:
- Rect: axis-aligned rectangle used for free and used space
- Overlap, containment and interval tests
- Free rectangle splitting and pruning for the maximal-rectangles engine
- Fit scoring for the grid engine
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..value_objects import Cut

# Grid fit scoring weights. Hand-tuned; changing them changes layouts.
EFFICIENCY_WEIGHT = 100.0
SHEET_EDGE_BONUS = 20.0
CUT_ALIGNMENT_BONUS = 15.0
CUT_ALIGNMENT_TOLERANCE = 1.0
WASTE_STRIP_PENALTY = 30.0
MIN_USEFUL_STRIP = 50.0

_EDGE_EPSILON = 1e-9

__all__ = [
    "CUT_ALIGNMENT_BONUS",
    "EFFICIENCY_WEIGHT",
    "MIN_USEFUL_STRIP",
    "Rect",
    "SHEET_EDGE_BONUS",
    "WASTE_STRIP_PENALTY",
    "common_interval_length",
    "cut_alignment_bonus",
    "grid_fit_score",
    "is_contained_in",
    "prune_contained",
    "rect_area",
    "rects_intersect",
    "sheet_edge_bonus",
    "split_free_rect",
    "waste_strip_penalty",
]


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle with its origin at the top-left corner.

    Attributes:
        x: Left edge.
        y: Top edge.
        width: Horizontal extent.
        height: Vertical extent.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return rect_area(self.width, self.height)


def rect_area(width: float, height: float) -> float:
    """Area of a width x height rectangle."""
    return width * height


def rects_intersect(a: Rect, b: Rect) -> bool:
    """Separating axis test for two rectangles.

    Rectangles that only share an edge do not intersect.
    """
    return not (
        a.x >= b.right
        or a.right <= b.x
        or a.y >= b.bottom
        or a.bottom <= b.y
    )


def is_contained_in(a: Rect, b: Rect) -> bool:
    """True if rectangle ``a`` lies entirely within rectangle ``b``."""
    return a.x >= b.x and a.y >= b.y and a.right <= b.right and a.bottom <= b.bottom


def common_interval_length(
    start1: float, end1: float, start2: float, end2: float
) -> float:
    """Length of the overlap of two 1D intervals, 0 if they are disjoint."""
    if end1 < start2 or end2 < start1:
        return 0.0
    return min(end1, end2) - max(start1, start2)


def split_free_rect(free: Rect, used: Rect) -> list[Rect]:
    """Split a free rectangle around a newly used rectangle.

    Args:
        free: A free rectangle.
        used: The rectangle just occupied by a placement.

    Returns:
        ``[free]`` unchanged if the two do not intersect, otherwise the up to
        four maximal residual rectangles above, below, left and right of
        ``used`` that remain inside ``free``.
    """
    if not rects_intersect(free, used):
        return [free]

    residuals: list[Rect] = []

    if free.y < used.y < free.bottom:
        residuals.append(Rect(free.x, free.y, free.width, used.y - free.y))

    if used.bottom < free.bottom:
        residuals.append(
            Rect(free.x, used.bottom, free.width, free.bottom - used.bottom)
        )

    if free.x < used.x < free.right:
        residuals.append(Rect(free.x, free.y, used.x - free.x, free.height))

    if used.right < free.right:
        residuals.append(
            Rect(used.right, free.y, free.right - used.right, free.height)
        )

    return residuals


def prune_contained(rects: Sequence[Rect]) -> list[Rect]:
    """Remove every rectangle contained within another one.

    Of a set of identical rectangles only the first occurrence is kept.
    Builds a new list; the input is not modified.
    """
    pruned: list[Rect] = []
    for i, rect in enumerate(rects):
        redundant = False
        for j, other in enumerate(rects):
            if i == j or not is_contained_in(rect, other):
                continue
            # Mutual containment means identical; keep the earlier one.
            if not is_contained_in(other, rect) or j < i:
                redundant = True
                break
        if not redundant:
            pruned.append(rect)
    return pruned


def _touches(a: float, b: float) -> bool:
    return abs(a - b) < _EDGE_EPSILON


def sheet_edge_bonus(
    fit: Cut, sheet_length: float, sheet_width: float
) -> float:
    """Bonus for each sheet edge the placed piece touches."""
    bonus = 0.0
    if _touches(fit.x, 0):
        bonus += SHEET_EDGE_BONUS
    if _touches(fit.y, 0):
        bonus += SHEET_EDGE_BONUS
    if _touches(fit.right_edge, sheet_length):
        bonus += SHEET_EDGE_BONUS
    if _touches(fit.bottom_edge, sheet_width):
        bonus += SHEET_EDGE_BONUS
    return bonus


def cut_alignment_bonus(fit: Cut, existing_cuts: Iterable[Cut]) -> float:
    """Bonus for each existing cut edge the placed piece lines up with."""
    bonus = 0.0
    for cut in existing_cuts:
        if abs(fit.y - cut.bottom_edge) < CUT_ALIGNMENT_TOLERANCE:
            bonus += CUT_ALIGNMENT_BONUS
        if abs(fit.bottom_edge - cut.y) < CUT_ALIGNMENT_TOLERANCE:
            bonus += CUT_ALIGNMENT_BONUS
        if abs(fit.x - cut.right_edge) < CUT_ALIGNMENT_TOLERANCE:
            bonus += CUT_ALIGNMENT_BONUS
        if abs(fit.right_edge - cut.x) < CUT_ALIGNMENT_TOLERANCE:
            bonus += CUT_ALIGNMENT_BONUS
    return bonus


def waste_strip_penalty(
    fit: Cut, sheet_length: float, sheet_width: float
) -> float:
    """Penalty for each side leaving a strip too narrow to reuse."""
    gaps = (
        fit.x,
        sheet_length - fit.right_edge,
        fit.y,
        sheet_width - fit.bottom_edge,
    )
    return sum(WASTE_STRIP_PENALTY for gap in gaps if 0 < gap < MIN_USEFUL_STRIP)


def grid_fit_score(
    fit: Cut,
    existing_cuts: Sequence[Cut],
    sheet_length: float,
    sheet_width: float,
) -> float:
    """Score a candidate placement for the grid engine. Higher is better.

    The score combines the share of the sheet the piece covers, bonuses for
    touching sheet edges and lining up with already placed cuts, and a
    penalty for leaving narrow waste strips.

    Args:
        fit: Candidate placement.
        existing_cuts: Cuts already placed on the same sheet.
        sheet_length: Sheet extent along x.
        sheet_width: Sheet extent along y.

    Returns:
        The candidate's score.
    """
    efficiency = fit.area / rect_area(sheet_length, sheet_width)
    return (
        efficiency * EFFICIENCY_WEIGHT
        + sheet_edge_bonus(fit, sheet_length, sheet_width)
        + cut_alignment_bonus(fit, existing_cuts)
        - waste_strip_penalty(fit, sheet_length, sheet_width)
    )
