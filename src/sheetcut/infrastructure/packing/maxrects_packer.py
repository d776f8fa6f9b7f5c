"""Maximal-rectangles sheet packing.

Free space on each sheet is tracked as a list of possibly overlapping
maximal rectangles. Every placement splits the free rectangles it
intersects and drops those that end up contained in another one. Where a
piece goes is decided by a selectable fit rule.

Kerf is modelled as padding: every piece is inserted with the kerf added
to both dimensions, and the bin is enlarged by one kerf so a piece may
sit flush against the far sheet edges.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterator

from sheetcut.contracts.packer import Packer
from sheetcut.domain.services.geometry import (
    Rect,
    common_interval_length,
    prune_contained,
    rects_intersect,
    split_free_rect,
)
from sheetcut.domain.services.panel_adjuster import PanelAdjuster
from sheetcut.domain.services.statistics import calculate_stats, expand_stock
from sheetcut.domain.value_objects import (
    AdjustedPanel,
    CalculationResult,
    Cut,
    FitRule,
    PackerType,
    PanelLayout,
    StockPanel,
)

from .factory import PackerFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    """Where a rectangle went in a bin.

    Attributes:
        rect: Occupied rectangle, padding included.
        rotated: True if the rectangle was inserted with its sides swapped.
    """

    rect: Rect
    rotated: bool = False


def _same(a: float, b: float) -> bool:
    return math.isclose(a, b, abs_tol=1e-9)


class MaxRectsBin:
    """A single bin tracked as maximal free rectangles.

    Attributes:
        bin_width: Horizontal extent of the bin, padding included.
        bin_height: Vertical extent of the bin, padding included.
        free_rects: Current maximal free rectangles.
        used_rects: Rectangles placed so far, in placement order.
    """

    def __init__(self, width: float, height: float, padding: float = 0.0) -> None:
        """Create an empty bin.

        Args:
            width: Sheet extent along x.
            height: Sheet extent along y.
            padding: Clearance every inserted rectangle carries; the bin is
                enlarged by the same amount.
        """
        self.bin_width = width + padding
        self.bin_height = height + padding
        self.padding = padding
        self.free_rects: list[Rect] = [Rect(0.0, 0.0, self.bin_width, self.bin_height)]
        self.used_rects: list[Rect] = []

    def insert(
        self,
        width: float,
        height: float,
        rule: FitRule,
        allow_rotation: bool = True,
    ) -> Placement | None:
        """Place a rectangle at the best position under a fit rule.

        Args:
            width: Rectangle width, padding included.
            height: Rectangle height, padding included.
            rule: Fit rule ranking candidate positions.
            allow_rotation: Whether the swapped orientation may be used.

        Returns:
            The placement, or None if no free rectangle can hold it.
        """
        placement = self.find_position(width, height, rule, allow_rotation)
        if placement is not None:
            self.place(placement.rect)
        return placement

    def find_position(
        self,
        width: float,
        height: float,
        rule: FitRule,
        allow_rotation: bool = True,
    ) -> Placement | None:
        """Best position for a rectangle without placing it.

        Candidates are the top-left corners of free rectangles, upright
        before rotated. The first candidate with the lowest score wins.
        """
        best: Placement | None = None
        best_score = (math.inf, math.inf)

        for free in self.free_rects:
            for w, h, rotated in _orientations(width, height, allow_rotation):
                if free.width < w or free.height < h:
                    continue
                score = self._score(free, w, h, rule)
                if score < best_score:
                    best_score = score
                    best = Placement(Rect(free.x, free.y, w, h), rotated)

        return best

    def place(self, used: Rect) -> None:
        """Occupy a rectangle and update the free list."""
        kept: list[Rect] = []
        split: list[Rect] = []
        for free in self.free_rects:
            if rects_intersect(free, used):
                split.extend(split_free_rect(free, used))
            else:
                kept.append(free)

        self.free_rects = prune_contained(kept + split)
        self.used_rects.append(used)

    def occupancy(self) -> float:
        """Share of the bin covered by used rectangles."""
        used_area = sum(rect.area for rect in self.used_rects)
        return used_area / (self.bin_width * self.bin_height)

    def _score(
        self, free: Rect, width: float, height: float, rule: FitRule
    ) -> tuple[float, float]:
        """Score a candidate; lower is better."""
        leftover_x = free.width - width
        leftover_y = free.height - height
        short_side = min(leftover_x, leftover_y)
        long_side = max(leftover_x, leftover_y)

        if rule is FitRule.BEST_SHORT_SIDE_FIT:
            return (short_side, long_side)
        if rule is FitRule.BEST_LONG_SIDE_FIT:
            return (long_side, short_side)
        if rule is FitRule.BEST_AREA_FIT:
            return (free.area - width * height, short_side)
        if rule is FitRule.BOTTOM_LEFT:
            return (free.y + height, free.x)
        if rule is FitRule.CONTACT_POINT:
            return (-self.contact_score(free.x, free.y, width, height), 0.0)
        raise ValueError(f"Unsupported fit rule: {rule}")

    def contact_score(self, x: float, y: float, width: float, height: float) -> float:
        """Length of rectangle perimeter touching the bin edges or used rectangles."""
        score = 0.0
        if _same(x, 0) or _same(x + width, self.bin_width):
            score += height
        if _same(y, 0) or _same(y + height, self.bin_height):
            score += width

        for used in self.used_rects:
            if _same(used.x, x + width) or _same(used.right, x):
                score += common_interval_length(used.y, used.bottom, y, y + height)
            if _same(used.y, y + height) or _same(used.bottom, y):
                score += common_interval_length(used.x, used.right, x, x + width)
        return score


def _orientations(
    width: float, height: float, allow_rotation: bool
) -> Iterator[tuple[float, float, bool]]:
    yield width, height, False
    if allow_rotation:
        yield height, width, True


@PackerFactory.register(PackerType.MAX_RECTS)
class MaxRectsPacker(Packer):
    """Maximal-rectangles packer.

    Required panels are processed in the order they were added. On each
    sheet, all outstanding units of a panel are inserted before moving on
    to the next panel; the first unit that does not fit ends that panel's
    turn on the sheet. Every stock instance is opened, in stock order, and
    recorded even if nothing lands on it.
    """

    def pack(self) -> CalculationResult:
        """Pack the accumulated required panels onto the accumulated stock.

        Returns:
            CalculationResult with one layout per sheet instance, the units
            that could not be placed, and aggregate statistics.
        """
        sheets = expand_stock(self._stock_panels)
        adjuster = PanelAdjuster(self.settings)
        pending = [adjuster.expand(panel) for panel in self._required_panels]
        units = [unit for queue in pending for unit in queue]

        logger.debug(
            "Packing %d units onto %d sheets using %s",
            len(units),
            len(sheets),
            self.settings.fit_rule.value,
        )

        layouts: list[PanelLayout] = []
        for sheet in sheets:
            cuts, occupancy = self._pack_sheet(sheet, pending)
            layouts.append(
                PanelLayout(
                    sheet_length=sheet.length,
                    sheet_width=sheet.width,
                    cuts=tuple(cuts),
                )
            )
            logger.debug(
                "Sheet %d (%sx%s): %d cuts, %.1f%% of padded bin occupied",
                len(layouts) - 1,
                sheet.length,
                sheet.width,
                len(cuts),
                occupancy * 100,
            )

        remaining = [unit for queue in pending for unit in queue]
        if remaining:
            logger.warning("%d units could not be placed", len(remaining))

        return CalculationResult(
            layouts=tuple(layouts),
            remaining_panels=tuple(remaining),
            stats=calculate_stats(layouts, sheets, units, self.settings),
        )

    def _pack_sheet(
        self, sheet: StockPanel, pending: list[list[AdjustedPanel]]
    ) -> tuple[list[Cut], float]:
        """Fill one sheet, popping placed units off the per-panel queues.

        Returns:
            Tuple of (cuts in placement order, share of the bin occupied).
        """
        kerf = self.settings.kerf_width
        bin_ = MaxRectsBin(sheet.length, sheet.width, padding=kerf)
        cuts: list[Cut] = []

        for queue in pending:
            while queue:
                unit = queue[0]
                if not unit.is_placeable:
                    break
                placement = bin_.insert(
                    unit.width + kerf,
                    unit.length + kerf,
                    self.settings.fit_rule,
                    allow_rotation=unit.can_rotate,
                )
                if placement is None:
                    break
                cuts.append(self._to_cut(placement, unit))
                queue.pop(0)

        return cuts, bin_.occupancy()

    def _to_cut(self, placement: Placement, unit: AdjustedPanel) -> Cut:
        kerf = self.settings.kerf_width
        return Cut(
            x=placement.rect.x,
            y=placement.rect.y,
            width=placement.rect.width - kerf,
            length=placement.rect.height - kerf,
            label=unit.label,
            color=unit.color,
            rotated=placement.rotated,
        )


__all__ = ["MaxRectsBin", "MaxRectsPacker", "Placement"]
