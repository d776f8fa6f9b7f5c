"""Value objects for sheet cutting optimization.

This module defines the immutable data structures exchanged between the
packing engines and their callers: stock sheets, required pieces, the
adjusted pieces actually placed, and the per-sheet layouts produced by a
calculation.

All dataclasses are frozen (immutable) so results can be shared freely
once a calculation has returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .exceptions import PackingConfigurationError, UnknownPackerError


class PackerType(str, Enum):
    """Placement engines available to the packer factory.

    Attributes:
        GRID_HEURISTIC: Greedy placement over a coarse occupancy grid.
        MAX_RECTS: Maximal free rectangles with a selectable fit rule.
    """

    GRID_HEURISTIC = "grid-heuristic"
    MAX_RECTS = "maximal-rectangles"


class FitRule(str, Enum):
    """Free rectangle selection rules for the maximal-rectangles engine.

    Attributes:
        BEST_SHORT_SIDE_FIT: Minimize the smaller leftover margin.
        BEST_LONG_SIDE_FIT: Minimize the larger leftover margin.
        BEST_AREA_FIT: Minimize the leftover area of the free rectangle.
        BOTTOM_LEFT: Minimize the resulting top edge, then x (Tetris placement).
        CONTACT_POINT: Maximize edge contact with the sheet and placed pieces.
    """

    BEST_SHORT_SIDE_FIT = "best-short-side-fit"
    BEST_LONG_SIDE_FIT = "best-long-side-fit"
    BEST_AREA_FIT = "best-area-fit"
    BOTTOM_LEFT = "bottom-left"
    CONTACT_POINT = "contact-point"


class Unit(str, Enum):
    """Display unit for all lengths. The engines never convert between units."""

    MM = "mm"
    CM = "cm"
    INCHES = "inches"


class Currency(str, Enum):
    """Currency symbol used when reporting estimated cost."""

    EUR = "€"
    USD = "$"
    YEN = "¥"


@dataclass(frozen=True)
class StockPanel:
    """A stock sheet available for cutting.

    Attributes:
        length: Sheet length (horizontal extent when laid out).
        width: Sheet width (vertical extent when laid out).
        quantity: Number of identical sheets available.
        price: Optional cost per sheet.
    """

    length: float
    width: float
    quantity: int = 1
    price: float | None = None

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Stock panel length must be positive")
        if self.width <= 0:
            raise ValueError("Stock panel width must be positive")
        if self.quantity < 1:
            raise ValueError("Stock panel quantity must be at least 1")
        if self.price is not None and self.price < 0:
            raise ValueError("Stock panel price must be non-negative")

    @property
    def area(self) -> float:
        """Area of a single sheet."""
        return self.length * self.width


@dataclass(frozen=True)
class RequiredPanel:
    """A finished piece that must be cut from stock.

    Attributes:
        length: Nominal length before edge adjustments.
        width: Nominal width before edge adjustments.
        quantity: Number of identical pieces required.
        label: Optional display name.
        color: Optional display color, passed through to cuts untouched.
    """

    length: float
    width: float
    quantity: int = 1
    label: str | None = None
    color: str | None = None

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("Required panel length must be positive")
        if self.width <= 0:
            raise ValueError("Required panel width must be positive")
        if self.quantity < 1:
            raise ValueError("Required panel quantity must be at least 1")

    @property
    def area(self) -> float:
        """Nominal area of a single piece."""
        return self.length * self.width


@dataclass(frozen=True)
class AdjustedPanel:
    """One unit of a required panel after trimming and banding adjustments.

    Adjusted dimensions are not validated: heavy banding can drive them to
    zero or below, in which case placement always rejects the unit.

    Attributes:
        length: Length actually placed.
        width: Width actually placed.
        original_length: Nominal length as requested.
        original_width: Nominal width as requested.
        can_rotate: Whether the unit may be turned 90 degrees.
        label: Display name of this unit.
        color: Display color.
    """

    length: float
    width: float
    original_length: float
    original_width: float
    can_rotate: bool = True
    label: str | None = None
    color: str | None = None

    @property
    def area(self) -> float:
        """Adjusted area of the unit."""
        return self.length * self.width

    @property
    def is_placeable(self) -> bool:
        """True if both adjusted dimensions are positive."""
        return self.length > 0 and self.width > 0


@dataclass(frozen=True)
class Cut:
    """A piece placed on a sheet.

    Coordinates are measured from the top-left corner of the sheet; ``x``
    runs along the sheet length and ``y`` along the sheet width.

    Attributes:
        x: Offset along the sheet length.
        y: Offset along the sheet width.
        width: Extent along the sheet length, as placed.
        length: Extent along the sheet width, as placed.
        label: Display name copied from the piece.
        color: Display color copied from the piece.
        rotated: True if the piece was turned 90 degrees.
    """

    x: float
    y: float
    width: float
    length: float
    label: str | None = None
    color: str | None = None
    rotated: bool = False

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError("Cut coordinates must be non-negative")

    @property
    def right_edge(self) -> float:
        """X coordinate of the far edge along the sheet length."""
        return self.x + self.width

    @property
    def bottom_edge(self) -> float:
        """Y coordinate of the far edge along the sheet width."""
        return self.y + self.length

    @property
    def area(self) -> float:
        return self.width * self.length

    @property
    def perimeter(self) -> float:
        return 2 * (self.width + self.length)


@dataclass(frozen=True)
class PanelLayout:
    """Cuts placed on one opened sheet instance.

    Attributes:
        sheet_length: Length of the sheet the cuts were placed on.
        sheet_width: Width of the sheet the cuts were placed on.
        cuts: Cuts in placement order.
    """

    sheet_length: float
    sheet_width: float
    cuts: tuple[Cut, ...] = ()

    @property
    def cut_count(self) -> int:
        return len(self.cuts)

    @property
    def is_empty(self) -> bool:
        return not self.cuts

    @property
    def used_area(self) -> float:
        """Total area covered by cuts on this sheet."""
        return sum(cut.area for cut in self.cuts)

    @property
    def waste_percentage(self) -> float:
        """Percentage of the sheet not covered by cuts."""
        sheet_area = self.sheet_length * self.sheet_width
        if sheet_area == 0:
            return 0.0
        return (1 - self.used_area / sheet_area) * 100


@dataclass(frozen=True)
class CalculationStats:
    """Aggregate figures over a complete calculation.

    Attributes:
        total_stock_area: Area of all opened sheet instances.
        total_required_area: Adjusted area of all required units.
        material_yield: Required area over stock area, as a percentage.
        stock_panels_used: Number of sheets that received at least one cut.
        total_cut_length: Sum of the perimeters of all cuts.
        estimated_cost: Price of the opened sheets, or None when pricing is off.
    """

    total_stock_area: float
    total_required_area: float
    material_yield: float
    stock_panels_used: int
    total_cut_length: float
    estimated_cost: float | None = None

    @classmethod
    def zero(cls) -> CalculationStats:
        """Statistics for a calculation that produced nothing."""
        return cls(
            total_stock_area=0.0,
            total_required_area=0.0,
            material_yield=0.0,
            stock_panels_used=0,
            total_cut_length=0.0,
        )


@dataclass(frozen=True)
class CalculationResult:
    """Complete result of one ``pack()`` call.

    Attributes:
        layouts: One layout per opened sheet instance, in opening order.
        remaining_panels: Units that could not be placed on any sheet.
        stats: Aggregate statistics.
    """

    layouts: tuple[PanelLayout, ...]
    remaining_panels: tuple[AdjustedPanel, ...]
    stats: CalculationStats

    @classmethod
    def empty(cls) -> CalculationResult:
        """An empty, zeroed result."""
        return cls(layouts=(), remaining_panels=(), stats=CalculationStats.zero())

    @property
    def placed_count(self) -> int:
        """Number of units placed across all sheets."""
        return sum(layout.cut_count for layout in self.layouts)

    @property
    def is_complete(self) -> bool:
        """True if every required unit was placed."""
        return not self.remaining_panels


@dataclass(frozen=True)
class PackerSettings:
    """Settings for a single packing calculation.

    Attributes:
        kerf_width: Blade clearance added around every placed piece.
        consider_grain: If True, pieces may not be rotated.
        calculate_price: Whether to aggregate the cost of opened sheets.
        include_edge_banding: Whether to shrink pieces for edge banding.
        edge_banding_thickness: Banding thickness removed from each edge.
        include_edge_trimming: Whether to grow pieces for a trim cut.
        edge_trim_amount: Trim allowance added to each edge.
        packer_type: Placement engine to use; identifier strings are accepted.
        fit_rule: Fit rule used by the maximal-rectangles engine; identifier
            strings are accepted.
        units: Display unit for reports.
        currency: Display currency for reports.
    """

    kerf_width: float = 0.0
    consider_grain: bool = False
    calculate_price: bool = False
    include_edge_banding: bool = False
    edge_banding_thickness: float = 0.0
    include_edge_trimming: bool = False
    edge_trim_amount: float = 0.0
    packer_type: PackerType = PackerType.GRID_HEURISTIC
    fit_rule: FitRule = FitRule.BEST_SHORT_SIDE_FIT
    units: Unit = Unit.MM
    currency: Currency = Currency.EUR

    def __post_init__(self) -> None:
        if self.kerf_width < 0:
            raise ValueError("Kerf width must be non-negative")
        if self.edge_banding_thickness < 0:
            raise ValueError("Edge banding thickness must be non-negative")
        if self.edge_trim_amount < 0:
            raise ValueError("Edge trim amount must be non-negative")

        # Plain identifiers, as found in job files, become their enum members.
        try:
            packer_type = PackerType(self.packer_type)
        except ValueError:
            raise UnknownPackerError(
                str(self.packer_type), [member.value for member in PackerType]
            ) from None
        try:
            fit_rule = FitRule(self.fit_rule)
        except ValueError:
            raise PackingConfigurationError(
                f"Unknown fit rule: {self.fit_rule}. "
                f"Available rules: {', '.join(rule.value for rule in FitRule)}"
            ) from None
        object.__setattr__(self, "packer_type", packer_type)
        object.__setattr__(self, "fit_rule", fit_rule)
        object.__setattr__(self, "units", Unit(self.units))
        object.__setattr__(self, "currency", Currency(self.currency))


__all__ = [
    "AdjustedPanel",
    "CalculationResult",
    "CalculationStats",
    "Currency",
    "Cut",
    "FitRule",
    "PackerSettings",
    "PackerType",
    "PanelLayout",
    "RequiredPanel",
    "StockPanel",
    "Unit",
]
