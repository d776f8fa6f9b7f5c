"""Tests for sheetcut value objects.

Tests cover:
- Construction validation for stock, required and placed pieces
- Derived properties (areas, edges, waste)
- Empty results and zeroed statistics
- Settings defaults and validation
"""

from __future__ import annotations

import dataclasses

import pytest

from sheetcut.domain.exceptions import PackingConfigurationError, UnknownPackerError
from sheetcut.domain.value_objects import (
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


# =============================================================================
# StockPanel Tests
# =============================================================================


class TestStockPanel:
    """Tests for StockPanel dataclass."""

    def test_defaults(self) -> None:
        """Quantity defaults to one sheet without a price."""
        panel = StockPanel(length=2440, width=1220)
        assert panel.quantity == 1
        assert panel.price is None

    def test_area(self) -> None:
        """Area is length times width of a single sheet."""
        panel = StockPanel(length=2440, width=1220, quantity=3)
        assert panel.area == 2440 * 1220

    @pytest.mark.parametrize(
        "kwargs,message",
        [
            ({"length": 0, "width": 100}, "length must be positive"),
            ({"length": 100, "width": -1}, "width must be positive"),
            ({"length": 100, "width": 100, "quantity": 0}, "quantity must be at least 1"),
            ({"length": 100, "width": 100, "price": -5}, "price must be non-negative"),
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict, message: str) -> None:
        """Invalid sheets raise ValueError with a descriptive message."""
        with pytest.raises(ValueError, match=message):
            StockPanel(**kwargs)

    def test_is_frozen(self) -> None:
        """Stock panels are immutable."""
        panel = StockPanel(length=100, width=100)
        with pytest.raises(dataclasses.FrozenInstanceError):
            panel.length = 200  # type: ignore[misc]


# =============================================================================
# RequiredPanel Tests
# =============================================================================


class TestRequiredPanel:
    """Tests for RequiredPanel dataclass."""

    def test_optional_fields_default_to_none(self) -> None:
        panel = RequiredPanel(length=600, width=400)
        assert panel.label is None
        assert panel.color is None
        assert panel.quantity == 1

    def test_zero_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="Required panel length must be positive"):
            RequiredPanel(length=0, width=400)

    def test_zero_quantity_rejected(self) -> None:
        with pytest.raises(ValueError, match="quantity"):
            RequiredPanel(length=600, width=400, quantity=0)


# =============================================================================
# AdjustedPanel Tests
# =============================================================================


class TestAdjustedPanel:
    """Tests for AdjustedPanel dataclass."""

    def test_non_positive_size_allowed(self) -> None:
        """Adjusted panels accept non-positive sizes but are not placeable."""
        panel = AdjustedPanel(
            length=-2, width=10, original_length=8, original_width=20
        )
        assert not panel.is_placeable

    def test_placeable(self) -> None:
        panel = AdjustedPanel(length=5, width=10, original_length=5, original_width=10)
        assert panel.is_placeable
        assert panel.area == 50


# =============================================================================
# Cut and PanelLayout Tests
# =============================================================================


class TestCut:
    """Tests for Cut dataclass."""

    def test_edges_and_area(self) -> None:
        """Width runs along x and length along y."""
        cut = Cut(x=10, y=20, width=400, length=600)
        assert cut.right_edge == 410
        assert cut.bottom_edge == 620
        assert cut.area == 240000
        assert cut.perimeter == 2000

    def test_negative_coordinates_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            Cut(x=-1, y=0, width=10, length=10)


class TestPanelLayout:
    """Tests for PanelLayout dataclass."""

    def test_empty_layout(self) -> None:
        """A layout without cuts is empty and fully wasted."""
        layout = PanelLayout(sheet_length=1000, sheet_width=500)
        assert layout.is_empty
        assert layout.cut_count == 0
        assert layout.used_area == 0
        assert layout.waste_percentage == 100.0

    def test_waste_percentage(self) -> None:
        """Waste is the share of the sheet not covered by cuts."""
        layout = PanelLayout(
            sheet_length=1000,
            sheet_width=500,
            cuts=(
                Cut(x=0, y=0, width=500, length=500),
                Cut(x=500, y=0, width=250, length=500),
            ),
        )
        assert layout.used_area == 375000
        assert layout.waste_percentage == pytest.approx(25.0)


# =============================================================================
# CalculationResult Tests
# =============================================================================


class TestCalculationResult:
    """Tests for CalculationResult and CalculationStats."""

    def test_empty_result(self) -> None:
        """The empty result has no layouts, no leftovers and zeroed stats."""
        result = CalculationResult.empty()
        assert result.layouts == ()
        assert result.remaining_panels == ()
        assert result.stats == CalculationStats.zero()
        assert result.stats.estimated_cost is None
        assert result.placed_count == 0
        assert result.is_complete

    def test_placed_count_spans_layouts(self) -> None:
        layouts = (
            PanelLayout(1000, 500, (Cut(0, 0, 10, 10), Cut(20, 0, 10, 10))),
            PanelLayout(1000, 500, (Cut(0, 0, 10, 10),)),
        )
        leftover = AdjustedPanel(10, 10, 10, 10)
        result = CalculationResult(
            layouts=layouts,
            remaining_panels=(leftover,),
            stats=CalculationStats.zero(),
        )
        assert result.placed_count == 3
        assert not result.is_complete


# =============================================================================
# PackerSettings Tests
# =============================================================================


class TestPackerSettings:
    """Tests for PackerSettings dataclass."""

    def test_defaults(self) -> None:
        """Defaults select the grid engine with no adjustments."""
        settings = PackerSettings()
        assert settings.kerf_width == 0.0
        assert settings.consider_grain is False
        assert settings.calculate_price is False
        assert settings.packer_type is PackerType.GRID_HEURISTIC
        assert settings.fit_rule is FitRule.BEST_SHORT_SIDE_FIT
        assert settings.units is Unit.MM
        assert settings.currency is Currency.EUR

    @pytest.mark.parametrize(
        "field_name", ["kerf_width", "edge_banding_thickness", "edge_trim_amount"]
    )
    def test_negative_amounts_rejected(self, field_name: str) -> None:
        with pytest.raises(ValueError, match="must be non-negative"):
            PackerSettings(**{field_name: -1.0})

    def test_enum_values(self) -> None:
        """Enum values are the identifiers used in job files."""
        assert PackerType("grid-heuristic") is PackerType.GRID_HEURISTIC
        assert PackerType("maximal-rectangles") is PackerType.MAX_RECTS
        assert FitRule("contact-point") is FitRule.CONTACT_POINT
        assert Currency("$") is Currency.USD

    def test_identifier_strings_become_enums(self) -> None:
        """Job file identifiers are accepted in place of enum members."""
        settings = PackerSettings(
            packer_type="maximal-rectangles",
            fit_rule="bottom-left",
            units="inches",
            currency="$",
        )
        assert settings.packer_type is PackerType.MAX_RECTS
        assert settings.fit_rule is FitRule.BOTTOM_LEFT
        assert settings.units is Unit.INCHES
        assert settings.currency is Currency.USD

    def test_unknown_packer_identifier(self) -> None:
        with pytest.raises(UnknownPackerError) as exc_info:
            PackerSettings(packer_type="guillotine")

        assert exc_info.value.requested == "guillotine"
        assert exc_info.value.available == ["grid-heuristic", "maximal-rectangles"]

    def test_unknown_fit_rule_identifier(self) -> None:
        with pytest.raises(PackingConfigurationError, match="Unknown fit rule: top-right"):
            PackerSettings(fit_rule="top-right")
