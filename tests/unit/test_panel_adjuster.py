"""Tests for PanelAdjuster edge trimming, banding and unit expansion."""

from __future__ import annotations

import logging

import pytest

from sheetcut.domain.services.panel_adjuster import PanelAdjuster
from sheetcut.domain.value_objects import PackerSettings, RequiredPanel


@pytest.fixture
def panel() -> RequiredPanel:
    return RequiredPanel(length=600, width=400, label="Shelf", color="#aabbcc")


class TestAdjust:
    """Tests for single panel adjustment."""

    def test_no_adjustments(self, panel: RequiredPanel) -> None:
        """Without trimming or banding the size is unchanged."""
        adjusted = PanelAdjuster(PackerSettings()).adjust(panel)
        assert (adjusted.length, adjusted.width) == (600, 400)
        assert (adjusted.original_length, adjusted.original_width) == (600, 400)
        assert adjusted.label == "Shelf"
        assert adjusted.color == "#aabbcc"

    def test_trimming_grows_both_sides(self, panel: RequiredPanel) -> None:
        settings = PackerSettings(include_edge_trimming=True, edge_trim_amount=5)
        adjusted = PanelAdjuster(settings).adjust(panel)
        assert (adjusted.length, adjusted.width) == (610, 410)

    def test_banding_shrinks_both_sides(self, panel: RequiredPanel) -> None:
        settings = PackerSettings(include_edge_banding=True, edge_banding_thickness=2)
        adjusted = PanelAdjuster(settings).adjust(panel)
        assert (adjusted.length, adjusted.width) == (596, 396)

    def test_trim_then_band(self, panel: RequiredPanel) -> None:
        settings = PackerSettings(
            include_edge_trimming=True,
            edge_trim_amount=5,
            include_edge_banding=True,
            edge_banding_thickness=2,
        )
        adjusted = PanelAdjuster(settings).adjust(panel)
        assert (adjusted.length, adjusted.width) == (606, 406)
        assert (adjusted.original_length, adjusted.original_width) == (600, 400)

    def test_amounts_ignored_when_disabled(self, panel: RequiredPanel) -> None:
        """Thickness and trim amounts only apply when their switch is on."""
        settings = PackerSettings(edge_trim_amount=5, edge_banding_thickness=2)
        adjusted = PanelAdjuster(settings).adjust(panel)
        assert (adjusted.length, adjusted.width) == (600, 400)

    def test_grain_disables_rotation(self, panel: RequiredPanel) -> None:
        assert PanelAdjuster(PackerSettings()).adjust(panel).can_rotate
        grained = PanelAdjuster(PackerSettings(consider_grain=True)).adjust(panel)
        assert not grained.can_rotate

    def test_heavy_banding_yields_unplaceable_unit(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Banding thicker than half a side is not clamped, only logged."""
        settings = PackerSettings(include_edge_banding=True, edge_banding_thickness=5)
        with caplog.at_level(logging.WARNING):
            adjusted = PanelAdjuster(settings).adjust(
                RequiredPanel(length=8, width=20, label="Strip")
            )
        assert adjusted.length == -2
        assert not adjusted.is_placeable
        assert "non-positive size" in caplog.text


class TestExpand:
    """Tests for expansion into units."""

    def test_single_unit_keeps_label(self, panel: RequiredPanel) -> None:
        units = PanelAdjuster(PackerSettings()).expand(panel)
        assert len(units) == 1
        assert units[0].label == "Shelf"

    def test_multiple_units_numbered(self) -> None:
        panel = RequiredPanel(length=600, width=400, quantity=3, label="Shelf")
        units = PanelAdjuster(PackerSettings()).expand(panel)
        assert [u.label for u in units] == ["Shelf 1/3", "Shelf 2/3", "Shelf 3/3"]

    def test_default_label_for_unnamed_panels(self) -> None:
        panel = RequiredPanel(length=600, width=400, quantity=2)
        units = PanelAdjuster(PackerSettings()).expand(panel)
        assert [u.label for u in units] == ["Panel 1/2", "Panel 2/2"]

    def test_expand_all_keeps_order(self) -> None:
        panels = [
            RequiredPanel(length=100, width=100, quantity=2, label="A"),
            RequiredPanel(length=200, width=200, label="B"),
        ]
        units = PanelAdjuster(PackerSettings()).expand_all(panels)
        assert [u.label for u in units] == ["A 1/2", "A 2/2", "B"]
