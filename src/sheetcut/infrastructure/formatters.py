"""Output formatters and exporters for calculation results."""

from __future__ import annotations

import json
from typing import Any

from sheetcut.domain.value_objects import (
    AdjustedPanel,
    CalculationResult,
    CalculationStats,
    Cut,
    PackerSettings,
    PanelLayout,
)


def _fmt(value: float) -> str:
    """Render a length without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"


class LayoutReportFormatter:
    """Formats a calculation result as a plain-text report.

    One table per opened sheet, followed by the pieces that could not be
    placed and a statistics summary. Lengths are labelled with the
    settings' display unit and costs with its currency symbol.
    """

    def __init__(self, settings: PackerSettings | None = None) -> None:
        """Initialize formatter.

        Args:
            settings: Settings supplying the display unit and currency.
        """
        self._settings = settings or PackerSettings()

    def format(self, result: CalculationResult) -> str:
        """Format the complete report."""
        if not result.layouts and not result.remaining_panels:
            return "No layouts calculated."

        sections = [
            self.format_layout(index, layout)
            for index, layout in enumerate(result.layouts)
        ]
        if result.remaining_panels:
            sections.append(self.format_remaining(result.remaining_panels))
        sections.append(self.format_stats(result.stats))
        return "\n\n".join(sections)

    def format_layout(self, index: int, layout: PanelLayout) -> str:
        """Format the cut table of one sheet."""
        unit = self._settings.units.value
        lines = [
            f"SHEET {index + 1} ({_fmt(layout.sheet_length)} x "
            f"{_fmt(layout.sheet_width)} {unit})",
            "=" * 70,
        ]

        if layout.is_empty:
            lines.append("No cuts placed on this sheet.")
            return "\n".join(lines)

        lines.append(
            f"{'Piece':<20} {'X':<9} {'Y':<9} {'Width':<9} {'Length':<9} {'Rotated'}"
        )
        lines.append("-" * 70)
        for cut in layout.cuts:
            lines.append(self._format_cut(cut))
        lines.append("-" * 70)
        lines.append(
            f"{layout.cut_count} cuts, {layout.waste_percentage:.1f}% waste"
        )
        return "\n".join(lines)

    def _format_cut(self, cut: Cut) -> str:
        label = cut.label or "-"
        return (
            f"{label:<20} {_fmt(cut.x):<9} {_fmt(cut.y):<9} "
            f"{_fmt(cut.width):<9} {_fmt(cut.length):<9} "
            f"{'yes' if cut.rotated else 'no'}"
        )

    def format_remaining(self, panels: tuple[AdjustedPanel, ...]) -> str:
        """List the pieces that could not be placed."""
        unit = self._settings.units.value
        lines = [
            f"UNPLACED PIECES ({len(panels)})",
            "=" * 70,
        ]
        for panel in panels:
            lines.append(
                f"  {panel.label or '-'}: {_fmt(panel.length)} x "
                f"{_fmt(panel.width)} {unit}"
            )
        return "\n".join(lines)

    def format_stats(self, stats: CalculationStats) -> str:
        """Format the statistics summary."""
        unit = self._settings.units.value
        lines = [
            "SUMMARY",
            "=" * 70,
            f"  Sheets used:      {stats.stock_panels_used}",
            f"  Stock area:       {_fmt(stats.total_stock_area)} sq {unit}",
            f"  Required area:    {_fmt(stats.total_required_area)} sq {unit}",
            f"  Material yield:   {stats.material_yield:.1f}%",
            f"  Total cut length: {_fmt(stats.total_cut_length)} {unit}",
        ]
        if stats.estimated_cost is not None:
            lines.append(
                f"  Estimated cost:   {self._settings.currency.value}"
                f"{stats.estimated_cost:.2f}"
            )
        return "\n".join(lines)


def cut_to_dict(cut: Cut) -> dict[str, Any]:
    return {
        "x": cut.x,
        "y": cut.y,
        "width": cut.width,
        "length": cut.length,
        "label": cut.label,
        "color": cut.color,
        "rotated": cut.rotated,
    }


def panel_to_dict(panel: AdjustedPanel) -> dict[str, Any]:
    return {
        "length": panel.length,
        "width": panel.width,
        "original_length": panel.original_length,
        "original_width": panel.original_width,
        "can_rotate": panel.can_rotate,
        "label": panel.label,
        "color": panel.color,
    }


def result_to_dict(result: CalculationResult) -> dict[str, Any]:
    """Convert a calculation result to JSON-compatible primitives.

    Args:
        result: The result to convert.

    Returns:
        Dictionary with ``layouts``, ``remaining_panels`` and ``stats`` keys.
    """
    stats = result.stats
    return {
        "layouts": [
            {
                "sheet_length": layout.sheet_length,
                "sheet_width": layout.sheet_width,
                "cuts": [cut_to_dict(cut) for cut in layout.cuts],
                "waste_percentage": layout.waste_percentage,
            }
            for layout in result.layouts
        ],
        "remaining_panels": [panel_to_dict(p) for p in result.remaining_panels],
        "stats": {
            "total_stock_area": stats.total_stock_area,
            "total_required_area": stats.total_required_area,
            "material_yield": stats.material_yield,
            "stock_panels_used": stats.stock_panels_used,
            "total_cut_length": stats.total_cut_length,
            "estimated_cost": stats.estimated_cost,
        },
    }


class JsonExporter:
    """Exports calculation results as JSON."""

    def __init__(self, settings: PackerSettings | None = None) -> None:
        self._settings = settings

    def export(self, result: CalculationResult) -> str:
        """Export a result as an indented JSON string.

        When settings were given, the display unit and currency are included
        so the numbers can be interpreted on their own.
        """
        data = result_to_dict(result)
        if self._settings is not None:
            data["units"] = self._settings.units.value
            data["currency"] = self._settings.currency.value
        return json.dumps(data, indent=2, ensure_ascii=False)


__all__ = [
    "JsonExporter",
    "LayoutReportFormatter",
    "cut_to_dict",
    "panel_to_dict",
    "result_to_dict",
]
