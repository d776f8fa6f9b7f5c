"""Conversion of requested pieces into the pieces actually placed."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from ..value_objects import AdjustedPanel, PackerSettings, RequiredPanel

logger = logging.getLogger(__name__)

DEFAULT_UNIT_LABEL = "Panel"

__all__ = ["PanelAdjuster"]


@dataclass(frozen=True)
class PanelAdjuster:
    """Applies edge trimming and edge banding to required panels.

    Trimming grows each dimension by twice the trim amount so the finished
    piece can be trimmed square; banding then shrinks each dimension by twice
    the band thickness so the banded piece ends up at its nominal size.

    Attributes:
        settings: Settings supplying the trim, banding and grain options.
    """

    settings: PackerSettings

    def adjust(self, panel: RequiredPanel) -> AdjustedPanel:
        """Adjust one required panel.

        No lower bound is enforced. A banding thickness larger than half the
        trimmed dimension yields a non-positive size, which placement rejects.

        Args:
            panel: The panel as requested.

        Returns:
            The adjusted panel, keeping the nominal size for reporting.
        """
        length = panel.length
        width = panel.width

        if self.settings.include_edge_trimming:
            length += 2 * self.settings.edge_trim_amount
            width += 2 * self.settings.edge_trim_amount

        if self.settings.include_edge_banding:
            length -= 2 * self.settings.edge_banding_thickness
            width -= 2 * self.settings.edge_banding_thickness

        if length <= 0 or width <= 0:
            logger.warning(
                "Panel '%s' (%sx%s) has non-positive size %sx%s after adjustment",
                panel.label,
                panel.length,
                panel.width,
                length,
                width,
            )

        return AdjustedPanel(
            length=length,
            width=width,
            original_length=panel.length,
            original_width=panel.width,
            can_rotate=not self.settings.consider_grain,
            label=panel.label,
            color=panel.color,
        )

    def expand(self, panel: RequiredPanel) -> list[AdjustedPanel]:
        """Adjust a panel and split it into one unit per quantity.

        Units of a panel with quantity > 1 are labelled "label i/n".
        """
        adjusted = self.adjust(panel)
        if panel.quantity == 1:
            return [adjusted]

        base_label = panel.label or DEFAULT_UNIT_LABEL
        return [
            AdjustedPanel(
                length=adjusted.length,
                width=adjusted.width,
                original_length=adjusted.original_length,
                original_width=adjusted.original_width,
                can_rotate=adjusted.can_rotate,
                label=f"{base_label} {i + 1}/{panel.quantity}",
                color=adjusted.color,
            )
            for i in range(panel.quantity)
        ]

    def expand_all(self, panels: Iterable[RequiredPanel]) -> list[AdjustedPanel]:
        """Expand every panel, keeping the caller's order."""
        units: list[AdjustedPanel] = []
        for panel in panels:
            units.extend(self.expand(panel))
        return units
