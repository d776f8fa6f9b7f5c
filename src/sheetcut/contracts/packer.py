"""Packer contract shared by all placement engines.

Callers build a packer through the factory, feed it stock and required
panels, and call ``pack()``. Which engine runs behind the contract is
decided once, by the settings' packer type.

A packer instance accumulates its panel lists across calls and is not
thread-safe: serialize ``add_*``/``pack``/``reset`` calls on one instance,
or use one instance per concurrent calculation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Iterable

if TYPE_CHECKING:
    from sheetcut.domain.value_objects import (
        CalculationResult,
        PackerSettings,
        PackerType,
        RequiredPanel,
        StockPanel,
    )


class Packer(ABC):
    """Abstract base class for sheet packers.

    Subclasses implement ``pack()``; list management is shared. Stock and
    required panels are stored as supplied, with quantities unexpanded.

    Attributes:
        packer_type: Identifier the engine is registered under.
        settings: Settings applied to every calculation of this instance.

    Example:
        ```python
        packer = PackerFactory.create(settings.packer_type, settings)
        packer.add_stock_panels([StockPanel(2440, 1220, quantity=2)])
        packer.add_required_panels([RequiredPanel(600, 400, quantity=4)])
        result = packer.pack()
        ```
    """

    packer_type: ClassVar[PackerType]

    def __init__(self, settings: PackerSettings) -> None:
        """Initialize an empty packer.

        Args:
            settings: Calculation settings (kerf, grain, adjustments, pricing).
        """
        self.settings = settings
        self._stock_panels: list[StockPanel] = []
        self._required_panels: list[RequiredPanel] = []

    def add_stock_panels(self, panels: Iterable[StockPanel]) -> None:
        """Append stock panels; sheets are opened in the order added."""
        self._stock_panels.extend(panels)

    def add_required_panels(self, panels: Iterable[RequiredPanel]) -> None:
        """Append required panels."""
        self._required_panels.extend(panels)

    def get_stock_panels(self) -> list[StockPanel]:
        """Return a copy of the accumulated stock panels."""
        return list(self._stock_panels)

    def get_required_panels(self) -> list[RequiredPanel]:
        """Return a copy of the accumulated required panels."""
        return list(self._required_panels)

    def clear_stock_panels(self) -> None:
        self._stock_panels = []

    def clear_required_panels(self) -> None:
        self._required_panels = []

    def reset(self) -> None:
        """Clear both accumulated lists."""
        self.clear_stock_panels()
        self.clear_required_panels()

    @abstractmethod
    def pack(self) -> CalculationResult:
        """Place the accumulated required panels on the accumulated stock.

        Returns:
            A freshly allocated result owned by the caller.
        """
        ...


__all__ = ["Packer"]
