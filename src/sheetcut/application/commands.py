"""Application commands (use cases) for layout calculation."""

from __future__ import annotations

import logging
import time
from typing import Callable, Sequence

from sheetcut.contracts.packer import Packer
from sheetcut.domain.value_objects import (
    CalculationResult,
    PackerSettings,
    RequiredPanel,
    StockPanel,
)
from sheetcut.infrastructure.packing import PackerFactory

logger = logging.getLogger(__name__)


class CalculateLayoutCommand:
    """Command to calculate cutting layouts for a job.

    Builds a fresh packer per call, so one command instance may be shared
    between callers.
    """

    def __init__(
        self,
        packer_provider: Callable[[PackerSettings], Packer] | None = None,
    ) -> None:
        """Initialize the command.

        Args:
            packer_provider: Builds the packer for given settings. Defaults to
                the packer factory, keyed by the settings' packer type.
        """
        self._packer_provider = packer_provider or (
            lambda settings: PackerFactory.create(settings.packer_type, settings)
        )

    def execute(
        self,
        stock: Sequence[StockPanel],
        required: Sequence[RequiredPanel],
        settings: PackerSettings,
    ) -> CalculationResult:
        """Execute the layout calculation.

        Args:
            stock: Stock sheets, in the order they should be opened.
            required: Pieces to cut.
            settings: Calculation settings, including the engine to use.

        Returns:
            CalculationResult with layouts, unplaced pieces and statistics.

        Raises:
            UnknownPackerError: If the settings name an unregistered engine.
        """
        packer = self._packer_provider(settings)
        packer.add_stock_panels(stock)
        packer.add_required_panels(required)

        started = time.perf_counter()
        result = packer.pack()
        elapsed_ms = (time.perf_counter() - started) * 1000

        logger.info(
            "%s placed %d units on %d sheets in %.1f ms (%d remaining, %.1f%% yield)",
            settings.packer_type.value,
            result.placed_count,
            result.stats.stock_panels_used,
            elapsed_ms,
            len(result.remaining_panels),
            result.stats.material_yield,
        )
        return result


def pack(
    stock: Sequence[StockPanel],
    required: Sequence[RequiredPanel],
    settings: PackerSettings | None = None,
) -> CalculationResult:
    """Calculate layouts with a one-off command.

    Args:
        stock: Stock sheets.
        required: Pieces to cut.
        settings: Calculation settings; defaults to ``PackerSettings()``.

    Returns:
        The calculation result.
    """
    return CalculateLayoutCommand().execute(stock, required, settings or PackerSettings())


__all__ = ["CalculateLayoutCommand", "pack"]
