"""Greedy sheet packing over a coarse occupancy grid.

Each sheet is discretized into square cells. The packer scans the cells
row by row for the first free one and places, at that cell, whichever
remaining piece and orientation scores best. A cell where nothing fits is
marked used, so every sheet is eventually exhausted.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from sheetcut.contracts.packer import Packer
from sheetcut.domain.exceptions import GridCapacityError
from sheetcut.domain.services.geometry import grid_fit_score
from sheetcut.domain.services.panel_adjuster import PanelAdjuster
from sheetcut.domain.services.statistics import calculate_stats, expand_stock
from sheetcut.domain.value_objects import (
    AdjustedPanel,
    CalculationResult,
    Cut,
    PackerType,
    PanelLayout,
    StockPanel,
)

from .factory import PackerFactory

logger = logging.getLogger(__name__)

GRID_CELL_SIZE = 10
MAX_GRID_CELLS = 1000


class OccupancyGrid:
    """Occupancy of one sheet as a flat array of cells.

    Cell ``(row, col)`` lives at index ``row * columns + col``. The scan
    cursor only moves forward, so each free cell is offered once.

    Attributes:
        cell_size: Edge length of a cell, in sheet units.
        columns: Cells along the sheet length.
        rows: Cells along the sheet width.
    """

    def __init__(
        self,
        length: float,
        width: float,
        cell_size: int = GRID_CELL_SIZE,
        max_cells: int = MAX_GRID_CELLS,
    ) -> None:
        """Create an empty grid covering a sheet.

        Args:
            length: Sheet length.
            width: Sheet width.
            cell_size: Edge length of a cell.
            max_cells: Maximum number of cells along either axis.

        Raises:
            GridCapacityError: If the sheet needs more than ``max_cells``
                cells along either axis.
        """
        self.cell_size = cell_size
        self.columns = math.ceil(length / cell_size)
        self.rows = math.ceil(width / cell_size)
        if self.columns > max_cells or self.rows > max_cells:
            raise GridCapacityError(self.columns, self.rows, max_cells)

        self._cells = bytearray(self.columns * self.rows)
        self._cursor = 0

    def _span(
        self, x: float, y: float, width: float, height: float
    ) -> tuple[int, int, int, int]:
        """Cell range (start_col, start_row, end_col, end_row) covered by a rectangle."""
        return (
            math.floor(x / self.cell_size),
            math.floor(y / self.cell_size),
            math.ceil((x + width) / self.cell_size),
            math.ceil((y + height) / self.cell_size),
        )

    def mark(self, x: float, y: float, width: float, height: float) -> None:
        """Mark every cell under a rectangle as used, clipped to the grid."""
        start_col, start_row, end_col, end_row = self._span(x, y, width, height)
        end_col = min(end_col, self.columns)
        end_row = min(end_row, self.rows)
        if end_col <= start_col:
            return

        filled = b"\x01" * (end_col - start_col)
        for row in range(start_row, end_row):
            base = row * self.columns
            self._cells[base + start_col : base + end_col] = filled

    def is_free(self, x: float, y: float, width: float, height: float) -> bool:
        """True if the rectangle lies on the grid and covers no used cell."""
        start_col, start_row, end_col, end_row = self._span(x, y, width, height)
        if end_col > self.columns or end_row > self.rows:
            return False

        for row in range(start_row, end_row):
            base = row * self.columns
            if any(self._cells[base + start_col : base + end_col]):
                return False
        return True

    def is_used(self, col: int, row: int) -> bool:
        return bool(self._cells[row * self.columns + col])

    def next_free_position(self) -> tuple[float, float] | None:
        """Advance the cursor to the next free cell.

        Returns:
            The (x, y) origin of the cell, or None once the grid is exhausted.
        """
        index = self._cells.find(0, self._cursor)
        if index == -1:
            self._cursor = len(self._cells)
            return None

        self._cursor = index + 1
        row, col = divmod(index, self.columns)
        return (col * self.cell_size, row * self.cell_size)


@PackerFactory.register(PackerType.GRID_HEURISTIC)
class GridHeuristicPacker(Packer):
    """Greedy grid packer.

    Required units are sorted by area, largest first. Sheets are opened in
    stock order until every unit is placed or no sheet is left. On each
    sheet, every free grid cell is offered to all remaining units in both
    orientations (rotation only when grain allows); the best-scoring
    candidate is placed there.

    If any sheet is too large for the grid, the whole calculation is
    abandoned and an empty, zeroed result is returned.
    """

    def pack(self) -> CalculationResult:
        """Pack the accumulated required panels onto the accumulated stock.

        Returns:
            CalculationResult with one layout per opened sheet, the units
            that could not be placed, and aggregate statistics.
        """
        sheets = expand_stock(self._stock_panels)
        units = PanelAdjuster(self.settings).expand_all(self._required_panels)
        remaining = sorted(units, key=lambda unit: unit.area, reverse=True)

        logger.debug(
            "Packing %d units onto up to %d sheets", len(remaining), len(sheets)
        )

        layouts: list[PanelLayout] = []
        opened: list[StockPanel] = []

        try:
            for sheet in sheets:
                if not remaining:
                    break
                cuts = self._pack_sheet(sheet, remaining)
                layouts.append(
                    PanelLayout(
                        sheet_length=sheet.length,
                        sheet_width=sheet.width,
                        cuts=tuple(cuts),
                    )
                )
                opened.append(sheet)
                logger.debug(
                    "Sheet %d (%sx%s): %d cuts, %d units remaining",
                    len(layouts) - 1,
                    sheet.length,
                    sheet.width,
                    len(cuts),
                    len(remaining),
                )
        except GridCapacityError as e:
            logger.error("Layout calculation failed: %s", e)
            return CalculationResult.empty()

        if remaining:
            logger.warning("%d units could not be placed", len(remaining))

        return CalculationResult(
            layouts=tuple(layouts),
            remaining_panels=tuple(remaining),
            stats=calculate_stats(layouts, opened, units, self.settings),
        )

    def _pack_sheet(
        self, sheet: StockPanel, remaining: list[AdjustedPanel]
    ) -> list[Cut]:
        """Fill one sheet, removing placed units from ``remaining``.

        Args:
            sheet: The sheet instance to fill.
            remaining: Units not yet placed, best candidates first.

        Returns:
            Cuts placed on the sheet, in placement order.
        """
        grid = OccupancyGrid(sheet.length, sheet.width)
        kerf = self.settings.kerf_width
        cuts: list[Cut] = []

        while remaining:
            position = grid.next_free_position()
            if position is None:
                break

            index, fit = self._find_best_panel(position, remaining, grid, sheet, cuts)
            if fit is None:
                grid.mark(position[0], position[1], grid.cell_size, grid.cell_size)
                continue

            cuts.append(fit)
            grid.mark(fit.x, fit.y, fit.width + kerf, fit.length + kerf)
            del remaining[index]

        return cuts

    def _find_best_panel(
        self,
        position: tuple[float, float],
        panels: Sequence[AdjustedPanel],
        grid: OccupancyGrid,
        sheet: StockPanel,
        existing_cuts: Sequence[Cut],
    ) -> tuple[int, Cut | None]:
        """Pick the highest-scoring unit for a position.

        Ties keep the first unit encountered.

        Returns:
            Tuple of (index into ``panels``, fit), or (-1, None) if nothing fits.
        """
        best_index = -1
        best_fit: Cut | None = None
        best_score = -math.inf

        for i, panel in enumerate(panels):
            fit, score = self._find_best_rotation(
                panel, position, grid, sheet, existing_cuts
            )
            if fit is not None and score > best_score:
                best_index = i
                best_fit = fit
                best_score = score

        return best_index, best_fit

    def _find_best_rotation(
        self,
        panel: AdjustedPanel,
        position: tuple[float, float],
        grid: OccupancyGrid,
        sheet: StockPanel,
        existing_cuts: Sequence[Cut],
    ) -> tuple[Cut | None, float]:
        """Best orientation of one unit at a position.

        The rotated orientation replaces the upright one only if it scores
        strictly higher.

        Returns:
            Tuple of (fit, score), or (None, -inf) if neither orientation fits.
        """
        best_fit: Cut | None = None
        best_score = -math.inf

        orientations = (False, True) if panel.can_rotate else (False,)
        for rotated in orientations:
            fit = self._try_fit(panel, position, rotated, grid, sheet)
            if fit is None:
                continue
            score = grid_fit_score(fit, existing_cuts, sheet.length, sheet.width)
            if score > best_score:
                best_fit = fit
                best_score = score

        return best_fit, best_score

    def _try_fit(
        self,
        panel: AdjustedPanel,
        position: tuple[float, float],
        rotated: bool,
        grid: OccupancyGrid,
        sheet: StockPanel,
    ) -> Cut | None:
        """Check whether a unit fits at a position in one orientation.

        The piece plus kerf clearance must stay inside the sheet and cover
        only free cells.
        """
        x, y = position
        # Upright, the piece's width runs along the sheet length.
        if rotated:
            placed_width, placed_length = panel.length, panel.width
        else:
            placed_width, placed_length = panel.width, panel.length

        if placed_width <= 0 or placed_length <= 0:
            return None

        kerf = self.settings.kerf_width
        total_width = placed_width + kerf
        total_length = placed_length + kerf

        if x + total_width > sheet.length or y + total_length > sheet.width:
            return None
        if not grid.is_free(x, y, total_width, total_length):
            return None

        return Cut(
            x=x,
            y=y,
            width=placed_width,
            length=placed_length,
            label=panel.label,
            color=panel.color,
            rotated=rotated,
        )


__all__ = [
    "GRID_CELL_SIZE",
    "GridHeuristicPacker",
    "MAX_GRID_CELLS",
    "OccupancyGrid",
]
