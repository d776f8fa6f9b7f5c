"""Pytest configuration and shared fixtures for sheetcut tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from sheetcut.domain.value_objects import (
    Cut,
    PackerSettings,
    PackerType,
    PanelLayout,
    RequiredPanel,
    StockPanel,
)

FIXTURES_PATH = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Shared fixtures
# =============================================================================


@pytest.fixture
def fixtures_path() -> Path:
    """Directory holding the JSON job fixtures."""
    return FIXTURES_PATH


@pytest.fixture
def standard_sheet() -> StockPanel:
    """A single 2440x1220 sheet."""
    return StockPanel(length=2440, width=1220)


@pytest.fixture
def grid_settings() -> PackerSettings:
    """Grid heuristic engine with no kerf."""
    return PackerSettings(packer_type=PackerType.GRID_HEURISTIC)


@pytest.fixture
def maxrects_settings() -> PackerSettings:
    """Maximal-rectangles engine with no kerf."""
    return PackerSettings(packer_type=PackerType.MAX_RECTS)


@pytest.fixture
def cabinet_job() -> tuple[list[StockPanel], list[RequiredPanel]]:
    """A typical carcass job: mixed piece sizes on two standard sheets."""
    stock = [StockPanel(length=2440, width=1220, quantity=2, price=45.0)]
    required = [
        RequiredPanel(length=720, width=560, quantity=2, label="Side"),
        RequiredPanel(length=800, width=560, quantity=2, label="Top/Bottom"),
        RequiredPanel(length=764, width=540, quantity=3, label="Shelf"),
        RequiredPanel(length=400, width=100, quantity=4, label="Rail"),
    ]
    return stock, required


def assert_valid_layouts(
    layouts: tuple[PanelLayout, ...], kerf: float = 0.0, kerf_in_sheet: bool = True
) -> None:
    """Assert every cut lies within its sheet and no two cuts overlap.

    Overlap is checked on the cut rectangles grown by the kerf on their
    trailing edges.
    """
    for layout in layouts:
        for cut in layout.cuts:
            assert cut.x >= 0 and cut.y >= 0
            assert cut.width > 0 and cut.length > 0
            margin = kerf if kerf_in_sheet else 0.0
            assert cut.right_edge + margin <= layout.sheet_length + 1e-9
            assert cut.bottom_edge + margin <= layout.sheet_width + 1e-9

        for i, a in enumerate(layout.cuts):
            for b in layout.cuts[i + 1 :]:
                assert not _overlap(a, b, kerf), f"{a} overlaps {b}"


def _overlap(a: Cut, b: Cut, kerf: float) -> bool:
    return not (
        a.right_edge + kerf <= b.x
        or b.right_edge + kerf <= a.x
        or a.bottom_edge + kerf <= b.y
        or b.bottom_edge + kerf <= a.y
    )


@pytest.fixture
def check_layouts():
    """The layout validity assertion, for tests that pack."""
    return assert_valid_layouts
