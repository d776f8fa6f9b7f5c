"""Exceptions raised by the packing engines and their factory."""

from __future__ import annotations


class PackingConfigurationError(ValueError):
    """Raised when a calculation is configured with invalid settings."""


class UnknownPackerError(PackingConfigurationError):
    """Raised when the requested packer type is not registered.

    Attributes:
        requested: The packer identifier that was requested.
        available: Registered packer identifiers at the time of the request.
    """

    def __init__(self, requested: str, available: list[str]) -> None:
        self.requested = requested
        self.available = available
        super().__init__(
            f"Unknown packer type: {requested}. "
            f"Available types: {', '.join(available) or 'none'}"
        )


class GridCapacityError(Exception):
    """Raised when a sheet is too large for the grid engine's discretization.

    Attributes:
        columns: Grid columns the sheet would need.
        rows: Grid rows the sheet would need.
        limit: Maximum cells allowed along either axis.
    """

    def __init__(self, columns: int, rows: int, limit: int) -> None:
        self.columns = columns
        self.rows = rows
        self.limit = limit
        super().__init__(
            f"Panel dimensions too large for calculation: "
            f"{columns}x{rows} grid cells exceeds {limit}x{limit}"
        )


__all__ = [
    "GridCapacityError",
    "PackingConfigurationError",
    "UnknownPackerError",
]
