"""FastAPI dependency injection for packing services."""

from typing import Annotated

from fastapi import Depends

from sheetcut.application.commands import CalculateLayoutCommand


def get_calculate_command() -> CalculateLayoutCommand:
    """Dependency for CalculateLayoutCommand."""
    return CalculateLayoutCommand()


# Type aliases for cleaner endpoint signatures
CalculateCommandDep = Annotated[CalculateLayoutCommand, Depends(get_calculate_command)]
