"""Pydantic schemas for the REST API."""

from sheetcut.web.schemas.responses import (
    CutSchema,
    ErrorResponseSchema,
    LayoutSchema,
    PackersSchema,
    PackResponseSchema,
    RemainingPanelSchema,
    StatsSchema,
)

__all__ = [
    "CutSchema",
    "ErrorResponseSchema",
    "LayoutSchema",
    "PackResponseSchema",
    "PackersSchema",
    "RemainingPanelSchema",
    "StatsSchema",
]
