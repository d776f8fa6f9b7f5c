"""Pydantic response schemas for the REST API."""

from pydantic import BaseModel, Field


class CutSchema(BaseModel):
    """A piece placed on a sheet."""

    x: float = Field(..., description="Offset along the sheet length")
    y: float = Field(..., description="Offset along the sheet width")
    width: float = Field(..., description="Extent along the sheet length")
    length: float = Field(..., description="Extent along the sheet width")
    label: str | None = Field(default=None, description="Piece label")
    color: str | None = Field(default=None, description="Display color")
    rotated: bool = Field(default=False, description="Whether the piece was turned")


class LayoutSchema(BaseModel):
    """Cuts placed on one opened sheet."""

    sheet_length: float
    sheet_width: float
    cuts: list[CutSchema] = Field(default_factory=list)
    waste_percentage: float = Field(..., description="Uncovered share of the sheet")


class RemainingPanelSchema(BaseModel):
    """A piece that could not be placed."""

    length: float = Field(..., description="Adjusted length")
    width: float = Field(..., description="Adjusted width")
    original_length: float
    original_width: float
    can_rotate: bool
    label: str | None = None
    color: str | None = None


class StatsSchema(BaseModel):
    """Aggregate figures for a calculation."""

    total_stock_area: float
    total_required_area: float
    material_yield: float = Field(..., description="Required over stock area, percent")
    stock_panels_used: int
    total_cut_length: float
    estimated_cost: float | None = None


class PackResponseSchema(BaseModel):
    """Response for a layout calculation."""

    packer: str = Field(..., description="Engine that produced the layouts")
    units: str
    currency: str
    layouts: list[LayoutSchema] = Field(default_factory=list)
    remaining_panels: list[RemainingPanelSchema] = Field(default_factory=list)
    stats: StatsSchema


class PackersSchema(BaseModel):
    """Response listing engines and fit rules."""

    packers: list[str]
    fit_rules: list[str]


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: list[dict] | None = Field(default=None, description="Error details")
