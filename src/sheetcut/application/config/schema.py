"""Pydantic configuration schema models for cutting jobs.

This module defines the schema of JSON job files: the calculation
settings, the stock sheets on hand and the pieces to cut. It uses
Pydantic v2 for validation and serialization.

The engine, fit rule, unit and currency enums are reused from the domain
layer so configuration values and domain values cannot drift apart.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from sheetcut.domain.value_objects import Currency, FitRule, PackerType, Unit

# Supported schema versions for job files
# Version 1.0: Initial schema with settings, stock and required pieces
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class SettingsConfig(BaseModel):
    """Calculation settings.

    Attributes:
        kerf_width: Saw blade clearance added around every piece.
        consider_grain: Forbid rotating pieces when True.
        packer: Placement engine.
        fit_rule: Fit rule for the maximal-rectangles engine.
        units: Display unit for lengths.
        currency: Display currency for costs.
        calculate_price: Aggregate the price of opened sheets.
        include_edge_banding: Shrink pieces by the banding thickness.
        edge_banding_thickness: Banding thickness per edge.
        include_edge_trimming: Grow pieces by the trim amount.
        edge_trim_amount: Trim allowance per edge.
    """

    model_config = ConfigDict(extra="forbid")

    kerf_width: float = Field(default=0.0, ge=0, description="Saw kerf width")
    consider_grain: bool = Field(default=False, description="Disable rotation")
    packer: PackerType = Field(default=PackerType.GRID_HEURISTIC)
    fit_rule: FitRule = Field(default=FitRule.BEST_SHORT_SIDE_FIT)
    units: Unit = Field(default=Unit.MM)
    currency: Currency = Field(default=Currency.EUR)
    calculate_price: bool = False
    include_edge_banding: bool = False
    edge_banding_thickness: float = Field(default=0.0, ge=0)
    include_edge_trimming: bool = False
    edge_trim_amount: float = Field(default=0.0, ge=0)


class StockPanelConfig(BaseModel):
    """A stock sheet entry.

    Attributes:
        length: Sheet length.
        width: Sheet width.
        quantity: Number of identical sheets on hand.
        price: Optional price per sheet.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Sheet length")
    width: float = Field(..., gt=0, description="Sheet width")
    quantity: int = Field(default=1, ge=1)
    price: float | None = Field(default=None, ge=0)


class RequiredPanelConfig(BaseModel):
    """A required piece entry.

    Attributes:
        length: Finished length.
        width: Finished width.
        quantity: Number of identical pieces.
        label: Optional display name.
        color: Optional display color.
    """

    model_config = ConfigDict(extra="forbid")

    length: float = Field(..., gt=0, description="Piece length")
    width: float = Field(..., gt=0, description="Piece width")
    quantity: int = Field(default=1, ge=1)
    label: str | None = Field(default=None, max_length=100)
    color: str | None = None


class JobConfiguration(BaseModel):
    """Root configuration model for a cutting job.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        settings: Calculation settings
        stock: Stock sheets, in the order they should be used
        required: Pieces to cut

    Example:
        >>> config = JobConfiguration(
        ...     schema_version="1.0",
        ...     stock=[StockPanelConfig(length=2440, width=1220)],
        ...     required=[RequiredPanelConfig(length=600, width=400)],
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    settings: SettingsConfig = Field(default_factory=SettingsConfig)
    stock: list[StockPanelConfig] = Field(..., min_length=1)
    required: list[RequiredPanelConfig] = Field(..., min_length=1)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )


__all__ = [
    "JobConfiguration",
    "RequiredPanelConfig",
    "SUPPORTED_VERSIONS",
    "SettingsConfig",
    "StockPanelConfig",
]
