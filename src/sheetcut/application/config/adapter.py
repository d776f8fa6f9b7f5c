"""Adapters from job configuration models to domain objects.

Also hosts the CLI override merge: command line options take precedence
over job file values, and only options actually given (not None) apply.
"""

from dataclasses import replace

from sheetcut.application.config.schema import JobConfiguration
from sheetcut.domain.value_objects import (
    FitRule,
    PackerSettings,
    PackerType,
    RequiredPanel,
    StockPanel,
)


def config_to_settings(config: JobConfiguration) -> PackerSettings:
    """Convert the job's settings block to PackerSettings."""
    settings = config.settings
    return PackerSettings(
        kerf_width=settings.kerf_width,
        consider_grain=settings.consider_grain,
        calculate_price=settings.calculate_price,
        include_edge_banding=settings.include_edge_banding,
        edge_banding_thickness=settings.edge_banding_thickness,
        include_edge_trimming=settings.include_edge_trimming,
        edge_trim_amount=settings.edge_trim_amount,
        packer_type=settings.packer,
        fit_rule=settings.fit_rule,
        units=settings.units,
        currency=settings.currency,
    )


def config_to_stock_panels(config: JobConfiguration) -> list[StockPanel]:
    """Convert stock entries to StockPanels, keeping their order."""
    return [
        StockPanel(
            length=stock.length,
            width=stock.width,
            quantity=stock.quantity,
            price=stock.price,
        )
        for stock in config.stock
    ]


def config_to_required_panels(config: JobConfiguration) -> list[RequiredPanel]:
    """Convert required entries to RequiredPanels, keeping their order."""
    return [
        RequiredPanel(
            length=panel.length,
            width=panel.width,
            quantity=panel.quantity,
            label=panel.label,
            color=panel.color,
        )
        for panel in config.required
    ]


def merge_cli_overrides(
    settings: PackerSettings,
    *,
    packer: PackerType | str | None = None,
    fit_rule: FitRule | str | None = None,
    kerf_width: float | None = None,
    consider_grain: bool | None = None,
) -> PackerSettings:
    """Apply command line overrides to settings.

    Args:
        settings: Settings loaded from the job file.
        packer: Override for the placement engine (if not None).
        fit_rule: Override for the fit rule (if not None).
        kerf_width: Override for the kerf width (if not None).
        consider_grain: Override for grain handling (if not None).

    Returns:
        New settings with the overrides applied.

    Raises:
        ValueError: If an override names an unknown engine or fit rule, or
            the kerf width is negative.

    Example:
        >>> merged = merge_cli_overrides(settings, kerf_width=4.0)
        >>> merged.kerf_width
        4.0
    """
    overrides: dict[str, object] = {}
    if packer is not None:
        overrides["packer_type"] = PackerType(packer)
    if fit_rule is not None:
        overrides["fit_rule"] = FitRule(fit_rule)
    if kerf_width is not None:
        overrides["kerf_width"] = kerf_width
    if consider_grain is not None:
        overrides["consider_grain"] = consider_grain

    if not overrides:
        return settings
    return replace(settings, **overrides)


__all__ = [
    "config_to_required_panels",
    "config_to_settings",
    "config_to_stock_panels",
    "merge_cli_overrides",
]
