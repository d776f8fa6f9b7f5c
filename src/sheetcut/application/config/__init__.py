"""Job configuration schema, loading and adaptation.

Public API:
    - JobConfiguration: Root configuration model
    - SettingsConfig: Calculation settings model
    - StockPanelConfig: Stock sheet entry model
    - RequiredPanelConfig: Required piece entry model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_settings / config_to_stock_panels / config_to_required_panels:
      Convert configuration models to domain objects
    - merge_cli_overrides: Apply command line overrides to settings

Example:
    >>> from pathlib import Path
    >>> from sheetcut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("job.json"))
    ...     print(f"{len(config.required)} piece types")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from sheetcut.application.config.adapter import (
    config_to_required_panels,
    config_to_settings,
    config_to_stock_panels,
    merge_cli_overrides,
)
from sheetcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from sheetcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    JobConfiguration,
    RequiredPanelConfig,
    SettingsConfig,
    StockPanelConfig,
)

__all__ = [
    "ConfigError",
    "JobConfiguration",
    "RequiredPanelConfig",
    "SUPPORTED_VERSIONS",
    "SettingsConfig",
    "StockPanelConfig",
    "config_to_required_panels",
    "config_to_settings",
    "config_to_stock_panels",
    "load_config",
    "load_config_from_dict",
    "merge_cli_overrides",
]
