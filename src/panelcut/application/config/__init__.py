"""Configuration schema and loading for cut list projects.

Public API:
    - ProjectConfiguration: Root configuration model
    - MaterialConfig: Stock sheet model
    - CabinetConfig: Cabinet design model
    - OutputConfig: Report output model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - config_to_material / config_to_cabinets: Convert to domain values

Example:
    >>> from pathlib import Path
    >>> from panelcut.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("kitchen.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from panelcut.application.config.adapter import (
    cabinet_from_config,
    config_to_cabinets,
    config_to_material,
    material_from_config,
)
from panelcut.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from panelcut.application.config.schema import (
    SUPPORTED_VERSIONS,
    CabinetConfig,
    MaterialConfig,
    OutputConfig,
    OutputFormat,
    ProjectConfiguration,
)

__all__ = [
    "SUPPORTED_VERSIONS",
    "CabinetConfig",
    "ConfigError",
    "MaterialConfig",
    "OutputConfig",
    "OutputFormat",
    "ProjectConfiguration",
    "cabinet_from_config",
    "config_to_cabinets",
    "config_to_material",
    "load_config",
    "load_config_from_dict",
    "material_from_config",
]
