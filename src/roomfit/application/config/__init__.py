"""Scenario configuration schema, loading and validation.

Public API:
    - ScenarioConfiguration: Root scenario model
    - ItemConfig, CustomItemConfig, PlacementConfig, ViewportConfig,
      RoomConfig, RegionConfig, EvaluatorOverridesConfig: Section models
    - load_config / load_config_from_dict: Load a scenario
    - ConfigError: Exception for scenario errors
    - ValidationResult, ValidationIssue, validate_config
    - config_to_session and friends: Convert a scenario to engine objects

Example:
    >>> from pathlib import Path
    >>> from roomfit.application.config import load_config, config_to_session
    >>> session = config_to_session(load_config(Path("living-room.json")))
    >>> session.result.reason
    'Clear space detected'
"""

from roomfit.application.config.adapter import (
    apply_evaluator_overrides,
    config_to_bounds,
    config_to_item,
    config_to_regions,
    config_to_session,
)
from roomfit.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from roomfit.application.config.schema import (
    SUPPORTED_VERSIONS,
    CustomItemConfig,
    EvaluatorOverridesConfig,
    ItemConfig,
    PlacementConfig,
    RegionConfig,
    RoomConfig,
    ScenarioConfiguration,
    ViewportConfig,
)
from roomfit.application.config.validator import (
    ValidationIssue,
    ValidationResult,
    validate_config,
)

__all__ = [
    "ConfigError",
    "CustomItemConfig",
    "EvaluatorOverridesConfig",
    "ItemConfig",
    "PlacementConfig",
    "RegionConfig",
    "RoomConfig",
    "SUPPORTED_VERSIONS",
    "ScenarioConfiguration",
    "ValidationIssue",
    "ValidationResult",
    "ViewportConfig",
    "apply_evaluator_overrides",
    "config_to_bounds",
    "config_to_item",
    "config_to_regions",
    "config_to_session",
    "load_config",
    "load_config_from_dict",
    "validate_config",
]
