"""Scenario file loading.

Every way a scenario can fail to load (missing file, unreadable file,
broken JSON, schema violation) surfaces as a ConfigError whose
``error_type`` tells the caller which one happened and whose ``details``
point at the offending location.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from roomfit.application.config.schema import ScenarioConfiguration


class ConfigError(Exception):
    """A scenario that could not be loaded.

    Attributes:
        message: Human-readable summary.
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation.
        path: Scenario file, or None for in-memory scenarios.
        details: For json_parse, one entry with line, column and message.
            For validation, one entry per schema violation with path,
            message, value and error_type.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def from_validation(
        cls, error: PydanticValidationError, path: Path | None = None
    ) -> "ConfigError":
        """Build a validation ConfigError from a pydantic error."""
        details = [
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
            for err in error.errors()
        ]
        summary = ["Scenario validation failed:"]
        for detail in details:
            line = f"  - {detail['path']}: {detail['message']}"
            if _is_scalar(detail["value"]):
                line += f" (got: {detail['value']!r})"
            summary.append(line)
        return cls(
            message="\n".join(summary),
            error_type="validation",
            path=path,
            details=details,
        )


def _is_scalar(value: Any) -> bool:
    return value is not None and not isinstance(value, (dict, list))


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location as a JSON path.

    Examples:
        >>> _format_json_path(("room", "width"))
        'room.width'
        >>> _format_json_path(("regions", 2, "confidence"))
        'regions[2].confidence'
    """
    path = ""
    for segment in loc:
        if isinstance(segment, int):
            path += f"[{segment}]"
        else:
            path += f".{segment}" if path else str(segment)
    return path


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise ConfigError(
            f"Scenario file not found: {path}", error_type="file_not_found", path=path
        )
    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            f"Permission denied reading scenario file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            f"Error reading scenario file {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )


def load_config(path: Path) -> ScenarioConfiguration:
    """Load and validate a scenario from a JSON file.

    Raises:
        ConfigError: If the file is missing, unreadable, not JSON, or does
            not match the scenario schema.

    Example:
        >>> try:
        ...     config = load_config(Path("living-room.json"))
        ... except ConfigError as e:
        ...     for detail in e.details:
        ...         print(f"  {detail['path']}: {detail['message']}")
    """
    data = _read_json(path)
    try:
        return ScenarioConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation(e, path) from e


def load_config_from_dict(data: dict[str, Any]) -> ScenarioConfiguration:
    """Validate a scenario given as a dictionary, e.g. an API request body.

    Raises:
        ConfigError: If the data does not match the scenario schema.
    """
    try:
        return ScenarioConfiguration.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigError.from_validation(e) from e
