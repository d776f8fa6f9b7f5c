"""Job loading for files and in-memory data.

Both entry points end in the same pydantic validation. Whatever goes
wrong surfaces as a ``ConfigError`` whose ``error_type`` tells the CLI how
to report it.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from sheetcut.application.config.schema import JobConfiguration

FILE_NOT_FOUND = "file_not_found"
FILE_READ_ERROR = "file_read_error"
JSON_PARSE = "json_parse"
VALIDATION = "validation"


class ConfigError(Exception):
    """A job could not be loaded.

    Attributes:
        message: Human readable summary.
        error_type: One of ``file_not_found``, ``file_read_error``,
            ``json_parse`` or ``validation``.
        path: Job file involved, None for in-memory data.
        details: ``line``/``column``/``message`` for JSON errors, or one
            ``path``/``message`` entry per invalid field.
    """

    def __init__(
        self,
        message: str,
        error_type: str,
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []


def _json_path(loc: tuple[str | int, ...]) -> str:
    """Render a pydantic error location, e.g. ``required[0].length``."""
    rendered = ""
    for segment in loc:
        if isinstance(segment, int):
            rendered += f"[{segment}]"
        elif rendered:
            rendered += f".{segment}"
        else:
            rendered = str(segment)
    return rendered or "(job)"


def _validate(data: Any, path: Path | None = None) -> JobConfiguration:
    try:
        return JobConfiguration.model_validate(data)
    except ValidationError as e:
        details = [
            {"path": _json_path(err["loc"]), "message": err["msg"]}
            for err in e.errors()
        ]
        lines = [f"Invalid job in {path or 'request data'}:"]
        lines.extend(f"  {d['path']}: {d['message']}" for d in details)
        raise ConfigError("\n".join(lines), VALIDATION, path, details) from e


def load_config(path: Path) -> JobConfiguration:
    """Load and validate a JSON job file.

    Args:
        path: Path to the job file.

    Returns:
        The validated job.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            JSON, or does not describe a valid job.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Job file not found: {path}", FILE_NOT_FOUND, path) from None
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read job file {path}: {e}", FILE_READ_ERROR, path) from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigError(
            f"Invalid JSON in {path} at line {e.lineno}, column {e.colno}: {e.msg}",
            JSON_PARSE,
            path,
            [{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e

    return _validate(data, path)


def load_config_from_dict(data: dict[str, Any]) -> JobConfiguration:
    """Validate a job given as already parsed JSON data.

    Raises:
        ConfigError: With ``error_type`` ``validation`` and no path.
    """
    return _validate(data)


__all__ = ["ConfigError", "load_config", "load_config_from_dict"]
