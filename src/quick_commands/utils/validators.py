"""Validation of untrusted import payloads.

Import files may be hand-edited or written by another tool version, so
their structure is checked strictly and malformed shapes are rejected
rather than coerced.
"""

import json
import logging

from pydantic import ValidationError as PydanticValidationError

from quick_commands.models.export_import import ExportFormat, ValidationResult

logger = logging.getLogger(__name__)

INVALID_JSON_MESSAGE = "Invalid JSON format"
TOO_DEEP_MESSAGE = "base: Export data is nested too deeply"


def format_validation_errors(error: PydanticValidationError) -> str:
    """Render pydantic errors as ``path: message`` entries joined by ``; ``.

    Args:
        error: The pydantic validation error

    Returns:
        Human-readable description naming each offending field
    """
    parts = []
    for issue in error.errors():
        path = ".".join(str(loc) for loc in issue["loc"]) or "base"
        parts.append(f"{path}: {issue['msg']}")
    return "; ".join(parts)


def validate_import_data(content: str) -> ValidationResult:
    """Parse and structurally validate export file content.

    Args:
        content: Raw file text

    Returns:
        ValidationResult carrying the parsed ExportFormat on success, or an
        error message on failure. Parser internals are never echoed.
    """
    try:
        parsed = json.loads(content)
    except (TypeError, ValueError, RecursionError):
        return ValidationResult(success=False, error=INVALID_JSON_MESSAGE)

    if not isinstance(parsed, dict):
        return ValidationResult(
            success=False, error="base: Export data must be a JSON object"
        )

    try:
        data = ExportFormat.model_validate(parsed)
    except PydanticValidationError as e:
        message = format_validation_errors(e)
        logger.warning("Import data failed validation: %s", message)
        return ValidationResult(success=False, error=message)
    except RecursionError:
        logger.warning("Import data exceeds the supported nesting depth")
        return ValidationResult(success=False, error=TOO_DEEP_MESSAGE)

    return ValidationResult(success=True, data=data)
