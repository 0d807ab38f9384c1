"""Input document serialization and deserialization.

This module loads the JSON description of a mockable type (its context and
methods) produced by an upstream extraction stage, and writes it back out.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from mockrender.core.models import MockableTypeInput


class SerializationError(Exception):
    """Error during serialization or deserialization."""

    def __init__(self, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details


def _format_validation_error(e: ValidationError) -> str:
    error_details = []
    for err in e.errors():
        loc = ".".join(str(x) for x in err["loc"])
        error_details.append(f"{loc}: {err['msg']}")
    return "; ".join(error_details)


def dump_type_input(type_input: MockableTypeInput) -> str:
    """Serialize a type input document to a JSON string.

    Raises:
        SerializationError: If serialization fails.
    """
    try:
        data = type_input.model_dump(mode="json")
        return json.dumps(data, indent=2, ensure_ascii=False)
    except Exception as e:
        raise SerializationError(
            message="Failed to serialize type input",
            details=str(e),
        ) from e


def load_type_input(json_str: str) -> MockableTypeInput:
    """Deserialize a JSON string to a type input document.

    Args:
        json_str: JSON string with ``context`` and ``methods`` keys.

    Returns:
        The parsed MockableTypeInput.

    Raises:
        SerializationError: If deserialization fails with detailed error info.
    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(
            message="Invalid JSON format",
            details=f"Line {e.lineno}, column {e.colno}: {e.msg}",
        ) from e
    return load_type_input_from_dict(data)


def load_type_input_from_dict(data: dict[str, Any]) -> MockableTypeInput:
    """Deserialize a dictionary to a type input document.

    Raises:
        SerializationError: If the data does not describe a valid type input.
    """
    try:
        return MockableTypeInput.model_validate(data)
    except ValidationError as e:
        raise SerializationError(
            message="Type input validation failed",
            details=_format_validation_error(e),
        ) from e
