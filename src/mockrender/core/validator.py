"""Method metadata validation.

The rendering engine trusts its input. This module lets callers check
extracted metadata for shapes that would produce uncompilable or colliding
declarations before handing it to the engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from mockrender.core.models import Attribute, Method, MockableTypeInput


class ValidationErrorType(str, Enum):
    """Types of validation errors."""

    DUPLICATE_PARAMETER_NAME = "duplicate_parameter_name"
    MULTIPLE_VARIADIC_PARAMETERS = "multiple_variadic_parameters"
    MALFORMED_VARIADIC_TYPE = "malformed_variadic_type"
    INITIALIZER_ATTRIBUTE_ON_METHOD = "initializer_attribute_on_method"
    DUPLICATE_METHOD = "duplicate_method"


@dataclass
class ValidationError:
    """A single validation error."""

    error_type: ValidationErrorType
    method_name: str
    message: str


@dataclass
class ValidationResult:
    """Result of metadata validation."""

    is_valid: bool = True
    errors: list[ValidationError] = field(default_factory=list)

    def add_error(self, error_type: ValidationErrorType, method_name: str, message: str) -> None:
        """Add a validation error."""
        self.errors.append(
            ValidationError(error_type=error_type, method_name=method_name, message=message)
        )
        self.is_valid = False

    def extend(self, other: ValidationResult) -> None:
        for error in other.errors:
            self.add_error(error.error_type, error.method_name, error.message)


_INITIALIZER_ONLY = (Attribute.CONVENIENCE, Attribute.FAILABLE, Attribute.UNWRAPPED_FAILABLE)


def _display_name(method: Method) -> str:
    return method.short_name or "init"


def validate_method(method: Method) -> ValidationResult:
    """Validate a single method's metadata.

    Args:
        method: The method to check.

    Returns:
        ValidationResult containing validation status and any errors found.
    """
    result = ValidationResult()
    name = _display_name(method)

    seen: set[str] = set()
    for parameter in method.parameters:
        if parameter.name in seen:
            result.add_error(
                ValidationErrorType.DUPLICATE_PARAMETER_NAME,
                name,
                f"Method '{name}' declares parameter '{parameter.name}' more than once",
            )
        seen.add(parameter.name)

        if parameter.has(Attribute.VARIADIC) and not parameter.type_name.endswith("..."):
            result.add_error(
                ValidationErrorType.MALFORMED_VARIADIC_TYPE,
                name,
                f"Variadic parameter '{parameter.name}' of '{name}' has type "
                f"'{parameter.type_name}' without a trailing '...'",
            )

    variadics = [p.name for p in method.parameters if p.has(Attribute.VARIADIC)]
    if len(variadics) > 1:
        result.add_error(
            ValidationErrorType.MULTIPLE_VARIADIC_PARAMETERS,
            name,
            f"Method '{name}' has {len(variadics)} variadic parameters: {', '.join(variadics)}",
        )

    if not method.is_initializer:
        for attribute in _INITIALIZER_ONLY:
            if method.has(attribute):
                result.add_error(
                    ValidationErrorType.INITIALIZER_ATTRIBUTE_ON_METHOD,
                    name,
                    f"Method '{name}' is not an initializer but is marked '{attribute.value}'",
                )

    return result


def validate_type(type_input: MockableTypeInput) -> ValidationResult:
    """Validate every method of a mockable type.

    Identical method metadata appearing twice is reported, since both copies
    would render the same declarations.
    """
    result = ValidationResult()
    seen: set[str] = set()
    for method in type_input.methods:
        result.extend(validate_method(method))
        key = method.model_dump_json()
        if key in seen:
            name = _display_name(method)
            result.add_error(
                ValidationErrorType.DUPLICATE_METHOD,
                name,
                f"Method '{name}' is declared more than once with identical metadata",
            )
        seen.add(key)
    return result
