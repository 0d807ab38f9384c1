"""Core module containing method models, configuration, serializer, and validator."""

from mockrender.core.config import MockRenderConfig, get_config, reload_config
from mockrender.core.models import (
    VOID_TYPE_NAMES,
    Attribute,
    Context,
    InitializationStyle,
    Method,
    MethodKind,
    MockableTypeInput,
    MockableTypeKind,
    Parameter,
    RenderedArtifact,
)
from mockrender.core.serializer import (
    SerializationError,
    dump_type_input,
    load_type_input,
    load_type_input_from_dict,
)
from mockrender.core.validator import (
    ValidationError,
    ValidationErrorType,
    ValidationResult,
    validate_method,
    validate_type,
)

__all__ = [
    "VOID_TYPE_NAMES",
    "Attribute",
    "Context",
    "InitializationStyle",
    "Method",
    "MethodKind",
    "MockRenderConfig",
    "MockableTypeInput",
    "MockableTypeKind",
    "Parameter",
    "RenderedArtifact",
    "SerializationError",
    "ValidationError",
    "ValidationErrorType",
    "ValidationResult",
    "dump_type_input",
    "get_config",
    "load_type_input",
    "load_type_input_from_dict",
    "reload_config",
    "validate_method",
    "validate_type",
]
