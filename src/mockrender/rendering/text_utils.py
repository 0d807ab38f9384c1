"""String helpers for composing Swift declarations."""

from __future__ import annotations

# Identifiers that must be escaped with backticks to be used as names.
SWIFT_KEYWORDS = frozenset({
    "Any", "Self", "_", "as", "associatedtype", "await", "break", "case",
    "catch", "class", "continue", "default", "defer", "deinit", "do", "else",
    "enum", "extension", "fallthrough", "false", "fileprivate", "for", "func",
    "guard", "if", "import", "in", "init", "inout", "internal", "is", "let",
    "nil", "open", "operator", "precedencegroup", "private", "protocol",
    "public", "repeat", "rethrows", "return", "self", "static", "struct",
    "subscript", "super", "switch", "throw", "throws", "true", "try",
    "typealias", "var", "where", "while",
})

_PARAMETER_ATTRIBUTES = ("inout ", "@escaping ", "@autoclosure ", "__owned ", "__shared ")

VARIADIC_SUFFIX = "..."

NO_ARGUMENT_LABEL = "_"


def is_identifier_name(name: str) -> bool:
    """Whether ``name`` is an identifier rather than an operator symbol."""
    return bool(name) and (name[0].isalnum() or name[0] == "_")


def backtick_wrapped(name: str) -> str:
    """Escape ``name`` when it cannot be used as a bare identifier."""
    if name in SWIFT_KEYWORDS or name[:1].isdigit():
        return f"`{name}`"
    return name


def removing_implicitly_unwrapped_optionals(type_name: str) -> str:
    """Turn ``T!`` into ``T?`` everywhere in a type name."""
    return type_name.replace("!", "?")


def removing_variadic_suffix(type_name: str) -> str:
    if type_name.endswith(VARIADIC_SUFFIX):
        return type_name[: -len(VARIADIC_SUFFIX)]
    return type_name


def removing_parameter_attributes(type_name: str) -> str:
    """Strip parameter-only attributes and the variadic marker from a type."""
    for attribute in _PARAMETER_ATTRIBUTES:
        type_name = type_name.replace(attribute, "")
    return removing_variadic_suffix(type_name.strip())
