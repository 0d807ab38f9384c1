"""Method metadata models for the mockrender code generation engine.

This module defines the resolved, language-independent description of a
mockable method and of the type that encloses it. Instances are produced by an
upstream extraction stage and are immutable once constructed.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)

VOID_TYPE_NAMES = frozenset({"Void", "()"})


class Attribute(str, Enum):
    """Declaration attribute of a method or parameter."""

    THROWS = "throws"
    RETHROWS = "rethrows"
    STATIC = "static"
    CLASS_SCOPE = "class"
    REQUIRED = "required"
    CONVENIENCE = "convenience"
    FAILABLE = "failable"
    UNWRAPPED_FAILABLE = "unwrappedFailable"
    VARIADIC = "variadic"
    ESCAPING = "escaping"
    AUTOCLOSURE = "autoclosure"
    INOUT = "inout"
    CLOSURE = "closure"


class MethodKind(str, Enum):
    """Kind of method, including its type scope."""

    INSTANCE = "instance"
    STATIC = "static"
    CLASS = "class"
    INITIALIZER = "initializer"


class MockableTypeKind(str, Enum):
    """Kind of the type being mocked."""

    CLASS = "class"
    PROTOCOL = "protocol"


class InitializationStyle(str, Enum):
    """Initializer proxy variant."""

    IMPLICIT = "implicit"
    EXPLICIT = "explicit"
    DUMMY = "dummy"
    UNAVAILABLE = "unavailable"


def _sorted_attributes(attributes: frozenset[Attribute]) -> list[str]:
    return sorted(attribute.value for attribute in attributes)


def _check_exclusive(attributes: frozenset[Attribute], owner: str) -> None:
    if Attribute.THROWS in attributes and Attribute.RETHROWS in attributes:
        raise ValueError(f"{owner} cannot be both throwing and rethrowing")
    if Attribute.FAILABLE in attributes and Attribute.UNWRAPPED_FAILABLE in attributes:
        raise ValueError(f"{owner} cannot be both failable and implicitly unwrapped failable")


class Parameter(BaseModel):
    """Method parameter."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Internal parameter name")
    argument_label: str | None = Field(None, description="External argument label")
    type_name: str = Field(..., description="Printable, unspecialized type name")
    attributes: frozenset[Attribute] = Field(default_factory=frozenset)

    @model_validator(mode="after")
    def _exclusive_attributes(self) -> Parameter:
        _check_exclusive(self.attributes, f"Parameter '{self.name}'")
        return self

    @field_serializer("attributes")
    def _serialize_attributes(self, attributes: frozenset[Attribute]) -> list[str]:
        return _sorted_attributes(attributes)

    def has(self, attribute: Attribute) -> bool:
        return attribute in self.attributes


class Method(BaseModel):
    """Method, operator or initializer declared by a mockable type."""

    model_config = ConfigDict(frozen=True)

    short_name: str = Field("", description="Base identifier, operator symbol, or empty")
    parameters: tuple[Parameter, ...] = Field(default_factory=tuple)
    attributes: frozenset[Attribute] = Field(default_factory=frozenset)
    generic_type_parameters: tuple[str, ...] = Field(
        default_factory=tuple, description="Generic parameter declarations, e.g. 'T: Equatable'"
    )
    where_clauses: tuple[str, ...] = Field(
        default_factory=tuple, description="Generic where clause constraints"
    )
    return_type_name: str = Field("Void", description="Printable return type name")
    kind: MethodKind = MethodKind.INSTANCE
    is_overridable: bool = False
    compilation_directives: tuple[str, ...] = Field(
        default_factory=tuple, description="Conditional compilation guards, e.g. '#if DEBUG'"
    )
    declaration_attributes: tuple[str, ...] = Field(
        default_factory=tuple,
        description="Declaration attributes already deemed safe to forward verbatim",
    )

    @model_validator(mode="after")
    def _exclusive_attributes(self) -> Method:
        _check_exclusive(self.attributes, f"Method '{self.short_name or 'init'}'")
        return self

    @field_serializer("attributes")
    def _serialize_attributes(self, attributes: frozenset[Attribute]) -> list[str]:
        return _sorted_attributes(attributes)

    def has(self, attribute: Attribute) -> bool:
        return attribute in self.attributes

    @property
    def is_initializer(self) -> bool:
        return self.kind == MethodKind.INITIALIZER

    @property
    def is_type_scoped(self) -> bool:
        """Whether the method is a static or class member."""
        return self.kind in (MethodKind.STATIC, MethodKind.CLASS)

    @property
    def is_variadic(self) -> bool:
        return any(p.has(Attribute.VARIADIC) for p in self.parameters)


class Context(BaseModel):
    """Read-only view of the enclosing mockable type.

    Shared by every method rendering of one type.
    """

    model_config = ConfigDict(frozen=True)

    mockable_type_name: str = Field(..., description="Name of the type being mocked")
    mockable_type_kind: MockableTypeKind = MockableTypeKind.CLASS
    scoped_mock_type_name: str = Field(..., description="Fully qualified generated mock type")
    abstract_mock_protocol_name: str = Field(
        "Mockingbird.Mock", description="Protocol every generated mock conforms to"
    )
    protocol_class_conformance: str | None = Field(
        None, description="Class a protocol is constrained to, if any"
    )
    contains_overridable_designated_initializer: bool = False
    generic_specializations: tuple[tuple[str, str], ...] = Field(
        default_factory=tuple, description="Generic parameter name -> bound type name pairs"
    )

    @field_validator("generic_specializations", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return tuple(sorted(value.items()))
        return value

    @field_serializer("generic_specializations")
    def _serialize_specializations(
        self, specializations: tuple[tuple[str, str], ...]
    ) -> dict[str, str]:
        return dict(specializations)

    @property
    def is_class(self) -> bool:
        return self.mockable_type_kind == MockableTypeKind.CLASS

    def specialize_type_name(self, type_name: str) -> str:
        """Substitute generic parameters bound at this context.

        Only whole identifiers are replaced, so binding ``T`` leaves ``Tree``
        untouched.
        """
        if not self.generic_specializations:
            return type_name
        bindings = dict(self.generic_specializations)
        names = sorted(bindings, key=len, reverse=True)
        pattern = re.compile(r"(?<![\w.])(" + "|".join(re.escape(n) for n in names) + r")(?!\w)")
        return pattern.sub(lambda match: bindings[match.group(1)], type_name)


@dataclass(frozen=True)
class RenderedArtifact:
    """Rendered declaration keyed by its definition signature.

    Two artifacts are equal when their signatures match, so structurally
    identical overloads collapse in sets and dicts.
    """

    definition_signature: str
    body: str = field(compare=False, repr=False)
    style: InitializationStyle | None = field(default=None, compare=False)


class MockableTypeInput(BaseModel):
    """Input document: one mockable type and the methods to render for it."""

    context: Context
    methods: list[Method] = Field(default_factory=list)
