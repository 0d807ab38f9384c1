"""Signature derivation for mocked, matching and initializer proxy declarations.

A method is rendered under one of three modes. Each mode yields a different
declaration head (``name<Generics>(parameters)``) from the same metadata:

* ``Mocking`` - the override that intercepts calls on the mock.
* ``Matching`` - the accessor test code calls to stub or verify; parameters
  become lazily evaluated matchers.
* ``InitializerProxy`` - one of the four constructor entry points.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from mockrender.core.config import MockRenderConfig, get_config
from mockrender.core.models import (
    VOID_TYPE_NAMES,
    Attribute,
    Context,
    InitializationStyle,
    Method,
    Parameter,
)
from mockrender.rendering.text_utils import (
    NO_ARGUMENT_LABEL,
    backtick_wrapped,
    is_identifier_name,
    removing_implicitly_unwrapped_optionals,
    removing_parameter_attributes,
    removing_variadic_suffix,
)


@dataclass(frozen=True)
class Mocking:
    """Render the intercepting override."""


@dataclass(frozen=True)
class Matching:
    """Render the stubbing and verification accessor.

    ``use_variadics`` selects the overload whose variadic parameter keeps its
    concrete type instead of being wrapped as a matcher.
    """

    use_variadics: bool = False


@dataclass(frozen=True)
class InitializerProxy:
    """Render one of the initializer proxy entry points."""

    style: InitializationStyle


Mode = Union[Mocking, Matching, InitializerProxy]

INITIALIZER_NAME = "init"

# Operators with `Self` constraints cannot be named at a call site in the
# matching namespace.
RESERVED_NAMES_MAP: dict[str, str] = {
    # Equatable
    "==": "_equalTo",
    "!=": "_notEqualTo",
    # Comparable
    "<": "_lessThan",
    "<=": "_lessThanOrEqualTo",
    ">": "_greaterThan",
    ">=": "_greaterThanOrEqualTo",
}

SOURCE_LOCATION_PARAMETERS = (
    "__file: StaticString = #file",
    "__line: UInt = #line",
)


class NameResolver:
    """Derive names, types and modifiers for one method within its context.

    The resolver only reads ``method`` and ``context``; every derivation is
    recomputed on access and depends solely on its arguments.
    """

    def __init__(
        self,
        method: Method,
        context: Context,
        config: MockRenderConfig | None = None,
    ) -> None:
        self.method = method
        self.context = context
        self.config = config or get_config()

    # -- Framework symbols -------------------------------------------------

    def framework(self, symbol: str) -> str:
        """Qualify a runtime framework symbol, e.g. ``Mockingbird.Invocation``."""
        return f"{self.config.framework_module}.{symbol}"

    @property
    def reserved_names(self) -> dict[str, str]:
        return {**RESERVED_NAMES_MAP, **self.config.extra_reserved_names}

    # -- Scoping -----------------------------------------------------------

    @property
    def is_class_bound(self) -> bool:
        """Declared in a class, or in a class that the protocol conforms to."""
        is_class_defined_conformance = (
            self.context.protocol_class_conformance is not None and self.method.is_overridable
        )
        return self.context.is_class or is_class_defined_conformance

    @property
    def mock_object(self) -> str:
        return self.config.static_mock_name if self.method.is_type_scoped else "self"

    @property
    def context_prefix(self) -> str:
        return f"{self.config.static_mock_name}." if self.method.is_type_scoped else ""

    def modifiers(self, allow_override: bool = True) -> str:
        is_required = self.method.has(Attribute.REQUIRED)
        required = "required " if is_required or self.method.is_initializer else ""
        should_override = self.method.is_overridable and not is_required and allow_override
        override = "override " if should_override else ""
        static = "static " if self.method.is_type_scoped else ""
        return f"{required}{override}{static}"

    @property
    def overridable_modifiers(self) -> str:
        """Modifiers for mocked declarations."""
        return self.modifiers(allow_override=True)

    @property
    def regular_modifiers(self) -> str:
        """Modifiers for stubbing and verification accessors."""
        return self.modifiers(allow_override=False)

    @property
    def declaration_attributes(self) -> str:
        return " ".join(self.method.declaration_attributes)

    # -- Types -------------------------------------------------------------

    @property
    def generic_constraints(self) -> str:
        if not self.method.where_clauses:
            return ""
        return " where " + ", ".join(
            self.context.specialize_type_name(clause) for clause in self.method.where_clauses
        )

    @property
    def specialized_return_type_name(self) -> str:
        return self.context.specialize_type_name(self.method.return_type_name)

    @property
    def matchable_return_type_name(self) -> str:
        """Return type used by handles and stubs; never implicitly unwrapped."""
        return removing_implicitly_unwrapped_optionals(self.specialized_return_type_name)

    @property
    def returns_void(self) -> bool:
        return self.matchable_return_type_name in VOID_TYPE_NAMES

    def mockable_type_name(self, parameter: Parameter, for_closure: bool) -> str:
        """Type of a parameter as declared, or as used inside a closure type."""
        raw_type_name = self.context.specialize_type_name(parameter.type_name)
        if not for_closure:
            return raw_type_name
        type_name = removing_implicitly_unwrapped_optionals(raw_type_name)
        if parameter.has(Attribute.VARIADIC):
            return f"[{removing_variadic_suffix(type_name)}]"
        return type_name

    def matchable_type_name(self, parameter: Parameter) -> str:
        type_name = removing_parameter_attributes(
            self.context.specialize_type_name(parameter.type_name)
        )
        if parameter.has(Attribute.VARIADIC):
            return f"[{type_name}]"
        return type_name

    @property
    def method_parameter_types(self) -> str:
        return ", ".join(self.mockable_type_name(p, for_closure=True) for p in self.method.parameters)

    @property
    def effect_for_mocking(self) -> str:
        if self.method.has(Attribute.RETHROWS):
            return " rethrows"
        if self.method.has(Attribute.THROWS):
            return " throws"
        return ""

    @property
    def effect_for_matching(self) -> str:
        # Stubbed implementations are never the forwarded closure, so they
        # cannot rethrow.
        return "throws " if self.method.has(Attribute.THROWS) else ""

    @property
    def try_invocation(self) -> str:
        return "try " if self.method.has(Attribute.THROWS) else ""

    @property
    def invocation_type(self) -> str:
        """Closure type matching the method, e.g. ``(String) throws -> Bool``."""
        return (
            f"({self.method_parameter_types}) {self.effect_for_matching}"
            f"-> {self.matchable_return_type_name}"
        )

    # -- Names -------------------------------------------------------------

    def base_short_name(self, mode: Mode) -> str:
        if isinstance(mode, InitializerProxy):
            return self.config.initializer_proxy_name
        if self.method.is_initializer:
            return INITIALIZER_NAME
        name = self.method.short_name
        if isinstance(mode, Matching) and name in self.reserved_names:
            return self.reserved_names[name]
        if not is_identifier_name(name):
            return name
        return backtick_wrapped(name)

    def failable_suffix(self, mode: Mode) -> str:
        # Proxies encode failability in their return type instead.
        if isinstance(mode, InitializerProxy):
            return ""
        if self.method.has(Attribute.FAILABLE):
            return "?"
        if self.method.has(Attribute.UNWRAPPED_FAILABLE):
            return "!"
        return ""

    def generic_types(self, mode: Mode) -> list[str]:
        generic_types = list(self.method.generic_type_parameters)
        if isinstance(mode, InitializerProxy):
            mock_type = self.config.generic_mock_type_name
            if mode.style == InitializationStyle.EXPLICIT:
                generic_types.append(f"{mock_type}: {self.context.abstract_mock_protocol_name}")
            elif mode.style == InitializationStyle.UNAVAILABLE:
                generic_types.append(mock_type)
        return generic_types

    def short_name(self, mode: Mode) -> str:
        name = self.base_short_name(mode) + self.failable_suffix(mode)
        generic_types = self.generic_types(mode)
        if not generic_types:
            return name
        return f"{name}<{', '.join(generic_types)}>"

    def parameter_declaration(self, parameter: Parameter, mode: Mode) -> str:
        wraps_matcher = isinstance(mode, Matching) and not (
            mode.use_variadics and parameter.has(Attribute.VARIADIC)
        )
        if wraps_matcher:
            type_name = f"@escaping @autoclosure () -> {self.matchable_type_name(parameter)}"
        else:
            type_name = self.mockable_type_name(parameter, for_closure=False)

        if parameter.argument_label in (None, NO_ARGUMENT_LABEL):
            argument_label = NO_ARGUMENT_LABEL
        else:
            argument_label = backtick_wrapped(parameter.argument_label)
        parameter_name = backtick_wrapped(parameter.name)
        if argument_label != parameter_name:
            return f"{argument_label} {parameter_name}: {type_name}"
        return f"{parameter_name}: {type_name}"

    def full_name(self, mode: Mode) -> str:
        """Declaration head of the method under ``mode``."""
        parameters = [self.parameter_declaration(p, mode) for p in self.method.parameters]
        if isinstance(mode, InitializerProxy):
            parameters.extend(SOURCE_LOCATION_PARAMETERS)
        return f"{self.short_name(mode)}({', '.join(parameters)})"

    @property
    def unique_declaration(self) -> str:
        """Full mocked signature; doubles as the invocation selector name."""
        full_name = self.full_name(Mocking())
        if self.method.is_initializer:
            return f"{full_name}{self.effect_for_mocking}{self.generic_constraints}"
        return (
            f"{full_name}{self.effect_for_mocking} -> "
            f"{self.specialized_return_type_name}{self.generic_constraints}"
        )

    # -- Arguments ---------------------------------------------------------

    @property
    def super_call_parameters(self) -> str:
        arguments = []
        for parameter in self.method.parameters:
            name = backtick_wrapped(parameter.name)
            if parameter.argument_label in (None, NO_ARGUMENT_LABEL):
                arguments.append(name)
            else:
                arguments.append(f"{parameter.argument_label}: {name}")
        return ", ".join(arguments)

    @staticmethod
    def invocation_name(parameter: Parameter) -> str:
        inout = "&" if parameter.has(Attribute.INOUT) else ""
        autoclosure = "()" if parameter.has(Attribute.AUTOCLOSURE) else ""
        return f"{inout}{backtick_wrapped(parameter.name)}{autoclosure}"

    @property
    def invocation_arguments(self) -> str:
        return ", ".join(self.invocation_name(p) for p in self.method.parameters)

    def invocation_declaration(self, arguments: str) -> str:
        """Statement constructing the invocation keyed by the unique declaration."""
        invocation = self.framework("Invocation")
        return (
            f"let invocation: {invocation} = {invocation}"
            f'(selectorName: "{self.unique_declaration}", arguments: {arguments})'
        )
