"""Initializer proxy rendering.

Mocks of types with initializers are created through ``initialize(...)``
proxies rather than by calling the mocked initializer directly. Four proxies
share one body and differ in their declared result:

* implicit - returns the abstract mock protocol; the compiler infers the rest.
* explicit - returns a caller-annotated generic mock type via a forced cast.
* dummy - returns the concrete mock type as a plain object.
* unavailable - obsoleted overload that steers ambiguous call sites to the
  other three.
"""

from __future__ import annotations

import logging

from mockrender.core.models import Attribute, InitializationStyle, RenderedArtifact
from mockrender.rendering.naming import InitializerProxy, NameResolver

logger = logging.getLogger(__name__)


class InitializerProxyRenderer:
    """Render the four initializer proxies for an initializer."""

    def __init__(self, names: NameResolver) -> None:
        self.names = names

    @property
    def is_eligible(self) -> bool:
        method = self.names.method
        if not method.is_initializer or method.has(Attribute.CONVENIENCE):
            return False
        return (
            self.names.is_class_bound
            or not self.names.context.contains_overridable_designated_initializer
        )

    @property
    def failable(self) -> str:
        return "?" if self.names.method.has(Attribute.FAILABLE) else ""

    @property
    def attributes(self) -> str:
        declaration_attributes = self.names.declaration_attributes
        return f"{declaration_attributes}\n" if declaration_attributes else ""

    def definition(self, style: InitializationStyle, return_type: str) -> str:
        names = self.names
        return (
            f"{names.full_name(InitializerProxy(style))}{names.effect_for_mocking} -> "
            f"{return_type}{self.failable}{names.generic_constraints}"
        )

    @property
    def initialization_logic(self) -> str:
        names = self.names
        scoped_name = names.context.scoped_mock_type_name
        return "\n".join([
            f"  let mock: {scoped_name}{self.failable} = "
            f"{names.try_invocation}{scoped_name}({names.super_call_parameters})",
            f"  mock{self.failable}.sourceLocation = SourceLocation(__file, __line)",
        ])

    def _creator(self, style: InitializationStyle, return_type: str, result: str) -> RenderedArtifact:
        definition = self.definition(style, return_type)
        body = "\n".join([
            f"{self.attributes}public func {definition} {{",
            self.initialization_logic,
            f"  return {result}",
            "}",
        ])
        return RenderedArtifact(definition, body, style)

    def render_implicit(self) -> RenderedArtifact:
        # let mock = mock(Bird.self).initialize(...)
        return self._creator(
            InitializationStyle.IMPLICIT, self.names.context.abstract_mock_protocol_name, "mock"
        )

    def render_explicit(self) -> RenderedArtifact:
        # let mock: BirdMock = mock(Bird.self).initialize(...)
        mock_type = self.names.config.generic_mock_type_name
        return self._creator(InitializationStyle.EXPLICIT, mock_type, f"(mock as! {mock_type})")

    def render_dummy(self) -> RenderedArtifact:
        # let dummy: Bird = dummy(Bird.self).initialize(...)
        return self._creator(
            InitializationStyle.DUMMY, self.names.context.scoped_mock_type_name, "mock"
        )

    def render_unavailable(self) -> RenderedArtifact:
        # let mock: Bird = mock(Bird.self).initialize(...)
        names = self.names
        scoped_name = names.context.scoped_mock_type_name
        definition = self.definition(
            InitializationStyle.UNAVAILABLE, names.config.generic_mock_type_name
        )
        message = (
            f"Store the mock in a variable of type '{scoped_name}' or use "
            f"'dummy({scoped_name}.self).{names.config.initializer_proxy_name}(...)' "
            "to create a non-mockable dummy object"
        )
        body = "\n".join([
            f'@available(swift, obsoleted: 3.0, message: "{message}")',
            f"{self.attributes}public func {definition} {{ fatalError() }}",
        ])
        return RenderedArtifact(definition, body, InitializationStyle.UNAVAILABLE)

    def render(self) -> list[RenderedArtifact]:
        """Render all proxies, or none when the initializer is not proxied."""
        if not self.is_eligible:
            if self.names.method.is_initializer:
                logger.debug(f"No initializer proxies for {self.names.unique_declaration}")
            return []
        return [
            self.render_implicit(),
            self.render_explicit(),
            self.render_dummy(),
            self.render_unavailable(),
        ]
