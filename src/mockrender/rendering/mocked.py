"""Mocked override rendering.

The mocked declaration replaces the original method on the generated mock.
It records every call as an invocation and then either resolves a stub,
forwards to the superclass initializer, or refuses to run.
"""

from __future__ import annotations

import logging

from mockrender.core.models import Attribute, RenderedArtifact
from mockrender.rendering.naming import Mocking, NameResolver
from mockrender.rendering.stubbing import render_stubbed_implementation_call
from mockrender.rendering.text_utils import backtick_wrapped

logger = logging.getLogger(__name__)


class MockedOverrideRenderer:
    """Render the intercepting declaration for one method."""

    def __init__(self, names: NameResolver) -> None:
        self.names = names

    @property
    def mock_argument_matchers(self) -> str:
        argument_matcher = self.names.framework("ArgumentMatcher")
        matchers = []
        for parameter in self.names.method.parameters:
            # Non-escaping closures cannot be stored on the invocation.
            if parameter.has(Attribute.CLOSURE) and not parameter.has(Attribute.ESCAPING):
                placeholder = self.names.framework("NonEscapingClosure")
                matchable = self.names.matchable_type_name(parameter)
                matchers.append(f"{argument_matcher}({placeholder}<{matchable}>())")
            else:
                matchers.append(f"{argument_matcher}({backtick_wrapped(parameter.name)})")
        return ", ".join(matchers)

    def _recording_lines(self) -> list[str]:
        names = self.names
        return [
            f"    {names.framework('checkVersion')}(for: {names.mock_object})",
            "    " + names.invocation_declaration(f"[{self.mock_argument_matchers}]"),
            f"    {names.context_prefix}mockingContext.didInvoke(invocation)",
        ]

    def _header_lines(self) -> list[str]:
        lines = [f"  // MARK: Mocked {self.names.full_name(Mocking())}"]
        if self.names.declaration_attributes:
            lines.append(f"  {self.names.declaration_attributes}")
        return lines

    def render(self) -> RenderedArtifact | None:
        """Render the mocked declaration, or None when the method is not mocked."""
        if self.names.method.is_initializer:
            return self._render_initializer()
        return self._render_method()

    def _render_method(self) -> RenderedArtifact:
        names = self.names
        lines = self._header_lines()
        lines.append(f"  public {names.overridable_modifiers}func {names.unique_declaration} {{")
        lines.extend(self._recording_lines())
        lines.append(render_stubbed_implementation_call(names))
        lines.append("  }")
        return RenderedArtifact(names.unique_declaration, "\n".join(lines))

    def _render_initializer(self) -> RenderedArtifact | None:
        names = self.names
        context = names.context
        # Arguments to forward to a designated initializer cannot be inferred.
        if names.method.has(Attribute.CONVENIENCE):
            logger.debug(f"Skipping convenience initializer {names.full_name(Mocking())}")
            return None

        declaration = f"  public {names.overridable_modifiers}{names.unique_declaration} {{"
        lines = self._header_lines()

        if names.is_class_bound:
            # Class-defined initializer, called from an initializer proxy.
            try_super = "try " if names.method.has(Attribute.THROWS) else ""
            lines.append(declaration)
            lines.append(f"    {try_super}super.init({names.super_call_parameters})")
            lines.extend(self._recording_lines())
            lines.append("  }")
        elif not context.contains_overridable_designated_initializer:
            # Pure protocol, or class-only protocol without class-defined initializers.
            lines.append(declaration)
            if context.protocol_class_conformance is not None:
                lines.append("    super.init()")
            lines.extend(self._recording_lines())
            lines.append("  }")
        else:
            # Shadowed by a designated initializer; only reachable through a proxy.
            proxy = names.config.initializer_proxy_name
            suffix = f".{proxy}(...)" if context.protocol_class_conformance is not None else ""
            message = (
                f"Please use 'mock({context.mockable_type_name}.self){suffix}' "
                "to initialize a concrete mock instance"
            )
            logger.debug(f"Rendering unavailable initializer {names.full_name(Mocking())}")
            lines.append(f'  @available(*, deprecated, message: "{message}")')
            lines.append(declaration)
            lines.append(f'    fatalError("{message}")')
            lines.append("  }")

        return RenderedArtifact(names.unique_declaration, "\n".join(lines))
