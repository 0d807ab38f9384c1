"""Matcher accessor rendering.

Accessors are what test code calls inside ``given(...)`` and ``verify(...)``.
Their parameters take autoclosures that evaluate to argument matchers, and
they return a ``Mockable`` handle typed by the method's signature.
"""

from __future__ import annotations

from mockrender.core.models import Attribute, RenderedArtifact
from mockrender.rendering.naming import Matching, NameResolver
from mockrender.rendering.text_utils import backtick_wrapped


class MatcherAccessorRenderer:
    """Render the stubbing and verification accessors for one method."""

    def __init__(self, names: NameResolver) -> None:
        self.names = names

    @property
    def mockable_type(self) -> str:
        names = self.names
        generic_types = ", ".join([
            names.framework("MethodDeclaration"),
            names.invocation_type,
            names.matchable_return_type_name,
        ])
        return f"{names.framework('Mockable')}<{generic_types}>"

    def resolved_argument_matchers(self, use_variadics: bool) -> str:
        resolved = []
        for parameter in self.names.method.parameters:
            name = backtick_wrapped(parameter.name)
            # Variadic parameters cannot be resolved indirectly.
            if use_variadics and parameter.has(Attribute.VARIADIC):
                resolved.append(f"{self.names.framework('ArgumentMatcher')}({name})")
            else:
                resolved.append(f"{self.names.framework('resolve')}({name})")
        return (
            f"    let arguments: [{self.names.framework('ArgumentMatcher')}] = "
            f"[{', '.join(resolved)}]"
        )

    def matchable_invocation(self, use_variadics: bool) -> str:
        if not self.names.method.parameters:
            return "    " + self.names.invocation_declaration("[]")
        return "\n".join([
            self.resolved_argument_matchers(use_variadics),
            "    " + self.names.invocation_declaration("arguments"),
        ])

    def render_accessor(self, use_variadics: bool) -> RenderedArtifact:
        names = self.names
        mode = Matching(use_variadics=use_variadics)
        definition = (
            f"{names.full_name(mode)} -> {self.mockable_type}{names.generic_constraints}"
        )
        lines = []
        if names.declaration_attributes:
            lines.append(f"  {names.declaration_attributes}")
        lines.append(f"  public {names.regular_modifiers}func {definition} {{")
        lines.append(self.matchable_invocation(use_variadics))
        lines.append(
            f"    return {self.mockable_type}(mock: {names.mock_object}, invocation: invocation)"
        )
        lines.append("  }")
        return RenderedArtifact(definition, "\n".join(lines))

    def render(self) -> list[RenderedArtifact]:
        """Render one accessor, plus a variadics overload when needed.

        Initializers have no accessors; they are reached through proxies.
        """
        if self.names.method.is_initializer:
            return []
        accessors = [self.render_accessor(use_variadics=False)]
        if self.names.method.is_variadic:
            accessors.append(self.render_accessor(use_variadics=True))
        return accessors
