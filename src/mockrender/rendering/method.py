"""Per-method rendering entry point."""

from __future__ import annotations

from mockrender.core.config import MockRenderConfig
from mockrender.core.models import Context, Method, RenderedArtifact
from mockrender.rendering.initializers import InitializerProxyRenderer
from mockrender.rendering.matching import MatcherAccessorRenderer
from mockrender.rendering.mocked import MockedOverrideRenderer
from mockrender.rendering.naming import NameResolver

END_DIRECTIVE = "#endif"


class MethodTemplate:
    """Render a method's mocked declaration and matcher accessors.

    Initializer proxies are exposed separately through
    ``initializer_proxies`` so the type-level template can merge them.
    """

    def __init__(
        self,
        method: Method,
        context: Context,
        config: MockRenderConfig | None = None,
    ) -> None:
        self.method = method
        self.context = context
        self.names = NameResolver(method, context, config)

    @property
    def compilation_directive_declaration(self) -> tuple[str, str]:
        directives = self.method.compilation_directives
        if not directives:
            return "", ""
        start = "\n".join(f"  {directive}" for directive in directives)
        end = "\n".join(f"  {END_DIRECTIVE}" for _ in directives)
        return start, end

    @property
    def mocked_declaration(self) -> RenderedArtifact | None:
        return MockedOverrideRenderer(self.names).render()

    @property
    def framework_declarations(self) -> list[RenderedArtifact]:
        return MatcherAccessorRenderer(self.names).render()

    @property
    def initializer_proxies(self) -> list[RenderedArtifact]:
        return InitializerProxyRenderer(self.names).render()

    def render(self) -> str:
        preprocessor_start, preprocessor_end = self.compilation_directive_declaration
        mocked = self.mocked_declaration
        framework = "\n".join(artifact.body for artifact in self.framework_declarations)
        parts = [
            preprocessor_start,
            mocked.body if mocked is not None else "",
            framework,
            preprocessor_end,
        ]
        return "\n\n".join(part for part in parts if part)
