"""Render service for coordinating method rendering across a mockable type.

This module provides the RenderService for rendering every method of one
mockable type, collecting the initializer proxies the type-level template
needs, and checking that no two declarations share a signature.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from mockrender.core.config import MockRenderConfig, get_config
from mockrender.core.models import MockableTypeInput, RenderedArtifact
from mockrender.core.validator import ValidationResult, validate_type
from mockrender.rendering.method import MethodTemplate

logger = logging.getLogger(__name__)


@dataclass
class MethodRendering:
    """Rendered output for one method."""

    selector: str
    fragment: str
    mocked: RenderedArtifact | None = None
    accessors: list[RenderedArtifact] = field(default_factory=list)


@dataclass
class TypeRenderResult:
    """Result of rendering all methods of a mockable type."""

    type_name: str
    methods: list[MethodRendering] = field(default_factory=list)
    initializer_proxies: list[RenderedArtifact] = field(default_factory=list)
    validation: ValidationResult = field(default_factory=ValidationResult)
    warnings: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """Check if every declaration signature is unique."""
        return len(self.warnings) == 0

    @property
    def method_fragments(self) -> list[str]:
        return [m.fragment for m in self.methods if m.fragment]

    @property
    def text(self) -> str:
        """Method fragments followed by the collapsed initializer proxies."""
        parts = self.method_fragments + [p.body for p in self.initializer_proxies]
        return "\n\n".join(parts)


class RenderService:
    """Service for rendering the methods of mockable types.

    Each method is rendered independently; results keep input order so
    repeated runs produce identical output.
    """

    def __init__(self, config: MockRenderConfig | None = None) -> None:
        self._config = config or get_config()

    def render_type(self, type_input: MockableTypeInput) -> TypeRenderResult:
        """Render every method of a mockable type.

        Args:
            type_input: Context and methods of the type.

        Returns:
            TypeRenderResult with per-method fragments, de-duplicated
            initializer proxies, validation issues and collision warnings.
        """
        context = type_input.context
        result = TypeRenderResult(type_name=context.mockable_type_name)
        result.validation = validate_type(type_input)
        for error in result.validation.errors:
            logger.warning(f"{context.mockable_type_name}: {error.message}")

        logger.debug(
            f"Rendering {len(type_input.methods)} methods for {context.scoped_mock_type_name}"
        )

        # Static and instance members may share a signature.
        declared: dict[tuple[bool, str], str] = {}
        proxies: dict[RenderedArtifact, None] = {}

        for method in type_input.methods:
            template = MethodTemplate(method, context, self._config)
            mocked = template.mocked_declaration
            accessors = template.framework_declarations
            result.methods.append(
                MethodRendering(
                    selector=template.names.unique_declaration,
                    fragment=template.render(),
                    mocked=mocked,
                    accessors=accessors,
                )
            )

            artifacts = ([mocked] if mocked is not None else []) + accessors
            for artifact in artifacts:
                key = (method.is_type_scoped, artifact.definition_signature)
                owner = declared.get(key)
                if owner is not None:
                    warning = (
                        f"Declaration '{artifact.definition_signature}' of "
                        f"'{template.names.unique_declaration}' collides with '{owner}'"
                    )
                    logger.warning(warning)
                    result.warnings.append(warning)
                else:
                    declared[key] = template.names.unique_declaration

            # Multiple inherited initializer paths can yield the same proxy.
            for proxy in template.initializer_proxies:
                proxies.setdefault(proxy, None)

        result.initializer_proxies = list(proxies)
        return result
