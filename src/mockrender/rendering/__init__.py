"""Per-method rendering engine.

Renders the mocked override, matcher accessors and initializer proxies of a
single method within its enclosing mockable type.
"""

from mockrender.rendering.initializers import InitializerProxyRenderer
from mockrender.rendering.matching import MatcherAccessorRenderer
from mockrender.rendering.method import MethodTemplate
from mockrender.rendering.mocked import MockedOverrideRenderer
from mockrender.rendering.naming import (
    RESERVED_NAMES_MAP,
    InitializerProxy,
    Matching,
    Mocking,
    Mode,
    NameResolver,
)
from mockrender.rendering.stubbing import render_stubbed_implementation_call

__all__ = [
    "RESERVED_NAMES_MAP",
    "InitializerProxy",
    "InitializerProxyRenderer",
    "MatcherAccessorRenderer",
    "Matching",
    "MethodTemplate",
    "Mocking",
    "Mode",
    "MockedOverrideRenderer",
    "NameResolver",
    "render_stubbed_implementation_call",
]
