"""Stub dispatch rendering.

After an invocation is recorded, the mocked body looks up the implementation
registered for it. A concretely typed implementation is called with the real
arguments; anything else is treated as a zero-argument thunk whose result is
coerced to the return type.
"""

from __future__ import annotations

from mockrender.rendering.naming import NameResolver


def render_stubbed_implementation_call(names: NameResolver, indent: str = "    ") -> str:
    """Render the stub lookup and call that ends a mocked method body."""
    should_return = not names.method.is_initializer and not names.returns_void
    return_statement = "return " if should_return else ""
    # Void methods may legitimately have no stub registered.
    optional = "false" if should_return else "true"
    type_caster = "as!" if should_return else "as?"
    invocation_optional = "" if should_return else "?"
    try_ = names.try_invocation
    thunk_type = f"() {names.effect_for_matching}-> {names.matchable_return_type_name}"

    lines = [
        f"let implementation = {names.context_prefix}stubbingContext"
        f".implementation(for: invocation, optional: {optional})",
        f"if let concreteImplementation = implementation as? {names.invocation_type} {{",
        f"  {return_statement}{try_}concreteImplementation({names.invocation_arguments})",
        "} else {",
        f"  {return_statement}{try_}(implementation {type_caster} {thunk_type}){invocation_optional}()",
        "}",
    ]
    return "\n".join(indent + line for line in lines)
