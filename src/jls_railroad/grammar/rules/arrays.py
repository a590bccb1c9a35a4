"""JLS §10 Arrays."""

from jls_railroad.core.dsl import NT, T, diagram, optional, separated, seq
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("ArrayInitializer", lambda:
        diagram(seq(T("{"), optional(NT("VariableInitializerList")), optional(T(",")), T("}")))
    )

    add("VariableInitializerList", lambda:
        diagram(separated("VariableInitializer"))
    )
