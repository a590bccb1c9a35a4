"""JLS §6 Names."""

from jls_railroad.core.dsl import NT, T, choice, diagram, seq, zero_or_more
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("ModuleName", lambda:
        diagram(seq(NT("Identifier"), zero_or_more(seq(T("."), NT("Identifier")))))
    )

    add("PackageName", lambda:
        diagram(seq(NT("Identifier"), zero_or_more(seq(T("."), NT("Identifier")))))
    )

    add("TypeName", lambda:
        diagram(
            choice(0,
                NT("TypeIdentifier"),
                seq(NT("PackageOrTypeName"), T("."), NT("TypeIdentifier"))
            )
        )
    )

    add("ExpressionName", lambda:
        diagram(
            choice(0,
                NT("Identifier"),
                seq(NT("AmbiguousName"), T("."), NT("Identifier"))
            )
        )
    )

    add("MethodName", lambda:
        diagram(NT("UnqualifiedMethodIdentifier"))
    )

    add("PackageOrTypeName", lambda:
        diagram(seq(NT("Identifier"), zero_or_more(seq(T("."), NT("Identifier")))))
    )

    add("AmbiguousName", lambda:
        diagram(seq(NT("Identifier"), zero_or_more(seq(T("."), NT("Identifier")))))
    )
