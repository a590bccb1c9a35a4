"""JLS §4 Types, Values, and Variables."""

from jls_railroad.core.dsl import (
    NT,
    T,
    choice,
    diagram,
    one_or_more,
    optional,
    separated,
    seq,
    zero_or_more,
)
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("Type", lambda:
        diagram(choice(0, NT("PrimitiveType"), NT("ReferenceType")))
    )

    add("PrimitiveType", lambda:
        diagram(
            choice(0,
                seq(zero_or_more(NT("Annotation")), NT("NumericType")),
                seq(zero_or_more(NT("Annotation")), T("boolean"))
            )
        )
    )

    add("NumericType", lambda:
        diagram(choice(0, NT("IntegralType"), NT("FloatingPointType")))
    )

    add("IntegralType", lambda:
        diagram(choice(0, T("byte"), T("short"), T("int"), T("long"), T("char")))
    )

    add("FloatingPointType", lambda:
        diagram(choice(0, T("float"), T("double")))
    )

    add("ReferenceType", lambda:
        diagram(choice(0, NT("ClassOrInterfaceType"), NT("TypeVariable"), NT("ArrayType")))
    )

    add("ClassOrInterfaceType", lambda:
        diagram(choice(0, NT("ClassType"), NT("InterfaceType")))
    )

    add("ClassType", lambda:
        diagram(
            choice(0,
                seq(zero_or_more(NT("Annotation")), NT("TypeIdentifier"), optional(NT("TypeArguments"))),
                seq(NT("PackageName"), T("."), zero_or_more(NT("Annotation")), NT("TypeIdentifier"), optional(NT("TypeArguments"))),
                seq(NT("ClassOrInterfaceType"), T("."), zero_or_more(NT("Annotation")), NT("TypeIdentifier"), optional(NT("TypeArguments")))
            )
        )
    )

    add("InterfaceType", lambda:
        diagram(NT("ClassType"))
    )

    add("TypeVariable", lambda:
        diagram(seq(zero_or_more(NT("Annotation")), NT("TypeIdentifier")))
    )

    add("ArrayType", lambda:
        diagram(
            choice(0,
                seq(NT("PrimitiveType"), NT("Dims")),
                seq(NT("ClassOrInterfaceType"), NT("Dims")),
                seq(NT("TypeVariable"), NT("Dims"))
            )
        )
    )

    add("Dims", lambda:
        diagram(
            one_or_more(seq(zero_or_more(NT("Annotation")), T("["), T("]")))
        )
    )

    add("TypeParameter", lambda:
        diagram(
            seq(zero_or_more(NT("TypeParameterModifier")), NT("TypeIdentifier"), optional(NT("TypeBound")))
        )
    )

    add("TypeParameterModifier", lambda:
        diagram(NT("Annotation"))
    )

    add("TypeBound", lambda:
        diagram(
            choice(0,
                seq(T("extends"), NT("TypeVariable")),
                seq(T("extends"), NT("ClassOrInterfaceType"), zero_or_more(NT("AdditionalBound")))
            )
        )
    )

    add("AdditionalBound", lambda:
        diagram(seq(T("&"), NT("InterfaceType")))
    )

    add("TypeArguments", lambda:
        diagram(seq(T("<"), NT("TypeArgumentList"), T(">")))
    )

    add("TypeArgumentList", lambda:
        diagram(separated("TypeArgument"))
    )

    add("TypeArgument", lambda:
        diagram(choice(0, NT("ReferenceType"), NT("Wildcard")))
    )

    add("Wildcard", lambda:
        diagram(seq(zero_or_more(NT("Annotation")), T("?"), optional(NT("WildcardBounds"))))
    )

    add("WildcardBounds", lambda:
        diagram(
            choice(0,
                seq(T("extends"), NT("ReferenceType")),
                seq(T("super"), NT("ReferenceType"))
            )
        )
    )
