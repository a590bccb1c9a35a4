"""JLS §9 Interfaces."""

from jls_railroad.core.dsl import NT, T, choice, diagram, optional, separated, seq, zero_or_more
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("InterfaceDeclaration", lambda:
        diagram(choice(0, NT("NormalInterfaceDeclaration"), NT("AnnotationInterfaceDeclaration")))
    )

    add("NormalInterfaceDeclaration", lambda:
        diagram(
            seq(
                zero_or_more(NT("InterfaceModifier")),
                T("interface"),
                NT("TypeIdentifier"),
                optional(NT("TypeParameters")),
                optional(NT("InterfaceExtends")),
                optional(NT("InterfacePermits")),
                NT("InterfaceBody")
            )
        )
    )

    add("InterfaceModifier", lambda:
        diagram(
            choice(0,
                NT("Annotation"),
                T("public"),
                T("protected"),
                T("private"),
                T("abstract"),
                T("static"),
                T("sealed"),
                T("non-sealed"),
                T("strictfp")
            )
        )
    )

    add("InterfaceExtends", lambda:
        diagram(seq(T("extends"), NT("InterfaceTypeList")))
    )

    add("InterfacePermits", lambda:
        diagram(seq(T("permits"), NT("TypeName"), zero_or_more(seq(T(","), NT("TypeName")))))
    )

    add("InterfaceBody", lambda:
        diagram(seq(T("{"), zero_or_more(NT("InterfaceMemberDeclaration")), T("}")))
    )

    add("InterfaceMemberDeclaration", lambda:
        diagram(
            choice(0,
                NT("ConstantDeclaration"),
                NT("InterfaceMethodDeclaration"),
                NT("ClassDeclaration"),
                NT("InterfaceDeclaration"),
                T(";")
            )
        )
    )

    add("ConstantDeclaration", lambda:
        diagram(seq(zero_or_more(NT("ConstantModifier")), NT("UnannType"), NT("VariableDeclaratorList"), T(";")))
    )

    add("ConstantModifier", lambda:
        diagram(choice(0, NT("Annotation"), T("public"), T("static"), T("final")))
    )

    add("InterfaceMethodDeclaration", lambda:
        diagram(seq(zero_or_more(NT("InterfaceMethodModifier")), NT("MethodHeader"), NT("MethodBody")))
    )

    add("InterfaceMethodModifier", lambda:
        diagram(choice(0, NT("Annotation"), T("public"), T("private"), T("abstract"), T("default"), T("static"), T("strictfp")))
    )

    add("AnnotationInterfaceDeclaration", lambda:
        diagram(seq(zero_or_more(NT("InterfaceModifier")), T("@"), T("interface"), NT("TypeIdentifier"), NT("AnnotationInterfaceBody")))
    )

    add("AnnotationInterfaceBody", lambda:
        diagram(seq(T("{"), zero_or_more(NT("AnnotationInterfaceMemberDeclaration")), T("}")))
    )

    add("AnnotationInterfaceMemberDeclaration", lambda:
        diagram(
            choice(0,
                NT("AnnotationInterfaceElementDeclaration"),
                NT("ConstantDeclaration"),
                NT("ClassDeclaration"),
                NT("InterfaceDeclaration"),
                T(";")
            )
        )
    )

    add("AnnotationInterfaceElementDeclaration", lambda:
        diagram(
            seq(
                zero_or_more(NT("AnnotationInterfaceElementModifier")),
                NT("UnannType"),
                NT("Identifier"),
                T("("),
                T(")"),
                optional(NT("Dims")),
                optional(NT("DefaultValue")),
                T(";")
            )
        )
    )

    add("AnnotationInterfaceElementModifier", lambda:
        diagram(choice(0, NT("Annotation"), T("public"), T("abstract")))
    )

    add("DefaultValue", lambda:
        diagram(seq(T("default"), NT("ElementValue")))
    )

    add("Annotation", lambda:
        diagram(choice(0, NT("NormalAnnotation"), NT("MarkerAnnotation"), NT("SingleElementAnnotation")))
    )

    add("NormalAnnotation", lambda:
        diagram(seq(T("@"), NT("TypeName"), T("("), optional(NT("ElementValuePairList")), T(")")))
    )

    add("ElementValuePairList", lambda:
        diagram(separated("ElementValuePair"))
    )

    add("ElementValuePair", lambda:
        diagram(seq(NT("Identifier"), T("="), NT("ElementValue")))
    )

    add("ElementValue", lambda:
        diagram(choice(0, NT("ConditionalExpression"), NT("ElementValueArrayInitializer"), NT("Annotation")))
    )

    add("ElementValueArrayInitializer", lambda:
        diagram(seq(T("{"), optional(NT("ElementValueList")), optional(T(",")), T("}")))
    )

    add("ElementValueList", lambda:
        diagram(separated("ElementValue"))
    )

    add("MarkerAnnotation", lambda:
        diagram(seq(T("@"), NT("TypeName")))
    )

    add("SingleElementAnnotation", lambda:
        diagram(seq(T("@"), NT("TypeName"), T("("), NT("ElementValue"), T(")")))
    )
