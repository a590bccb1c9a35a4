"""JLS §8 Classes."""

from jls_railroad.core.dsl import NT, T, choice, diagram, optional, separated, seq, stack, zero_or_more
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("ClassDeclaration", lambda:
        diagram(choice(0, NT("NormalClassDeclaration"), NT("EnumDeclaration"), NT("RecordDeclaration")))
    )

    add("NormalClassDeclaration", lambda:
        diagram(
            stack(
                seq(
                    zero_or_more(NT("ClassModifier")),
                    T("class"),
                    NT("TypeIdentifier"),
                    optional(NT("TypeParameters")),
                ),
                seq(
                    optional(NT("ClassExtends")),
                    optional(NT("ClassImplements")),
                    optional(NT("ClassPermits")),
                    NT("ClassBody"),
                ),
            )
        )
    )

    add("ClassModifier", lambda:
        diagram(
            choice(0,
                NT("Annotation"),
                T("public"),
                T("protected"),
                T("private"),
                T("abstract"),
                T("static"),
                T("final"),
                T("sealed"),
                T("non-sealed"),
                T("strictfp")
            )
        )
    )

    add("TypeParameters", lambda:
        diagram(seq(T("<"), NT("TypeParameterList"), T(">")))
    )

    add("TypeParameterList", lambda:
        diagram(separated("TypeParameter"))
    )

    add("ClassExtends", lambda:
        diagram(seq(T("extends"), NT("ClassType")))
    )

    add("ClassImplements", lambda:
        diagram(seq(T("implements"), NT("InterfaceTypeList")))
    )

    add("InterfaceTypeList", lambda:
        diagram(separated("InterfaceType"))
    )

    add("ClassPermits", lambda:
        diagram(seq(T("permits"), NT("TypeName"), zero_or_more(seq(T(","), NT("TypeName")))))
    )

    add("ClassBody", lambda:
        diagram(seq(T("{"), zero_or_more(NT("ClassBodyDeclaration")), T("}")))
    )

    add("ClassBodyDeclaration", lambda:
        diagram(
            choice(0,
                NT("ClassMemberDeclaration"),
                NT("InstanceInitializer"),
                NT("StaticInitializer"),
                NT("ConstructorDeclaration")
            )
        )
    )

    add("ClassMemberDeclaration", lambda:
        diagram(
            choice(0,
                NT("FieldDeclaration"),
                NT("MethodDeclaration"),
                NT("ClassDeclaration"),
                NT("InterfaceDeclaration"),
                T(";")
            )
        )
    )

    add("FieldDeclaration", lambda:
        diagram(seq(zero_or_more(NT("FieldModifier")), NT("UnannType"), NT("VariableDeclaratorList"), T(";")))
    )

    add("FieldModifier", lambda:
        diagram(
            choice(0,
                NT("Annotation"),
                T("public"),
                T("protected"),
                T("private"),
                T("static"),
                T("final"),
                T("transient"),
                T("volatile")
            )
        )
    )

    add("VariableDeclaratorList", lambda:
        diagram(separated("VariableDeclarator"))
    )

    add("VariableDeclarator", lambda:
        diagram(seq(NT("VariableDeclaratorId"), optional(seq(T("="), NT("VariableInitializer")))))
    )

    add("VariableDeclaratorId", lambda:
        diagram(choice(0, seq(NT("Identifier"), optional(NT("Dims"))), T("_")))
    )

    add("VariableInitializer", lambda:
        diagram(choice(0, NT("Expression"), NT("ArrayInitializer")))
    )

    add("UnannType", lambda:
        diagram(choice(0, NT("UnannPrimitiveType"), NT("UnannReferenceType")))
    )

    add("UnannPrimitiveType", lambda:
        diagram(choice(0, NT("NumericType"), T("boolean")))
    )

    add("UnannReferenceType", lambda:
        diagram(choice(0, NT("UnannClassOrInterfaceType"), NT("UnannTypeVariable"), NT("UnannArrayType")))
    )

    add("UnannClassOrInterfaceType", lambda:
        diagram(choice(0, NT("UnannClassType"), NT("UnannInterfaceType")))
    )

    add("UnannClassType", lambda:
        diagram(
            choice(0,
                seq(NT("TypeIdentifier"), optional(NT("TypeArguments"))),
                seq(NT("PackageName"), T("."), zero_or_more(NT("Annotation")), NT("TypeIdentifier"), optional(NT("TypeArguments"))),
                seq(NT("UnannClassOrInterfaceType"), T("."), zero_or_more(NT("Annotation")), NT("TypeIdentifier"), optional(NT("TypeArguments")))
            )
        )
    )

    add("UnannInterfaceType", lambda:
        diagram(NT("UnannClassType"))
    )

    add("UnannTypeVariable", lambda:
        diagram(NT("TypeIdentifier"))
    )

    add("UnannArrayType", lambda:
        diagram(
            choice(0,
                seq(NT("UnannPrimitiveType"), NT("Dims")),
                seq(NT("UnannClassOrInterfaceType"), NT("Dims")),
                seq(NT("UnannTypeVariable"), NT("Dims"))
            )
        )
    )

    add("MethodDeclaration", lambda:
        diagram(seq(zero_or_more(NT("MethodModifier")), NT("MethodHeader"), NT("MethodBody")))
    )

    add("MethodModifier", lambda:
        diagram(
            choice(0,
                NT("Annotation"),
                T("public"),
                T("protected"),
                T("private"),
                T("abstract"),
                T("static"),
                T("final"),
                T("synchronized"),
                T("native"),
                T("strictfp")
            )
        )
    )

    add("MethodHeader", lambda:
        diagram(
            choice(0,
                seq(NT("Result"), NT("MethodDeclarator"), optional(NT("Throws"))),
                seq(NT("TypeParameters"), zero_or_more(NT("Annotation")), NT("Result"), NT("MethodDeclarator"), optional(NT("Throws")))
            )
        )
    )

    add("Result", lambda:
        diagram(choice(0, NT("UnannType"), T("void")))
    )

    add("MethodDeclarator", lambda:
        diagram(
            seq(
                NT("Identifier"),
                T("("),
                optional(seq(NT("ReceiverParameter"), T(","))),
                optional(NT("FormalParameterList")),
                T(")"),
                optional(NT("Dims"))
            )
        )
    )

    add("ReceiverParameter", lambda:
        diagram(seq(zero_or_more(NT("Annotation")), NT("UnannType"), optional(seq(NT("Identifier"), T("."))), T("this")))
    )

    add("FormalParameterList", lambda:
        diagram(separated("FormalParameter"))
    )

    add("FormalParameter", lambda:
        diagram(
            choice(0,
                seq(zero_or_more(NT("VariableModifier")), NT("UnannType"), NT("VariableDeclaratorId")),
                NT("VariableArityParameter")
            )
        )
    )

    add("VariableArityParameter", lambda:
        diagram(seq(zero_or_more(NT("VariableModifier")), NT("UnannType"), zero_or_more(NT("Annotation")), T("..."), NT("Identifier")))
    )

    add("VariableModifier", lambda:
        diagram(choice(0, NT("Annotation"), T("final")))
    )

    add("Throws", lambda:
        diagram(seq(T("throws"), NT("ExceptionTypeList")))
    )

    add("ExceptionTypeList", lambda:
        diagram(separated("ExceptionType"))
    )

    add("ExceptionType", lambda:
        diagram(choice(0, NT("ClassType"), NT("TypeVariable")))
    )

    add("MethodBody", lambda:
        diagram(choice(0, NT("Block"), T(";")))
    )

    add("InstanceInitializer", lambda:
        diagram(NT("Block"))
    )

    add("StaticInitializer", lambda:
        diagram(seq(T("static"), NT("Block")))
    )

    add("ConstructorDeclaration", lambda:
        diagram(seq(zero_or_more(NT("ConstructorModifier")), NT("ConstructorDeclarator"), optional(NT("Throws")), NT("ConstructorBody")))
    )

    add("ConstructorModifier", lambda:
        diagram(choice(0, NT("Annotation"), T("public"), T("protected"), T("private")))
    )

    add("ConstructorDeclarator", lambda:
        diagram(
            seq(
                optional(NT("TypeParameters")),
                NT("SimpleTypeName"),
                T("("),
                optional(seq(NT("ReceiverParameter"), T(","))),
                optional(NT("FormalParameterList")),
                T(")")
            )
        )
    )

    add("SimpleTypeName", lambda:
        diagram(NT("TypeIdentifier"))
    )

    add("ConstructorBody", lambda:
        diagram(
            choice(0,
                seq(T("{"), optional(NT("BlockStatements")), NT("ConstructorInvocation"), optional(NT("BlockStatements")), T("}")),
                seq(T("{"), optional(NT("BlockStatements")), T("}"))
            )
        )
    )

    add("ConstructorInvocation", lambda:
        diagram(
            choice(0,
                seq(optional(NT("TypeArguments")), T("this"), T("("), optional(NT("ArgumentList")), T(")"), T(";")),
                seq(optional(NT("TypeArguments")), T("super"), T("("), optional(NT("ArgumentList")), T(")"), T(";")),
                seq(NT("ExpressionName"), T("."), optional(NT("TypeArguments")), T("super"), T("("), optional(NT("ArgumentList")), T(")"), T(";")),
                seq(NT("Primary"), T("."), optional(NT("TypeArguments")), T("super"), T("("), optional(NT("ArgumentList")), T(")"), T(";"))
            )
        )
    )

    add("EnumDeclaration", lambda:
        diagram(seq(zero_or_more(NT("ClassModifier")), T("enum"), NT("TypeIdentifier"), optional(NT("ClassImplements")), NT("EnumBody")))
    )

    add("EnumBody", lambda:
        diagram(seq(T("{"), optional(NT("EnumConstantList")), optional(T(",")), optional(NT("EnumBodyDeclarations")), T("}")))
    )

    add("EnumConstantList", lambda:
        diagram(separated("EnumConstant"))
    )

    add("EnumConstant", lambda:
        diagram(seq(zero_or_more(NT("EnumConstantModifier")), NT("Identifier"), optional(seq(T("("), optional(NT("ArgumentList")), T(")"))), optional(NT("ClassBody"))))
    )

    add("EnumConstantModifier", lambda:
        diagram(NT("Annotation"))
    )

    add("EnumBodyDeclarations", lambda:
        diagram(seq(T(";"), zero_or_more(NT("ClassBodyDeclaration"))))
    )

    add("RecordDeclaration", lambda:
        diagram(
            seq(
                zero_or_more(NT("ClassModifier")),
                T("record"),
                NT("TypeIdentifier"),
                optional(NT("TypeParameters")),
                NT("RecordHeader"),
                optional(NT("ClassImplements")),
                NT("RecordBody")
            )
        )
    )

    add("RecordHeader", lambda:
        diagram(seq(T("("), optional(NT("RecordComponentList")), T(")")))
    )

    add("RecordComponentList", lambda:
        diagram(separated("RecordComponent"))
    )

    add("RecordComponent", lambda:
        diagram(
            choice(0,
                seq(zero_or_more(NT("RecordComponentModifier")), NT("UnannType"), NT("Identifier")),
                NT("VariableArityRecordComponent")
            )
        )
    )

    add("VariableArityRecordComponent", lambda:
        diagram(seq(zero_or_more(NT("RecordComponentModifier")), NT("UnannType"), zero_or_more(NT("Annotation")), T("..."), NT("Identifier")))
    )

    add("RecordComponentModifier", lambda:
        diagram(NT("Annotation"))
    )

    add("RecordBody", lambda:
        diagram(seq(T("{"), zero_or_more(NT("RecordBodyDeclaration")), T("}")))
    )

    add("RecordBodyDeclaration", lambda:
        diagram(choice(0, NT("ClassBodyDeclaration"), NT("CompactConstructorDeclaration")))
    )

    add("CompactConstructorDeclaration", lambda:
        diagram(seq(zero_or_more(NT("ConstructorModifier")), NT("SimpleTypeName"), NT("ConstructorBody")))
    )
