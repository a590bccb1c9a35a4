"""JLS §15 Expressions."""

from jls_railroad.core.dsl import (
    NT,
    T,
    choice,
    diagram,
    one_or_more,
    optional,
    precedence_chain,
    separated,
    seq,
    zero_or_more,
)
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("Primary", lambda:
        diagram(choice(0, NT("PrimaryNoNewArray"), NT("ArrayCreationExpression")))
    )

    add("PrimaryNoNewArray", lambda:
        diagram(
            choice(0,
                NT("Literal"),
                NT("ClassLiteral"),
                T("this"),
                seq(NT("TypeName"), T("."), T("this")),
                seq(T("("), NT("Expression"), T(")")),
                NT("ClassInstanceCreationExpression"),
                NT("FieldAccess"),
                NT("ArrayAccess"),
                NT("MethodInvocation"),
                NT("MethodReference")
            )
        )
    )

    add("ClassLiteral", lambda:
        diagram(
            choice(0,
                seq(NT("TypeName"), zero_or_more(seq(T("["), T("]"))), T("."), T("class")),
                seq(NT("NumericType"), zero_or_more(seq(T("["), T("]"))), T("."), T("class")),
                seq(T("boolean"), zero_or_more(seq(T("["), T("]"))), T("."), T("class")),
                seq(T("void"), T("."), T("class"))
            )
        )
    )

    add("ClassInstanceCreationExpression", lambda:
        diagram(
            choice(0,
                NT("UnqualifiedClassInstanceCreationExpression"),
                seq(NT("ExpressionName"), T("."), NT("UnqualifiedClassInstanceCreationExpression")),
                seq(NT("Primary"), T("."), NT("UnqualifiedClassInstanceCreationExpression"))
            )
        )
    )

    add("UnqualifiedClassInstanceCreationExpression", lambda:
        diagram(seq(T("new"), optional(NT("TypeArguments")), NT("ClassOrInterfaceTypeToInstantiate"), T("("), optional(NT("ArgumentList")), T(")"), optional(NT("ClassBody"))))
    )

    add("ClassOrInterfaceTypeToInstantiate", lambda:
        diagram(
            seq(
                zero_or_more(NT("Annotation")),
                NT("Identifier"),
                zero_or_more(seq(T("."), zero_or_more(NT("Annotation")), NT("Identifier"))),
                optional(NT("TypeArgumentsOrDiamond"))
            )
        )
    )

    add("TypeArgumentsOrDiamond", lambda:
        diagram(choice(0, NT("TypeArguments"), seq(T("<"), T(">"))))
    )

    add("ArrayCreationExpression", lambda:
        diagram(choice(0, NT("ArrayCreationExpressionWithoutInitializer"), NT("ArrayCreationExpressionWithInitializer")))
    )

    add("ArrayCreationExpressionWithoutInitializer", lambda:
        diagram(
            choice(0,
                seq(T("new"), NT("PrimitiveType"), NT("DimExprs"), optional(NT("Dims"))),
                seq(T("new"), NT("ClassOrInterfaceType"), NT("DimExprs"), optional(NT("Dims")))
            )
        )
    )

    add("ArrayCreationExpressionWithInitializer", lambda:
        diagram(
            choice(0,
                seq(T("new"), NT("PrimitiveType"), NT("Dims"), NT("ArrayInitializer")),
                seq(T("new"), NT("ClassOrInterfaceType"), NT("Dims"), NT("ArrayInitializer"))
            )
        )
    )

    add("DimExprs", lambda:
        diagram(one_or_more(NT("DimExpr")))
    )

    add("DimExpr", lambda:
        diagram(seq(zero_or_more(NT("Annotation")), T("["), NT("Expression"), T("]")))
    )

    add("ArrayAccess", lambda:
        diagram(
            choice(0,
                seq(NT("ExpressionName"), T("["), NT("Expression"), T("]")),
                seq(NT("PrimaryNoNewArray"), T("["), NT("Expression"), T("]")),
                seq(NT("ArrayCreationExpressionWithInitializer"), T("["), NT("Expression"), T("]"))
            )
        )
    )

    add("FieldAccess", lambda:
        diagram(
            choice(0,
                seq(NT("Primary"), T("."), NT("Identifier")),
                seq(T("super"), T("."), NT("Identifier")),
                seq(NT("TypeName"), T("."), T("super"), T("."), NT("Identifier"))
            )
        )
    )

    add("MethodInvocation", lambda:
        diagram(
            choice(0,
                seq(NT("MethodName"), T("("), optional(NT("ArgumentList")), T(")")),
                seq(NT("TypeName"), T("."), optional(NT("TypeArguments")), NT("Identifier"), T("("), optional(NT("ArgumentList")), T(")")),
                seq(NT("ExpressionName"), T("."), optional(NT("TypeArguments")), NT("Identifier"), T("("), optional(NT("ArgumentList")), T(")")),
                seq(NT("Primary"), T("."), optional(NT("TypeArguments")), NT("Identifier"), T("("), optional(NT("ArgumentList")), T(")")),
                seq(T("super"), T("."), optional(NT("TypeArguments")), NT("Identifier"), T("("), optional(NT("ArgumentList")), T(")")),
                seq(NT("TypeName"), T("."), T("super"), T("."), optional(NT("TypeArguments")), NT("Identifier"), T("("), optional(NT("ArgumentList")), T(")"))
            )
        )
    )

    add("ArgumentList", lambda:
        diagram(separated("Expression"))
    )

    add("MethodReference", lambda:
        diagram(
            choice(0,
                seq(NT("ExpressionName"), T("::"), optional(NT("TypeArguments")), NT("Identifier")),
                seq(NT("Primary"), T("::"), optional(NT("TypeArguments")), NT("Identifier")),
                seq(NT("ReferenceType"), T("::"), optional(NT("TypeArguments")), NT("Identifier")),
                seq(T("super"), T("::"), optional(NT("TypeArguments")), NT("Identifier")),
                seq(NT("TypeName"), T("."), T("super"), T("::"), optional(NT("TypeArguments")), NT("Identifier")),
                seq(NT("ClassType"), T("::"), optional(NT("TypeArguments")), T("new")),
                seq(NT("ArrayType"), T("::"), T("new"))
            )
        )
    )

    add("Expression", lambda:
        diagram(choice(0, NT("LambdaExpression"), NT("AssignmentExpression")))
    )

    add("LambdaExpression", lambda:
        diagram(seq(NT("LambdaParameters"), T("->"), NT("LambdaBody")))
    )

    add("LambdaParameters", lambda:
        diagram(choice(0, seq(T("("), optional(NT("LambdaParameterList")), T(")")), NT("ConciseLambdaParameter")))
    )

    add("LambdaParameterList", lambda:
        diagram(
            choice(0,
                separated("NormalLambdaParameter"),
                separated("ConciseLambdaParameter")
            )
        )
    )

    add("NormalLambdaParameter", lambda:
        diagram(
            choice(0,
                seq(zero_or_more(NT("VariableModifier")), NT("LambdaParameterType"), NT("VariableDeclaratorId")),
                NT("VariableArityParameter")
            )
        )
    )

    add("LambdaParameterType", lambda:
        diagram(choice(0, NT("UnannType"), T("var")))
    )

    add("ConciseLambdaParameter", lambda:
        diagram(choice(0, NT("Identifier"), T("_")))
    )

    add("LambdaBody", lambda:
        diagram(choice(0, NT("Expression"), NT("Block")))
    )

    add("AssignmentExpression", lambda:
        diagram(choice(0, NT("ConditionalExpression"), NT("Assignment")))
    )

    add("Assignment", lambda:
        diagram(seq(NT("LeftHandSide"), NT("AssignmentOperator"), NT("Expression")))
    )

    add("LeftHandSide", lambda:
        diagram(choice(0, NT("ExpressionName"), NT("FieldAccess"), NT("ArrayAccess")))
    )

    add("AssignmentOperator", lambda:
        diagram(choice(0, T("="), T("*="), T("/="), T("%="), T("+="), T("-="), T("<<="), T(">>="), T(">>>="), T("&="), T("^="), T("|=")))
    )

    add("ConditionalExpression", lambda:
        diagram(
            choice(0,
                NT("ConditionalOrExpression"),
                seq(NT("ConditionalOrExpression"), T("?"), NT("Expression"), T(":"), NT("ConditionalExpression")),
                seq(NT("ConditionalOrExpression"), T("?"), NT("Expression"), T(":"), NT("LambdaExpression"))
            )
        )
    )

    add("ConditionalOrExpression", lambda: diagram(precedence_chain("ConditionalAndExpression", ["||"])))

    add("ConditionalAndExpression", lambda: diagram(precedence_chain("InclusiveOrExpression", ["&&"])))

    add("InclusiveOrExpression", lambda: diagram(precedence_chain("ExclusiveOrExpression", ["|"])))

    add("ExclusiveOrExpression", lambda: diagram(precedence_chain("AndExpression", ["^"])))

    add("AndExpression", lambda: diagram(precedence_chain("EqualityExpression", ["&"])))

    add("EqualityExpression", lambda: diagram(precedence_chain("RelationalExpression", ["==", "!="])))

    add("RelationalExpression", lambda:
        diagram(
            choice(0,
                precedence_chain("ShiftExpression", ["<", ">", "<=", ">="]),
                NT("InstanceofExpression")
            )
        )
    )

    add("InstanceofExpression", lambda:
        diagram(
            choice(0,
                seq(NT("RelationalExpression"), T("instanceof"), NT("ReferenceType")),
                seq(NT("RelationalExpression"), T("instanceof"), NT("Pattern"))
            )
        )
    )

    add("ShiftExpression", lambda: diagram(precedence_chain("AdditiveExpression", ["<<", ">>", ">>>"])))

    add("AdditiveExpression", lambda: diagram(precedence_chain("MultiplicativeExpression", ["+", "-"])))

    add("MultiplicativeExpression", lambda: diagram(precedence_chain("UnaryExpression", ["*", "/", "%"])))

    add("UnaryExpression", lambda:
        diagram(
            choice(0,
                NT("PreIncrementExpression"),
                NT("PreDecrementExpression"),
                seq(T("+"), NT("UnaryExpression")),
                seq(T("-"), NT("UnaryExpression")),
                NT("UnaryExpressionNotPlusMinus")
            )
        )
    )

    add("PreIncrementExpression", lambda:
        diagram(seq(T("++"), NT("UnaryExpression")))
    )

    add("PreDecrementExpression", lambda:
        diagram(seq(T("--"), NT("UnaryExpression")))
    )

    add("UnaryExpressionNotPlusMinus", lambda:
        diagram(
            choice(0,
                NT("PostfixExpression"),
                seq(T("~"), NT("UnaryExpression")),
                seq(T("!"), NT("UnaryExpression")),
                NT("CastExpression"),
                NT("SwitchExpression")
            )
        )
    )

    add("PostfixExpression", lambda:
        diagram(choice(0, NT("Primary"), NT("ExpressionName"), NT("PostIncrementExpression"), NT("PostDecrementExpression")))
    )

    add("PostIncrementExpression", lambda:
        diagram(seq(NT("PostfixExpression"), T("++")))
    )

    add("PostDecrementExpression", lambda:
        diagram(seq(NT("PostfixExpression"), T("--")))
    )

    add("CastExpression", lambda:
        diagram(
            choice(0,
                seq(T("("), NT("PrimitiveType"), T(")"), NT("UnaryExpression")),
                seq(T("("), NT("ReferenceType"), zero_or_more(NT("AdditionalBound")), T(")"), NT("UnaryExpressionNotPlusMinus")),
                seq(T("("), NT("ReferenceType"), zero_or_more(NT("AdditionalBound")), T(")"), NT("LambdaExpression"))
            )
        )
    )

    add("SwitchExpression", lambda:
        diagram(seq(T("switch"), T("("), NT("Expression"), T(")"), NT("SwitchBlock")))
    )
