"""JLS §14 Blocks, Statements, and Patterns."""

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

    add("Block", lambda:
        diagram(seq(T("{"), optional(NT("BlockStatements")), T("}")))
    )

    add("BlockStatements", lambda:
        diagram(one_or_more(NT("BlockStatement")))
    )

    add("BlockStatement", lambda:
        diagram(choice(0, NT("LocalClassOrInterfaceDeclaration"), NT("LocalVariableDeclarationStatement"), NT("Statement")))
    )

    add("LocalClassOrInterfaceDeclaration", lambda:
        diagram(choice(0, NT("ClassDeclaration"), NT("NormalInterfaceDeclaration")))
    )

    add("LocalVariableDeclarationStatement", lambda:
        diagram(seq(NT("LocalVariableDeclaration"), T(";")))
    )

    add("LocalVariableDeclaration", lambda:
        diagram(seq(zero_or_more(NT("VariableModifier")), NT("LocalVariableType"), NT("VariableDeclaratorList")))
    )

    add("LocalVariableType", lambda:
        diagram(choice(0, NT("UnannType"), T("var")))
    )

    add("Statement", lambda:
        diagram(
            choice(0,
                NT("StatementWithoutTrailingSubstatement"),
                NT("LabeledStatement"),
                NT("IfThenStatement"),
                NT("IfThenElseStatement"),
                NT("WhileStatement"),
                NT("ForStatement")
            )
        )
    )

    add("StatementNoShortIf", lambda:
        diagram(
            choice(0,
                NT("StatementWithoutTrailingSubstatement"),
                NT("LabeledStatementNoShortIf"),
                NT("IfThenElseStatementNoShortIf"),
                NT("WhileStatementNoShortIf"),
                NT("ForStatementNoShortIf")
            )
        )
    )

    add("StatementWithoutTrailingSubstatement", lambda:
        diagram(
            choice(0,
                NT("Block"),
                NT("EmptyStatement"),
                NT("ExpressionStatement"),
                NT("AssertStatement"),
                NT("SwitchStatement"),
                NT("DoStatement"),
                NT("BreakStatement"),
                NT("ContinueStatement"),
                NT("ReturnStatement"),
                NT("SynchronizedStatement"),
                NT("ThrowStatement"),
                NT("TryStatement"),
                NT("YieldStatement")
            )
        )
    )

    add("EmptyStatement", lambda:
        diagram(T(";"))
    )

    add("LabeledStatement", lambda:
        diagram(seq(NT("Identifier"), T(":"), NT("Statement")))
    )

    add("LabeledStatementNoShortIf", lambda:
        diagram(seq(NT("Identifier"), T(":"), NT("StatementNoShortIf")))
    )

    add("ExpressionStatement", lambda:
        diagram(seq(NT("StatementExpression"), T(";")))
    )

    add("StatementExpression", lambda:
        diagram(
            choice(0,
                NT("Assignment"),
                NT("PreIncrementExpression"),
                NT("PreDecrementExpression"),
                NT("PostIncrementExpression"),
                NT("PostDecrementExpression"),
                NT("MethodInvocation"),
                NT("ClassInstanceCreationExpression")
            )
        )
    )

    add("IfThenStatement", lambda:
        diagram(seq(T("if"), T("("), NT("Expression"), T(")"), NT("Statement")))
    )

    add("IfThenElseStatement", lambda:
        diagram(seq(T("if"), T("("), NT("Expression"), T(")"), NT("StatementNoShortIf"), T("else"), NT("Statement")))
    )

    add("IfThenElseStatementNoShortIf", lambda:
        diagram(seq(T("if"), T("("), NT("Expression"), T(")"), NT("StatementNoShortIf"), T("else"), NT("StatementNoShortIf")))
    )

    add("AssertStatement", lambda:
        diagram(
            choice(0,
                seq(T("assert"), NT("Expression"), T(";")),
                seq(T("assert"), NT("Expression"), T(":"), NT("Expression"), T(";"))
            )
        )
    )

    add("SwitchStatement", lambda:
        diagram(seq(T("switch"), T("("), NT("Expression"), T(")"), NT("SwitchBlock")))
    )

    add("SwitchBlock", lambda:
        diagram(
            choice(0,
                seq(T("{"), one_or_more(NT("SwitchRule")), T("}")),
                seq(T("{"), zero_or_more(NT("SwitchBlockStatementGroup")), zero_or_more(seq(NT("SwitchLabel"), T(":"))), T("}"))
            )
        )
    )

    add("SwitchRule", lambda:
        diagram(
            choice(0,
                seq(NT("SwitchLabel"), T("->"), NT("Expression"), T(";")),
                seq(NT("SwitchLabel"), T("->"), NT("Block")),
                seq(NT("SwitchLabel"), T("->"), NT("ThrowStatement"))
            )
        )
    )

    add("SwitchBlockStatementGroup", lambda:
        diagram(seq(NT("SwitchLabel"), T(":"), zero_or_more(seq(NT("SwitchLabel"), T(":"))), NT("BlockStatements")))
    )

    add("SwitchLabel", lambda:
        diagram(
            choice(0,
                seq(T("case"), NT("CaseConstant"), zero_or_more(seq(T(","), NT("CaseConstant")))),
                seq(T("case"), T("null"), optional(seq(T(","), T("default")))),
                seq(T("case"), NT("CasePattern"), zero_or_more(seq(T(","), NT("CasePattern"))), optional(NT("Guard"))),
                T("default")
            )
        )
    )

    add("CaseConstant", lambda:
        diagram(NT("ConditionalExpression"))
    )

    add("CasePattern", lambda:
        diagram(NT("Pattern"))
    )

    add("Guard", lambda:
        diagram(seq(T("when"), NT("Expression")))
    )

    add("WhileStatement", lambda:
        diagram(seq(T("while"), T("("), NT("Expression"), T(")"), NT("Statement")))
    )

    add("WhileStatementNoShortIf", lambda:
        diagram(seq(T("while"), T("("), NT("Expression"), T(")"), NT("StatementNoShortIf")))
    )

    add("DoStatement", lambda:
        diagram(seq(T("do"), NT("Statement"), T("while"), T("("), NT("Expression"), T(")"), T(";")))
    )

    add("ForStatement", lambda:
        diagram(choice(0, NT("BasicForStatement"), NT("EnhancedForStatement")))
    )

    add("ForStatementNoShortIf", lambda:
        diagram(choice(0, NT("BasicForStatementNoShortIf"), NT("EnhancedForStatementNoShortIf")))
    )

    add("BasicForStatement", lambda:
        diagram(seq(T("for"), T("("), optional(NT("ForInit")), T(";"), optional(NT("Expression")), T(";"), optional(NT("ForUpdate")), T(")"), NT("Statement")))
    )

    add("BasicForStatementNoShortIf", lambda:
        diagram(seq(T("for"), T("("), optional(NT("ForInit")), T(";"), optional(NT("Expression")), T(";"), optional(NT("ForUpdate")), T(")"), NT("StatementNoShortIf")))
    )

    add("ForInit", lambda:
        diagram(choice(0, NT("StatementExpressionList"), NT("LocalVariableDeclaration")))
    )

    add("ForUpdate", lambda:
        diagram(NT("StatementExpressionList"))
    )

    add("StatementExpressionList", lambda:
        diagram(separated("StatementExpression"))
    )

    add("EnhancedForStatement", lambda:
        diagram(seq(T("for"), T("("), NT("LocalVariableDeclaration"), T(":"), NT("Expression"), T(")"), NT("Statement")))
    )

    add("EnhancedForStatementNoShortIf", lambda:
        diagram(seq(T("for"), T("("), NT("LocalVariableDeclaration"), T(":"), NT("Expression"), T(")"), NT("StatementNoShortIf")))
    )

    add("BreakStatement", lambda:
        diagram(seq(T("break"), optional(NT("Identifier")), T(";")))
    )

    add("YieldStatement", lambda:
        diagram(seq(T("yield"), NT("Expression"), T(";")))
    )

    add("ContinueStatement", lambda:
        diagram(seq(T("continue"), optional(NT("Identifier")), T(";")))
    )

    add("ReturnStatement", lambda:
        diagram(seq(T("return"), optional(NT("Expression")), T(";")))
    )

    add("ThrowStatement", lambda:
        diagram(seq(T("throw"), NT("Expression"), T(";")))
    )

    add("SynchronizedStatement", lambda:
        diagram(seq(T("synchronized"), T("("), NT("Expression"), T(")"), NT("Block")))
    )

    add("TryStatement", lambda:
        diagram(
            choice(0,
                seq(T("try"), NT("Block"), NT("Catches")),
                seq(T("try"), NT("Block"), optional(NT("Catches")), NT("Finally")),
                NT("TryWithResourcesStatement")
            )
        )
    )

    add("Catches", lambda:
        diagram(one_or_more(NT("CatchClause")))
    )

    add("CatchClause", lambda:
        diagram(seq(T("catch"), T("("), NT("CatchFormalParameter"), T(")"), NT("Block")))
    )

    add("CatchFormalParameter", lambda:
        diagram(seq(zero_or_more(NT("VariableModifier")), NT("CatchType"), NT("VariableDeclaratorId")))
    )

    add("CatchType", lambda:
        diagram(seq(NT("UnannClassType"), zero_or_more(seq(T("|"), NT("ClassType")))))
    )

    add("Finally", lambda:
        diagram(seq(T("finally"), NT("Block")))
    )

    add("TryWithResourcesStatement", lambda:
        diagram(seq(T("try"), NT("ResourceSpecification"), NT("Block"), optional(NT("Catches")), optional(NT("Finally"))))
    )

    add("ResourceSpecification", lambda:
        diagram(seq(T("("), NT("ResourceList"), optional(T(";")), T(")")))
    )

    add("ResourceList", lambda:
        diagram(seq(NT("Resource"), zero_or_more(seq(T(";"), NT("Resource")))))
    )

    add("Resource", lambda:
        diagram(choice(0, NT("LocalVariableDeclaration"), NT("VariableAccess")))
    )

    add("VariableAccess", lambda:
        diagram(choice(0, NT("ExpressionName"), NT("FieldAccess")))
    )

    add("Pattern", lambda:
        diagram(choice(0, NT("TypePattern"), NT("RecordPattern")))
    )

    add("TypePattern", lambda:
        diagram(NT("LocalVariableDeclaration"))
    )

    add("RecordPattern", lambda:
        diagram(seq(NT("ReferenceType"), T("("), optional(NT("ComponentPatternList")), T(")")))
    )

    add("ComponentPatternList", lambda:
        diagram(separated("ComponentPattern"))
    )

    add("ComponentPattern", lambda:
        diagram(choice(0, NT("Pattern"), NT("MatchAllPattern")))
    )

    add("MatchAllPattern", lambda:
        diagram(T("_"))
    )
