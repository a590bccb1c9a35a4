"""
Grammar chapters of JLS Chapter 19, in display order.

Grouping only: it decides where a rule is shown, not whether it exists.
"""

from jls_railroad.core.sections import Section

JAVA25_SECTIONS: tuple[Section, ...] = (
    Section(
        id="lexical",
        title="§3 Lexical Structure",
        rules=(
            "Identifier",
            "IdentifierChars",
            "JavaLetter",
            "JavaLetterOrDigit",
            "TypeIdentifier",
            "UnqualifiedMethodIdentifier",
            "Literal",
        ),
    ),
    Section(
        id="types",
        title="§4 Types, Values, and Variables",
        rules=(
            "Type",
            "PrimitiveType",
            "NumericType",
            "IntegralType",
            "FloatingPointType",
            "ReferenceType",
            "ClassOrInterfaceType",
            "ClassType",
            "InterfaceType",
            "TypeVariable",
            "ArrayType",
            "Dims",
            "TypeParameter",
            "TypeParameterModifier",
            "TypeBound",
            "AdditionalBound",
            "TypeArguments",
            "TypeArgumentList",
            "TypeArgument",
            "Wildcard",
            "WildcardBounds",
        ),
    ),
    Section(
        id="names",
        title="§6 Names",
        rules=(
            "ModuleName",
            "PackageName",
            "TypeName",
            "ExpressionName",
            "MethodName",
            "PackageOrTypeName",
            "AmbiguousName",
        ),
    ),
    Section(
        id="packages",
        title="§7 Packages and Modules",
        rules=(
            "CompilationUnit",
            "OrdinaryCompilationUnit",
            "ModularCompilationUnit",
            "PackageDeclaration",
            "PackageModifier",
            "ImportDeclaration",
            "SingleTypeImportDeclaration",
            "TypeImportOnDemandDeclaration",
            "SingleStaticImportDeclaration",
            "StaticImportOnDemandDeclaration",
            "SingleModuleImportDeclaration",
            "TopLevelClassOrInterfaceDeclaration",
            "ModuleDeclaration",
            "ModuleDirective",
            "RequiresModifier",
        ),
    ),
    Section(
        id="classes",
        title="§8 Classes",
        rules=(
            "ClassDeclaration",
            "NormalClassDeclaration",
            "ClassModifier",
            "TypeParameters",
            "TypeParameterList",
            "ClassExtends",
            "ClassImplements",
            "InterfaceTypeList",
            "ClassPermits",
            "ClassBody",
            "ClassBodyDeclaration",
            "ClassMemberDeclaration",
            "FieldDeclaration",
            "FieldModifier",
            "VariableDeclaratorList",
            "VariableDeclarator",
            "VariableDeclaratorId",
            "VariableInitializer",
            "UnannType",
            "UnannPrimitiveType",
            "UnannReferenceType",
            "UnannClassOrInterfaceType",
            "UnannClassType",
            "UnannInterfaceType",
            "UnannTypeVariable",
            "UnannArrayType",
            "MethodDeclaration",
            "MethodModifier",
            "MethodHeader",
            "Result",
            "MethodDeclarator",
            "ReceiverParameter",
            "FormalParameterList",
            "FormalParameter",
            "VariableArityParameter",
            "VariableModifier",
            "Throws",
            "ExceptionTypeList",
            "ExceptionType",
            "MethodBody",
            "InstanceInitializer",
            "StaticInitializer",
            "ConstructorDeclaration",
            "ConstructorModifier",
            "ConstructorDeclarator",
            "SimpleTypeName",
            "ConstructorBody",
            "ConstructorInvocation",
            "EnumDeclaration",
            "EnumBody",
            "EnumConstantList",
            "EnumConstant",
            "EnumConstantModifier",
            "EnumBodyDeclarations",
            "RecordDeclaration",
            "RecordHeader",
            "RecordComponentList",
            "RecordComponent",
            "VariableArityRecordComponent",
            "RecordComponentModifier",
            "RecordBody",
            "RecordBodyDeclaration",
            "CompactConstructorDeclaration",
        ),
    ),
    Section(
        id="interfaces",
        title="§9 Interfaces",
        rules=(
            "InterfaceDeclaration",
            "NormalInterfaceDeclaration",
            "InterfaceModifier",
            "InterfaceExtends",
            "InterfacePermits",
            "InterfaceBody",
            "InterfaceMemberDeclaration",
            "ConstantDeclaration",
            "ConstantModifier",
            "InterfaceMethodDeclaration",
            "InterfaceMethodModifier",
            "AnnotationInterfaceDeclaration",
            "AnnotationInterfaceBody",
            "AnnotationInterfaceMemberDeclaration",
            "AnnotationInterfaceElementDeclaration",
            "AnnotationInterfaceElementModifier",
            "DefaultValue",
            "Annotation",
            "NormalAnnotation",
            "ElementValuePairList",
            "ElementValuePair",
            "ElementValue",
            "ElementValueArrayInitializer",
            "ElementValueList",
            "MarkerAnnotation",
            "SingleElementAnnotation",
        ),
    ),
    Section(
        id="arrays",
        title="§10 Arrays",
        rules=(
            "ArrayInitializer",
            "VariableInitializerList",
        ),
    ),
    Section(
        id="statements",
        title="§14 Blocks, Statements, and Patterns",
        rules=(
            "Block",
            "BlockStatements",
            "BlockStatement",
            "LocalClassOrInterfaceDeclaration",
            "LocalVariableDeclarationStatement",
            "LocalVariableDeclaration",
            "LocalVariableType",
            "Statement",
            "StatementNoShortIf",
            "StatementWithoutTrailingSubstatement",
            "EmptyStatement",
            "LabeledStatement",
            "LabeledStatementNoShortIf",
            "ExpressionStatement",
            "StatementExpression",
            "IfThenStatement",
            "IfThenElseStatement",
            "IfThenElseStatementNoShortIf",
            "AssertStatement",
            "SwitchStatement",
            "SwitchBlock",
            "SwitchRule",
            "SwitchBlockStatementGroup",
            "SwitchLabel",
            "CaseConstant",
            "CasePattern",
            "Guard",
            "WhileStatement",
            "WhileStatementNoShortIf",
            "DoStatement",
            "ForStatement",
            "ForStatementNoShortIf",
            "BasicForStatement",
            "BasicForStatementNoShortIf",
            "ForInit",
            "ForUpdate",
            "StatementExpressionList",
            "EnhancedForStatement",
            "EnhancedForStatementNoShortIf",
            "BreakStatement",
            "YieldStatement",
            "ContinueStatement",
            "ReturnStatement",
            "ThrowStatement",
            "SynchronizedStatement",
            "TryStatement",
            "Catches",
            "CatchClause",
            "CatchFormalParameter",
            "CatchType",
            "Finally",
            "TryWithResourcesStatement",
            "ResourceSpecification",
            "ResourceList",
            "Resource",
            "VariableAccess",
            "Pattern",
            "TypePattern",
            "RecordPattern",
            "ComponentPatternList",
            "ComponentPattern",
            "MatchAllPattern",
        ),
    ),
    Section(
        id="expressions",
        title="§15 Expressions",
        rules=(
            "Primary",
            "PrimaryNoNewArray",
            "ClassLiteral",
            "ClassInstanceCreationExpression",
            "UnqualifiedClassInstanceCreationExpression",
            "ClassOrInterfaceTypeToInstantiate",
            "TypeArgumentsOrDiamond",
            "ArrayCreationExpression",
            "ArrayCreationExpressionWithoutInitializer",
            "ArrayCreationExpressionWithInitializer",
            "DimExprs",
            "DimExpr",
            "ArrayAccess",
            "FieldAccess",
            "MethodInvocation",
            "ArgumentList",
            "MethodReference",
            "Expression",
            "LambdaExpression",
            "LambdaParameters",
            "LambdaParameterList",
            "NormalLambdaParameter",
            "LambdaParameterType",
            "ConciseLambdaParameter",
            "LambdaBody",
            "AssignmentExpression",
            "Assignment",
            "LeftHandSide",
            "AssignmentOperator",
            "ConditionalExpression",
            "ConditionalOrExpression",
            "ConditionalAndExpression",
            "InclusiveOrExpression",
            "ExclusiveOrExpression",
            "AndExpression",
            "EqualityExpression",
            "RelationalExpression",
            "InstanceofExpression",
            "ShiftExpression",
            "AdditiveExpression",
            "MultiplicativeExpression",
            "UnaryExpression",
            "PreIncrementExpression",
            "PreDecrementExpression",
            "UnaryExpressionNotPlusMinus",
            "PostfixExpression",
            "PostIncrementExpression",
            "PostDecrementExpression",
            "CastExpression",
            "SwitchExpression",
        ),
    ),
)
