"""
EBNF text for every Java SE 25 grammar rule, as given in JLS Chapter 19.

Each value is the production as displayed beneath its railroad diagram:
the rule name and a colon, then one indented line per alternative. Keys
must match the diagram factories in ``grammar.rules``; run
``jls-railroad coverage`` after editing either side.
"""

EBNF_DEFINITIONS: dict[str, str] = {
    # §3 Lexical Structure
    "Identifier": (
        "Identifier:\n"
        "    IdentifierChars but not a ReservedKeyword or BooleanLiteral or NullLiteral"
    ),
    "IdentifierChars": (
        "IdentifierChars:\n"
        "    JavaLetter {JavaLetterOrDigit}"
    ),
    "JavaLetter": (
        "JavaLetter:\n"
        '    any Unicode character that is a "Java letter"'
    ),
    "JavaLetterOrDigit": (
        "JavaLetterOrDigit:\n"
        '    any Unicode character that is a "Java letter-or-digit"'
    ),
    "TypeIdentifier": (
        "TypeIdentifier:\n"
        "    Identifier but not permits, record, sealed, var, or yield"
    ),
    "UnqualifiedMethodIdentifier": (
        "UnqualifiedMethodIdentifier:\n"
        "    Identifier but not yield"
    ),
    "Literal": (
        "Literal:\n"
        "    IntegerLiteral\n"
        "    FloatingPointLiteral\n"
        "    BooleanLiteral\n"
        "    CharacterLiteral\n"
        "    StringLiteral\n"
        "    TextBlock\n"
        "    NullLiteral"
    ),

    # §4 Types, Values, and Variables
    "Type": (
        "Type:\n"
        "    PrimitiveType\n"
        "    ReferenceType"
    ),
    "PrimitiveType": (
        "PrimitiveType:\n"
        "    {Annotation} NumericType\n"
        "    {Annotation} boolean"
    ),
    "NumericType": (
        "NumericType:\n"
        "    IntegralType\n"
        "    FloatingPointType"
    ),
    "IntegralType": (
        "IntegralType:\n"
        "    (one of) byte short int long char"
    ),
    "FloatingPointType": (
        "FloatingPointType:\n"
        "    (one of) float double"
    ),
    "ReferenceType": (
        "ReferenceType:\n"
        "    ClassOrInterfaceType\n"
        "    TypeVariable\n"
        "    ArrayType"
    ),
    "ClassOrInterfaceType": (
        "ClassOrInterfaceType:\n"
        "    ClassType\n"
        "    InterfaceType"
    ),
    "ClassType": (
        "ClassType:\n"
        "    {Annotation} TypeIdentifier [TypeArguments]\n"
        "    PackageName . {Annotation} TypeIdentifier [TypeArguments]\n"
        "    ClassOrInterfaceType . {Annotation} TypeIdentifier [TypeArguments]"
    ),
    "InterfaceType": (
        "InterfaceType:\n"
        "    ClassType"
    ),
    "TypeVariable": (
        "TypeVariable:\n"
        "    {Annotation} TypeIdentifier"
    ),
    "ArrayType": (
        "ArrayType:\n"
        "    PrimitiveType Dims\n"
        "    ClassOrInterfaceType Dims\n"
        "    TypeVariable Dims"
    ),
    "Dims": (
        "Dims:\n"
        "    {Annotation} [ ] {{Annotation} [ ]}"
    ),
    "TypeParameter": (
        "TypeParameter:\n"
        "    {TypeParameterModifier} TypeIdentifier [TypeBound]"
    ),
    "TypeParameterModifier": (
        "TypeParameterModifier:\n"
        "    Annotation"
    ),
    "TypeBound": (
        "TypeBound:\n"
        "    extends TypeVariable\n"
        "    extends ClassOrInterfaceType {AdditionalBound}"
    ),
    "AdditionalBound": (
        "AdditionalBound:\n"
        "    & InterfaceType"
    ),
    "TypeArguments": (
        "TypeArguments:\n"
        "    < TypeArgumentList >"
    ),
    "TypeArgumentList": (
        "TypeArgumentList:\n"
        "    TypeArgument {, TypeArgument}"
    ),
    "TypeArgument": (
        "TypeArgument:\n"
        "    ReferenceType\n"
        "    Wildcard"
    ),
    "Wildcard": (
        "Wildcard:\n"
        "    {Annotation} ? [WildcardBounds]"
    ),
    "WildcardBounds": (
        "WildcardBounds:\n"
        "    extends ReferenceType\n"
        "    super ReferenceType"
    ),

    # §6 Names
    "ModuleName": (
        "ModuleName:\n"
        "    Identifier\n"
        "    ModuleName . Identifier"
    ),
    "PackageName": (
        "PackageName:\n"
        "    Identifier\n"
        "    PackageName . Identifier"
    ),
    "TypeName": (
        "TypeName:\n"
        "    TypeIdentifier\n"
        "    PackageOrTypeName . TypeIdentifier"
    ),
    "ExpressionName": (
        "ExpressionName:\n"
        "    Identifier\n"
        "    AmbiguousName . Identifier"
    ),
    "MethodName": (
        "MethodName:\n"
        "    UnqualifiedMethodIdentifier"
    ),
    "PackageOrTypeName": (
        "PackageOrTypeName:\n"
        "    Identifier\n"
        "    PackageOrTypeName . Identifier"
    ),
    "AmbiguousName": (
        "AmbiguousName:\n"
        "    Identifier\n"
        "    AmbiguousName . Identifier"
    ),

    # §7 Packages and Modules
    "CompilationUnit": (
        "CompilationUnit:\n"
        "    OrdinaryCompilationUnit\n"
        "    CompactCompilationUnit\n"
        "    ModularCompilationUnit"
    ),
    "OrdinaryCompilationUnit": (
        "OrdinaryCompilationUnit:\n"
        "    [PackageDeclaration] {ImportDeclaration} {TopLevelClassOrInterfaceDeclaration}"
    ),
    "ModularCompilationUnit": (
        "ModularCompilationUnit:\n"
        "    {ImportDeclaration} ModuleDeclaration"
    ),
    "PackageDeclaration": (
        "PackageDeclaration:\n"
        "    {PackageModifier} package Identifier {. Identifier} ;"
    ),
    "PackageModifier": (
        "PackageModifier:\n"
        "    Annotation"
    ),
    "ImportDeclaration": (
        "ImportDeclaration:\n"
        "    SingleTypeImportDeclaration\n"
        "    TypeImportOnDemandDeclaration\n"
        "    SingleStaticImportDeclaration\n"
        "    StaticImportOnDemandDeclaration\n"
        "    SingleModuleImportDeclaration"
    ),
    "SingleTypeImportDeclaration": (
        "SingleTypeImportDeclaration:\n"
        "    import TypeName ;"
    ),
    "TypeImportOnDemandDeclaration": (
        "TypeImportOnDemandDeclaration:\n"
        "    import PackageOrTypeName . * ;"
    ),
    "SingleStaticImportDeclaration": (
        "SingleStaticImportDeclaration:\n"
        "    import static TypeName . Identifier ;"
    ),
    "StaticImportOnDemandDeclaration": (
        "StaticImportOnDemandDeclaration:\n"
        "    import static TypeName . * ;"
    ),
    "SingleModuleImportDeclaration": (
        "SingleModuleImportDeclaration:\n"
        "    import module ModuleName ;"
    ),
    "TopLevelClassOrInterfaceDeclaration": (
        "TopLevelClassOrInterfaceDeclaration:\n"
        "    ClassDeclaration\n"
        "    InterfaceDeclaration\n"
        "    ;"
    ),
    "ModuleDeclaration": (
        "ModuleDeclaration:\n"
        "    {Annotation} [open] module Identifier {. Identifier} { {ModuleDirective} }"
    ),
    "ModuleDirective": (
        "ModuleDirective:\n"
        "    requires {RequiresModifier} ModuleName ;\n"
        "    exports PackageName [to ModuleName {, ModuleName}] ;\n"
        "    opens PackageName [to ModuleName {, ModuleName}] ;\n"
        "    uses TypeName ;\n"
        "    provides TypeName with TypeName {, TypeName} ;"
    ),
    "RequiresModifier": (
        "RequiresModifier:\n"
        "    (one of) transitive static"
    ),

    # §8 Classes
    "ClassDeclaration": (
        "ClassDeclaration:\n"
        "    NormalClassDeclaration\n"
        "    EnumDeclaration\n"
        "    RecordDeclaration"
    ),
    "NormalClassDeclaration": (
        "NormalClassDeclaration:\n"
        "    {ClassModifier} class TypeIdentifier [TypeParameters] [ClassExtends] [ClassImplements] [ClassPermits] ClassBody"
    ),
    "ClassModifier": (
        "ClassModifier:\n"
        "    (one of) Annotation public protected private\n"
        "    abstract static final sealed non-sealed strictfp"
    ),
    "TypeParameters": (
        "TypeParameters:\n"
        "    < TypeParameterList >"
    ),
    "TypeParameterList": (
        "TypeParameterList:\n"
        "    TypeParameter {, TypeParameter}"
    ),
    "ClassExtends": (
        "ClassExtends:\n"
        "    extends ClassType"
    ),
    "ClassImplements": (
        "ClassImplements:\n"
        "    implements InterfaceTypeList"
    ),
    "InterfaceTypeList": (
        "InterfaceTypeList:\n"
        "    InterfaceType {, InterfaceType}"
    ),
    "ClassPermits": (
        "ClassPermits:\n"
        "    permits TypeName {, TypeName}"
    ),
    "ClassBody": (
        "ClassBody:\n"
        "    { {ClassBodyDeclaration} }"
    ),
    "ClassBodyDeclaration": (
        "ClassBodyDeclaration:\n"
        "    ClassMemberDeclaration\n"
        "    InstanceInitializer\n"
        "    StaticInitializer\n"
        "    ConstructorDeclaration"
    ),
    "ClassMemberDeclaration": (
        "ClassMemberDeclaration:\n"
        "    FieldDeclaration\n"
        "    MethodDeclaration\n"
        "    ClassDeclaration\n"
        "    InterfaceDeclaration\n"
        "    ;"
    ),
    "FieldDeclaration": (
        "FieldDeclaration:\n"
        "    {FieldModifier} UnannType VariableDeclaratorList ;"
    ),
    "FieldModifier": (
        "FieldModifier:\n"
        "    (one of) Annotation public protected private\n"
        "    static final transient volatile"
    ),
    "VariableDeclaratorList": (
        "VariableDeclaratorList:\n"
        "    VariableDeclarator {, VariableDeclarator}"
    ),
    "VariableDeclarator": (
        "VariableDeclarator:\n"
        "    VariableDeclaratorId [= VariableInitializer]"
    ),
    "VariableDeclaratorId": (
        "VariableDeclaratorId:\n"
        "    Identifier [Dims]\n"
        "    _"
    ),
    "VariableInitializer": (
        "VariableInitializer:\n"
        "    Expression\n"
        "    ArrayInitializer"
    ),
    "UnannType": (
        "UnannType:\n"
        "    UnannPrimitiveType\n"
        "    UnannReferenceType"
    ),
    "UnannPrimitiveType": (
        "UnannPrimitiveType:\n"
        "    NumericType\n"
        "    boolean"
    ),
    "UnannReferenceType": (
        "UnannReferenceType:\n"
        "    UnannClassOrInterfaceType\n"
        "    UnannTypeVariable\n"
        "    UnannArrayType"
    ),
    "UnannClassOrInterfaceType": (
        "UnannClassOrInterfaceType:\n"
        "    UnannClassType\n"
        "    UnannInterfaceType"
    ),
    "UnannClassType": (
        "UnannClassType:\n"
        "    TypeIdentifier [TypeArguments]\n"
        "    PackageName . {Annotation} TypeIdentifier [TypeArguments]\n"
        "    UnannClassOrInterfaceType . {Annotation} TypeIdentifier [TypeArguments]"
    ),
    "UnannInterfaceType": (
        "UnannInterfaceType:\n"
        "    UnannClassType"
    ),
    "UnannTypeVariable": (
        "UnannTypeVariable:\n"
        "    TypeIdentifier"
    ),
    "UnannArrayType": (
        "UnannArrayType:\n"
        "    UnannPrimitiveType Dims\n"
        "    UnannClassOrInterfaceType Dims\n"
        "    UnannTypeVariable Dims"
    ),
    "MethodDeclaration": (
        "MethodDeclaration:\n"
        "    {MethodModifier} MethodHeader MethodBody"
    ),
    "MethodModifier": (
        "MethodModifier:\n"
        "    (one of) Annotation public protected private\n"
        "    abstract static final synchronized native strictfp"
    ),
    "MethodHeader": (
        "MethodHeader:\n"
        "    Result MethodDeclarator [Throws]\n"
        "    TypeParameters {Annotation} Result MethodDeclarator [Throws]"
    ),
    "Result": (
        "Result:\n"
        "    UnannType\n"
        "    void"
    ),
    "MethodDeclarator": (
        "MethodDeclarator:\n"
        "    Identifier ( [ReceiverParameter ,] [FormalParameterList] ) [Dims]"
    ),
    "ReceiverParameter": (
        "ReceiverParameter:\n"
        "    {Annotation} UnannType [Identifier .] this"
    ),
    "FormalParameterList": (
        "FormalParameterList:\n"
        "    FormalParameter {, FormalParameter}"
    ),
    "FormalParameter": (
        "FormalParameter:\n"
        "    {VariableModifier} UnannType VariableDeclaratorId\n"
        "    VariableArityParameter"
    ),
    "VariableArityParameter": (
        "VariableArityParameter:\n"
        "    {VariableModifier} UnannType {Annotation} ... Identifier"
    ),
    "VariableModifier": (
        "VariableModifier:\n"
        "    Annotation\n"
        "    final"
    ),
    "Throws": (
        "Throws:\n"
        "    throws ExceptionTypeList"
    ),
    "ExceptionTypeList": (
        "ExceptionTypeList:\n"
        "    ExceptionType {, ExceptionType}"
    ),
    "ExceptionType": (
        "ExceptionType:\n"
        "    ClassType\n"
        "    TypeVariable"
    ),
    "MethodBody": (
        "MethodBody:\n"
        "    Block\n"
        "    ;"
    ),
    "InstanceInitializer": (
        "InstanceInitializer:\n"
        "    Block"
    ),
    "StaticInitializer": (
        "StaticInitializer:\n"
        "    static Block"
    ),
    "ConstructorDeclaration": (
        "ConstructorDeclaration:\n"
        "    {ConstructorModifier} ConstructorDeclarator [Throws] ConstructorBody"
    ),
    "ConstructorModifier": (
        "ConstructorModifier:\n"
        "    (one of) Annotation public protected private"
    ),
    "ConstructorDeclarator": (
        "ConstructorDeclarator:\n"
        "    [TypeParameters] SimpleTypeName ( [ReceiverParameter ,] [FormalParameterList] )"
    ),
    "SimpleTypeName": (
        "SimpleTypeName:\n"
        "    TypeIdentifier"
    ),
    "ConstructorBody": (
        "ConstructorBody:\n"
        "    { [BlockStatements] ConstructorInvocation [BlockStatements] }\n"
        "    { [BlockStatements] }"
    ),
    "ConstructorInvocation": (
        "ConstructorInvocation:\n"
        "    [TypeArguments] this ( [ArgumentList] ) ;\n"
        "    [TypeArguments] super ( [ArgumentList] ) ;\n"
        "    ExpressionName . [TypeArguments] super ( [ArgumentList] ) ;\n"
        "    Primary . [TypeArguments] super ( [ArgumentList] ) ;"
    ),
    "EnumDeclaration": (
        "EnumDeclaration:\n"
        "    {ClassModifier} enum TypeIdentifier [ClassImplements] EnumBody"
    ),
    "EnumBody": (
        "EnumBody:\n"
        "    { [EnumConstantList] [,] [EnumBodyDeclarations] }"
    ),
    "EnumConstantList": (
        "EnumConstantList:\n"
        "    EnumConstant {, EnumConstant}"
    ),
    "EnumConstant": (
        "EnumConstant:\n"
        "    {EnumConstantModifier} Identifier [( [ArgumentList] )] [ClassBody]"
    ),
    "EnumConstantModifier": (
        "EnumConstantModifier:\n"
        "    Annotation"
    ),
    "EnumBodyDeclarations": (
        "EnumBodyDeclarations:\n"
        "    ; {ClassBodyDeclaration}"
    ),
    "RecordDeclaration": (
        "RecordDeclaration:\n"
        "    {ClassModifier} record TypeIdentifier [TypeParameters] RecordHeader [ClassImplements] RecordBody"
    ),
    "RecordHeader": (
        "RecordHeader:\n"
        "    ( [RecordComponentList] )"
    ),
    "RecordComponentList": (
        "RecordComponentList:\n"
        "    RecordComponent {, RecordComponent}"
    ),
    "RecordComponent": (
        "RecordComponent:\n"
        "    {RecordComponentModifier} UnannType Identifier\n"
        "    VariableArityRecordComponent"
    ),
    "VariableArityRecordComponent": (
        "VariableArityRecordComponent:\n"
        "    {RecordComponentModifier} UnannType {Annotation} ... Identifier"
    ),
    "RecordComponentModifier": (
        "RecordComponentModifier:\n"
        "    Annotation"
    ),
    "RecordBody": (
        "RecordBody:\n"
        "    { {RecordBodyDeclaration} }"
    ),
    "RecordBodyDeclaration": (
        "RecordBodyDeclaration:\n"
        "    ClassBodyDeclaration\n"
        "    CompactConstructorDeclaration"
    ),
    "CompactConstructorDeclaration": (
        "CompactConstructorDeclaration:\n"
        "    {ConstructorModifier} SimpleTypeName ConstructorBody"
    ),

    # §9 Interfaces
    "InterfaceDeclaration": (
        "InterfaceDeclaration:\n"
        "    NormalInterfaceDeclaration\n"
        "    AnnotationInterfaceDeclaration"
    ),
    "NormalInterfaceDeclaration": (
        "NormalInterfaceDeclaration:\n"
        "    {InterfaceModifier} interface TypeIdentifier [TypeParameters] [InterfaceExtends] [InterfacePermits] InterfaceBody"
    ),
    "InterfaceModifier": (
        "InterfaceModifier:\n"
        "    (one of) Annotation public protected private\n"
        "    abstract static sealed non-sealed strictfp"
    ),
    "InterfaceExtends": (
        "InterfaceExtends:\n"
        "    extends InterfaceTypeList"
    ),
    "InterfacePermits": (
        "InterfacePermits:\n"
        "    permits TypeName {, TypeName}"
    ),
    "InterfaceBody": (
        "InterfaceBody:\n"
        "    { {InterfaceMemberDeclaration} }"
    ),
    "InterfaceMemberDeclaration": (
        "InterfaceMemberDeclaration:\n"
        "    ConstantDeclaration\n"
        "    InterfaceMethodDeclaration\n"
        "    ClassDeclaration\n"
        "    InterfaceDeclaration\n"
        "    ;"
    ),
    "ConstantDeclaration": (
        "ConstantDeclaration:\n"
        "    {ConstantModifier} UnannType VariableDeclaratorList ;"
    ),
    "ConstantModifier": (
        "ConstantModifier:\n"
        "    (one of) Annotation public\n"
        "    static final"
    ),
    "InterfaceMethodDeclaration": (
        "InterfaceMethodDeclaration:\n"
        "    {InterfaceMethodModifier} MethodHeader MethodBody"
    ),
    "InterfaceMethodModifier": (
        "InterfaceMethodModifier:\n"
        "    (one of) Annotation public private\n"
        "    abstract default static strictfp"
    ),
    "AnnotationInterfaceDeclaration": (
        "AnnotationInterfaceDeclaration:\n"
        "    {InterfaceModifier} @ interface TypeIdentifier AnnotationInterfaceBody"
    ),
    "AnnotationInterfaceBody": (
        "AnnotationInterfaceBody:\n"
        "    { {AnnotationInterfaceMemberDeclaration} }"
    ),
    "AnnotationInterfaceMemberDeclaration": (
        "AnnotationInterfaceMemberDeclaration:\n"
        "    AnnotationInterfaceElementDeclaration\n"
        "    ConstantDeclaration\n"
        "    ClassDeclaration\n"
        "    InterfaceDeclaration\n"
        "    ;"
    ),
    "AnnotationInterfaceElementDeclaration": (
        "AnnotationInterfaceElementDeclaration:\n"
        "    {AnnotationInterfaceElementModifier} UnannType Identifier ( ) [Dims] [DefaultValue] ;"
    ),
    "AnnotationInterfaceElementModifier": (
        "AnnotationInterfaceElementModifier:\n"
        "    (one of) Annotation public\n"
        "    abstract"
    ),
    "DefaultValue": (
        "DefaultValue:\n"
        "    default ElementValue"
    ),
    "Annotation": (
        "Annotation:\n"
        "    NormalAnnotation\n"
        "    MarkerAnnotation\n"
        "    SingleElementAnnotation"
    ),
    "NormalAnnotation": (
        "NormalAnnotation:\n"
        "    @ TypeName ( [ElementValuePairList] )"
    ),
    "ElementValuePairList": (
        "ElementValuePairList:\n"
        "    ElementValuePair {, ElementValuePair}"
    ),
    "ElementValuePair": (
        "ElementValuePair:\n"
        "    Identifier = ElementValue"
    ),
    "ElementValue": (
        "ElementValue:\n"
        "    ConditionalExpression\n"
        "    ElementValueArrayInitializer\n"
        "    Annotation"
    ),
    "ElementValueArrayInitializer": (
        "ElementValueArrayInitializer:\n"
        "    { [ElementValueList] [,] }"
    ),
    "ElementValueList": (
        "ElementValueList:\n"
        "    ElementValue {, ElementValue}"
    ),
    "MarkerAnnotation": (
        "MarkerAnnotation:\n"
        "    @ TypeName"
    ),
    "SingleElementAnnotation": (
        "SingleElementAnnotation:\n"
        "    @ TypeName ( ElementValue )"
    ),

    # §10 Arrays
    "ArrayInitializer": (
        "ArrayInitializer:\n"
        "    { [VariableInitializerList] [,] }"
    ),
    "VariableInitializerList": (
        "VariableInitializerList:\n"
        "    VariableInitializer {, VariableInitializer}"
    ),

    # §14 Blocks, Statements, and Patterns
    "Block": (
        "Block:\n"
        "    { [BlockStatements] }"
    ),
    "BlockStatements": (
        "BlockStatements:\n"
        "    BlockStatement {BlockStatement}"
    ),
    "BlockStatement": (
        "BlockStatement:\n"
        "    LocalClassOrInterfaceDeclaration\n"
        "    LocalVariableDeclarationStatement\n"
        "    Statement"
    ),
    "LocalClassOrInterfaceDeclaration": (
        "LocalClassOrInterfaceDeclaration:\n"
        "    ClassDeclaration\n"
        "    NormalInterfaceDeclaration"
    ),
    "LocalVariableDeclarationStatement": (
        "LocalVariableDeclarationStatement:\n"
        "    LocalVariableDeclaration ;"
    ),
    "LocalVariableDeclaration": (
        "LocalVariableDeclaration:\n"
        "    {VariableModifier} LocalVariableType VariableDeclaratorList"
    ),
    "LocalVariableType": (
        "LocalVariableType:\n"
        "    UnannType\n"
        "    var"
    ),
    "Statement": (
        "Statement:\n"
        "    StatementWithoutTrailingSubstatement\n"
        "    LabeledStatement\n"
        "    IfThenStatement\n"
        "    IfThenElseStatement\n"
        "    WhileStatement\n"
        "    ForStatement"
    ),
    "StatementNoShortIf": (
        "StatementNoShortIf:\n"
        "    StatementWithoutTrailingSubstatement\n"
        "    LabeledStatementNoShortIf\n"
        "    IfThenElseStatementNoShortIf\n"
        "    WhileStatementNoShortIf\n"
        "    ForStatementNoShortIf"
    ),
    "StatementWithoutTrailingSubstatement": (
        "StatementWithoutTrailingSubstatement:\n"
        "    Block\n"
        "    EmptyStatement\n"
        "    ExpressionStatement\n"
        "    AssertStatement\n"
        "    SwitchStatement\n"
        "    DoStatement\n"
        "    BreakStatement\n"
        "    ContinueStatement\n"
        "    ReturnStatement\n"
        "    SynchronizedStatement\n"
        "    ThrowStatement\n"
        "    TryStatement\n"
        "    YieldStatement"
    ),
    "EmptyStatement": (
        "EmptyStatement:\n"
        "    ;"
    ),
    "LabeledStatement": (
        "LabeledStatement:\n"
        "    Identifier : Statement"
    ),
    "LabeledStatementNoShortIf": (
        "LabeledStatementNoShortIf:\n"
        "    Identifier : StatementNoShortIf"
    ),
    "ExpressionStatement": (
        "ExpressionStatement:\n"
        "    StatementExpression ;"
    ),
    "StatementExpression": (
        "StatementExpression:\n"
        "    Assignment\n"
        "    PreIncrementExpression\n"
        "    PreDecrementExpression\n"
        "    PostIncrementExpression\n"
        "    PostDecrementExpression\n"
        "    MethodInvocation\n"
        "    ClassInstanceCreationExpression"
    ),
    "IfThenStatement": (
        "IfThenStatement:\n"
        "    if ( Expression ) Statement"
    ),
    "IfThenElseStatement": (
        "IfThenElseStatement:\n"
        "    if ( Expression ) StatementNoShortIf else Statement"
    ),
    "IfThenElseStatementNoShortIf": (
        "IfThenElseStatementNoShortIf:\n"
        "    if ( Expression ) StatementNoShortIf else StatementNoShortIf"
    ),
    "AssertStatement": (
        "AssertStatement:\n"
        "    assert Expression ;\n"
        "    assert Expression : Expression ;"
    ),
    "SwitchStatement": (
        "SwitchStatement:\n"
        "    switch ( Expression ) SwitchBlock"
    ),
    "SwitchBlock": (
        "SwitchBlock:\n"
        "    { SwitchRule {SwitchRule} }\n"
        "    { {SwitchBlockStatementGroup} {SwitchLabel :} }"
    ),
    "SwitchRule": (
        "SwitchRule:\n"
        "    SwitchLabel -> Expression ;\n"
        "    SwitchLabel -> Block\n"
        "    SwitchLabel -> ThrowStatement"
    ),
    "SwitchBlockStatementGroup": (
        "SwitchBlockStatementGroup:\n"
        "    SwitchLabel : {SwitchLabel :} BlockStatements"
    ),
    "SwitchLabel": (
        "SwitchLabel:\n"
        "    case CaseConstant {, CaseConstant}\n"
        "    case null [, default]\n"
        "    case CasePattern {, CasePattern} [Guard]\n"
        "    default"
    ),
    "CaseConstant": (
        "CaseConstant:\n"
        "    ConditionalExpression"
    ),
    "CasePattern": (
        "CasePattern:\n"
        "    Pattern"
    ),
    "Guard": (
        "Guard:\n"
        "    when Expression"
    ),
    "WhileStatement": (
        "WhileStatement:\n"
        "    while ( Expression ) Statement"
    ),
    "WhileStatementNoShortIf": (
        "WhileStatementNoShortIf:\n"
        "    while ( Expression ) StatementNoShortIf"
    ),
    "DoStatement": (
        "DoStatement:\n"
        "    do Statement while ( Expression ) ;"
    ),
    "ForStatement": (
        "ForStatement:\n"
        "    BasicForStatement\n"
        "    EnhancedForStatement"
    ),
    "ForStatementNoShortIf": (
        "ForStatementNoShortIf:\n"
        "    BasicForStatementNoShortIf\n"
        "    EnhancedForStatementNoShortIf"
    ),
    "BasicForStatement": (
        "BasicForStatement:\n"
        "    for ( [ForInit] ; [Expression] ; [ForUpdate] ) Statement"
    ),
    "BasicForStatementNoShortIf": (
        "BasicForStatementNoShortIf:\n"
        "    for ( [ForInit] ; [Expression] ; [ForUpdate] ) StatementNoShortIf"
    ),
    "ForInit": (
        "ForInit:\n"
        "    StatementExpressionList\n"
        "    LocalVariableDeclaration"
    ),
    "ForUpdate": (
        "ForUpdate:\n"
        "    StatementExpressionList"
    ),
    "StatementExpressionList": (
        "StatementExpressionList:\n"
        "    StatementExpression {, StatementExpression}"
    ),
    "EnhancedForStatement": (
        "EnhancedForStatement:\n"
        "    for ( LocalVariableDeclaration : Expression ) Statement"
    ),
    "EnhancedForStatementNoShortIf": (
        "EnhancedForStatementNoShortIf:\n"
        "    for ( LocalVariableDeclaration : Expression ) StatementNoShortIf"
    ),
    "BreakStatement": (
        "BreakStatement:\n"
        "    break [Identifier] ;"
    ),
    "YieldStatement": (
        "YieldStatement:\n"
        "    yield Expression ;"
    ),
    "ContinueStatement": (
        "ContinueStatement:\n"
        "    continue [Identifier] ;"
    ),
    "ReturnStatement": (
        "ReturnStatement:\n"
        "    return [Expression] ;"
    ),
    "ThrowStatement": (
        "ThrowStatement:\n"
        "    throw Expression ;"
    ),
    "SynchronizedStatement": (
        "SynchronizedStatement:\n"
        "    synchronized ( Expression ) Block"
    ),
    "TryStatement": (
        "TryStatement:\n"
        "    try Block Catches\n"
        "    try Block [Catches] Finally\n"
        "    TryWithResourcesStatement"
    ),
    "Catches": (
        "Catches:\n"
        "    CatchClause {CatchClause}"
    ),
    "CatchClause": (
        "CatchClause:\n"
        "    catch ( CatchFormalParameter ) Block"
    ),
    "CatchFormalParameter": (
        "CatchFormalParameter:\n"
        "    {VariableModifier} CatchType VariableDeclaratorId"
    ),
    "CatchType": (
        "CatchType:\n"
        "    UnannClassType {| ClassType}"
    ),
    "Finally": (
        "Finally:\n"
        "    finally Block"
    ),
    "TryWithResourcesStatement": (
        "TryWithResourcesStatement:\n"
        "    try ResourceSpecification Block [Catches] [Finally]"
    ),
    "ResourceSpecification": (
        "ResourceSpecification:\n"
        "    ( ResourceList [;] )"
    ),
    "ResourceList": (
        "ResourceList:\n"
        "    Resource {; Resource}"
    ),
    "Resource": (
        "Resource:\n"
        "    LocalVariableDeclaration\n"
        "    VariableAccess"
    ),
    "VariableAccess": (
        "VariableAccess:\n"
        "    ExpressionName\n"
        "    FieldAccess"
    ),
    "Pattern": (
        "Pattern:\n"
        "    TypePattern\n"
        "    RecordPattern"
    ),
    "TypePattern": (
        "TypePattern:\n"
        "    LocalVariableDeclaration"
    ),
    "RecordPattern": (
        "RecordPattern:\n"
        "    ReferenceType ( [ComponentPatternList] )"
    ),
    "ComponentPatternList": (
        "ComponentPatternList:\n"
        "    ComponentPattern {, ComponentPattern}"
    ),
    "ComponentPattern": (
        "ComponentPattern:\n"
        "    Pattern\n"
        "    MatchAllPattern"
    ),
    "MatchAllPattern": (
        "MatchAllPattern:\n"
        "    _"
    ),

    # §15 Expressions
    "Primary": (
        "Primary:\n"
        "    PrimaryNoNewArray\n"
        "    ArrayCreationExpression"
    ),
    "PrimaryNoNewArray": (
        "PrimaryNoNewArray:\n"
        "    Literal\n"
        "    ClassLiteral\n"
        "    this\n"
        "    TypeName . this\n"
        "    ( Expression )\n"
        "    ClassInstanceCreationExpression\n"
        "    FieldAccess\n"
        "    ArrayAccess\n"
        "    MethodInvocation\n"
        "    MethodReference"
    ),
    "ClassLiteral": (
        "ClassLiteral:\n"
        "    TypeName {[ ]} . class\n"
        "    NumericType {[ ]} . class\n"
        "    boolean {[ ]} . class\n"
        "    void . class"
    ),
    "ClassInstanceCreationExpression": (
        "ClassInstanceCreationExpression:\n"
        "    UnqualifiedClassInstanceCreationExpression\n"
        "    ExpressionName . UnqualifiedClassInstanceCreationExpression\n"
        "    Primary . UnqualifiedClassInstanceCreationExpression"
    ),
    "UnqualifiedClassInstanceCreationExpression": (
        "UnqualifiedClassInstanceCreationExpression:\n"
        "    new [TypeArguments] ClassOrInterfaceTypeToInstantiate ( [ArgumentList] ) [ClassBody]"
    ),
    "ClassOrInterfaceTypeToInstantiate": (
        "ClassOrInterfaceTypeToInstantiate:\n"
        "    {Annotation} Identifier {. {Annotation} Identifier} [TypeArgumentsOrDiamond]"
    ),
    "TypeArgumentsOrDiamond": (
        "TypeArgumentsOrDiamond:\n"
        "    TypeArguments\n"
        "    <>"
    ),
    "ArrayCreationExpression": (
        "ArrayCreationExpression:\n"
        "    ArrayCreationExpressionWithoutInitializer\n"
        "    ArrayCreationExpressionWithInitializer"
    ),
    "ArrayCreationExpressionWithoutInitializer": (
        "ArrayCreationExpressionWithoutInitializer:\n"
        "    new PrimitiveType DimExprs [Dims]\n"
        "    new ClassOrInterfaceType DimExprs [Dims]"
    ),
    "ArrayCreationExpressionWithInitializer": (
        "ArrayCreationExpressionWithInitializer:\n"
        "    new PrimitiveType Dims ArrayInitializer\n"
        "    new ClassOrInterfaceType Dims ArrayInitializer"
    ),
    "DimExprs": (
        "DimExprs:\n"
        "    DimExpr {DimExpr}"
    ),
    "DimExpr": (
        "DimExpr:\n"
        "    {Annotation} [ Expression ]"
    ),
    "ArrayAccess": (
        "ArrayAccess:\n"
        "    ExpressionName [ Expression ]\n"
        "    PrimaryNoNewArray [ Expression ]\n"
        "    ArrayCreationExpressionWithInitializer [ Expression ]"
    ),
    "FieldAccess": (
        "FieldAccess:\n"
        "    Primary . Identifier\n"
        "    super . Identifier\n"
        "    TypeName . super . Identifier"
    ),
    "MethodInvocation": (
        "MethodInvocation:\n"
        "    MethodName ( [ArgumentList] )\n"
        "    TypeName . [TypeArguments] Identifier ( [ArgumentList] )\n"
        "    ExpressionName . [TypeArguments] Identifier ( [ArgumentList] )\n"
        "    Primary . [TypeArguments] Identifier ( [ArgumentList] )\n"
        "    super . [TypeArguments] Identifier ( [ArgumentList] )\n"
        "    TypeName . super . [TypeArguments] Identifier ( [ArgumentList] )"
    ),
    "ArgumentList": (
        "ArgumentList:\n"
        "    Expression {, Expression}"
    ),
    "MethodReference": (
        "MethodReference:\n"
        "    ExpressionName :: [TypeArguments] Identifier\n"
        "    Primary :: [TypeArguments] Identifier\n"
        "    ReferenceType :: [TypeArguments] Identifier\n"
        "    super :: [TypeArguments] Identifier\n"
        "    TypeName . super :: [TypeArguments] Identifier\n"
        "    ClassType :: [TypeArguments] new\n"
        "    ArrayType :: new"
    ),
    "Expression": (
        "Expression:\n"
        "    LambdaExpression\n"
        "    AssignmentExpression"
    ),
    "LambdaExpression": (
        "LambdaExpression:\n"
        "    LambdaParameters -> LambdaBody"
    ),
    "LambdaParameters": (
        "LambdaParameters:\n"
        "    ( [LambdaParameterList] )\n"
        "    ConciseLambdaParameter"
    ),
    "LambdaParameterList": (
        "LambdaParameterList:\n"
        "    NormalLambdaParameter {, NormalLambdaParameter}\n"
        "    ConciseLambdaParameter {, ConciseLambdaParameter}"
    ),
    "NormalLambdaParameter": (
        "NormalLambdaParameter:\n"
        "    {VariableModifier} LambdaParameterType VariableDeclaratorId\n"
        "    VariableArityParameter"
    ),
    "LambdaParameterType": (
        "LambdaParameterType:\n"
        "    UnannType\n"
        "    var"
    ),
    "ConciseLambdaParameter": (
        "ConciseLambdaParameter:\n"
        "    Identifier\n"
        "    _"
    ),
    "LambdaBody": (
        "LambdaBody:\n"
        "    Expression\n"
        "    Block"
    ),
    "AssignmentExpression": (
        "AssignmentExpression:\n"
        "    ConditionalExpression\n"
        "    Assignment"
    ),
    "Assignment": (
        "Assignment:\n"
        "    LeftHandSide AssignmentOperator Expression"
    ),
    "LeftHandSide": (
        "LeftHandSide:\n"
        "    ExpressionName\n"
        "    FieldAccess\n"
        "    ArrayAccess"
    ),
    "AssignmentOperator": (
        "AssignmentOperator:\n"
        "    (one of) =  *=  /=  %=  +=  -=  <<=  >>=  >>>=  &=  ^=  |="
    ),
    "ConditionalExpression": (
        "ConditionalExpression:\n"
        "    ConditionalOrExpression\n"
        "    ConditionalOrExpression ? Expression : ConditionalExpression\n"
        "    ConditionalOrExpression ? Expression : LambdaExpression"
    ),
    "ConditionalOrExpression": (
        "ConditionalOrExpression:\n"
        "    ConditionalAndExpression\n"
        "    ConditionalOrExpression || ConditionalAndExpression"
    ),
    "ConditionalAndExpression": (
        "ConditionalAndExpression:\n"
        "    InclusiveOrExpression\n"
        "    ConditionalAndExpression && InclusiveOrExpression"
    ),
    "InclusiveOrExpression": (
        "InclusiveOrExpression:\n"
        "    ExclusiveOrExpression\n"
        "    InclusiveOrExpression | ExclusiveOrExpression"
    ),
    "ExclusiveOrExpression": (
        "ExclusiveOrExpression:\n"
        "    AndExpression\n"
        "    ExclusiveOrExpression ^ AndExpression"
    ),
    "AndExpression": (
        "AndExpression:\n"
        "    EqualityExpression\n"
        "    AndExpression & EqualityExpression"
    ),
    "EqualityExpression": (
        "EqualityExpression:\n"
        "    RelationalExpression\n"
        "    EqualityExpression == RelationalExpression\n"
        "    EqualityExpression != RelationalExpression"
    ),
    "RelationalExpression": (
        "RelationalExpression:\n"
        "    ShiftExpression\n"
        "    RelationalExpression < ShiftExpression\n"
        "    RelationalExpression > ShiftExpression\n"
        "    RelationalExpression <= ShiftExpression\n"
        "    RelationalExpression >= ShiftExpression\n"
        "    InstanceofExpression"
    ),
    "InstanceofExpression": (
        "InstanceofExpression:\n"
        "    RelationalExpression instanceof ReferenceType\n"
        "    RelationalExpression instanceof Pattern"
    ),
    "ShiftExpression": (
        "ShiftExpression:\n"
        "    AdditiveExpression\n"
        "    ShiftExpression << AdditiveExpression\n"
        "    ShiftExpression >> AdditiveExpression\n"
        "    ShiftExpression >>> AdditiveExpression"
    ),
    "AdditiveExpression": (
        "AdditiveExpression:\n"
        "    MultiplicativeExpression\n"
        "    AdditiveExpression + MultiplicativeExpression\n"
        "    AdditiveExpression - MultiplicativeExpression"
    ),
    "MultiplicativeExpression": (
        "MultiplicativeExpression:\n"
        "    UnaryExpression\n"
        "    MultiplicativeExpression * UnaryExpression\n"
        "    MultiplicativeExpression / UnaryExpression\n"
        "    MultiplicativeExpression % UnaryExpression"
    ),
    "UnaryExpression": (
        "UnaryExpression:\n"
        "    PreIncrementExpression\n"
        "    PreDecrementExpression\n"
        "    + UnaryExpression\n"
        "    - UnaryExpression\n"
        "    UnaryExpressionNotPlusMinus"
    ),
    "PreIncrementExpression": (
        "PreIncrementExpression:\n"
        "    ++ UnaryExpression"
    ),
    "PreDecrementExpression": (
        "PreDecrementExpression:\n"
        "    -- UnaryExpression"
    ),
    "UnaryExpressionNotPlusMinus": (
        "UnaryExpressionNotPlusMinus:\n"
        "    PostfixExpression\n"
        "    ~ UnaryExpression\n"
        "    ! UnaryExpression\n"
        "    CastExpression\n"
        "    SwitchExpression"
    ),
    "PostfixExpression": (
        "PostfixExpression:\n"
        "    Primary\n"
        "    ExpressionName\n"
        "    PostIncrementExpression\n"
        "    PostDecrementExpression"
    ),
    "PostIncrementExpression": (
        "PostIncrementExpression:\n"
        "    PostfixExpression ++"
    ),
    "PostDecrementExpression": (
        "PostDecrementExpression:\n"
        "    PostfixExpression --"
    ),
    "CastExpression": (
        "CastExpression:\n"
        "    ( PrimitiveType ) UnaryExpression\n"
        "    ( ReferenceType {AdditionalBound} ) UnaryExpressionNotPlusMinus\n"
        "    ( ReferenceType {AdditionalBound} ) LambdaExpression"
    ),
    "SwitchExpression": (
        "SwitchExpression:\n"
        "    switch ( Expression ) SwitchBlock"
    ),
}
