"""JLS §7 Packages and Modules."""

from jls_railroad.core.dsl import NT, T, choice, diagram, optional, seq, zero_or_more
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("CompilationUnit", lambda:
        diagram(
            choice(0,
                NT("OrdinaryCompilationUnit"),
                NT("CompactCompilationUnit"),
                NT("ModularCompilationUnit")
            )
        )
    )

    add("OrdinaryCompilationUnit", lambda:
        diagram(
            seq(
                optional(NT("PackageDeclaration")),
                zero_or_more(NT("ImportDeclaration")),
                zero_or_more(NT("TopLevelClassOrInterfaceDeclaration"))
            )
        )
    )

    add("ModularCompilationUnit", lambda:
        diagram(seq(zero_or_more(NT("ImportDeclaration")), NT("ModuleDeclaration")))
    )

    add("PackageDeclaration", lambda:
        diagram(
            seq(
                zero_or_more(NT("PackageModifier")),
                T("package"),
                NT("Identifier"),
                zero_or_more(seq(T("."), NT("Identifier"))),
                T(";")
            )
        )
    )

    add("PackageModifier", lambda:
        diagram(NT("Annotation"))
    )

    add("ImportDeclaration", lambda:
        diagram(
            choice(0,
                NT("SingleTypeImportDeclaration"),
                NT("TypeImportOnDemandDeclaration"),
                NT("SingleStaticImportDeclaration"),
                NT("StaticImportOnDemandDeclaration"),
                NT("SingleModuleImportDeclaration")
            )
        )
    )

    add("SingleTypeImportDeclaration", lambda:
        diagram(seq(T("import"), NT("TypeName"), T(";")))
    )

    add("TypeImportOnDemandDeclaration", lambda:
        diagram(seq(T("import"), NT("PackageOrTypeName"), T("."), T("*"), T(";")))
    )

    add("SingleStaticImportDeclaration", lambda:
        diagram(seq(T("import"), T("static"), NT("TypeName"), T("."), NT("Identifier"), T(";")))
    )

    add("StaticImportOnDemandDeclaration", lambda:
        diagram(seq(T("import"), T("static"), NT("TypeName"), T("."), T("*"), T(";")))
    )

    add("SingleModuleImportDeclaration", lambda:
        diagram(seq(T("import"), T("module"), NT("ModuleName"), T(";")))
    )

    add("TopLevelClassOrInterfaceDeclaration", lambda:
        diagram(choice(0, NT("ClassDeclaration"), NT("InterfaceDeclaration"), T(";")))
    )

    add("ModuleDeclaration", lambda:
        diagram(
            seq(
                zero_or_more(NT("Annotation")),
                optional(T("open")),
                T("module"),
                NT("Identifier"),
                zero_or_more(seq(T("."), NT("Identifier"))),
                T("{"),
                zero_or_more(NT("ModuleDirective")),
                T("}")
            )
        )
    )

    add("ModuleDirective", lambda:
        diagram(
            choice(0,
                seq(T("requires"), zero_or_more(NT("RequiresModifier")), NT("ModuleName"), T(";")),
                seq(T("exports"), NT("PackageName"), optional(seq(T("to"), NT("ModuleName"), zero_or_more(seq(T(","), NT("ModuleName"))))), T(";")),
                seq(T("opens"), NT("PackageName"), optional(seq(T("to"), NT("ModuleName"), zero_or_more(seq(T(","), NT("ModuleName"))))), T(";")),
                seq(T("uses"), NT("TypeName"), T(";")),
                seq(T("provides"), NT("TypeName"), T("with"), NT("TypeName"), zero_or_more(seq(T(","), NT("TypeName"))), T(";"))
            )
        )
    )

    add("RequiresModifier", lambda:
        diagram(choice(0, T("transitive"), T("static")))
    )
