"""JLS §3 Lexical Structure."""

from jls_railroad.core.dsl import NT, choice, comment, diagram, seq, zero_or_more
from jls_railroad.core.registry import RuleRegistry


def register(registry: RuleRegistry) -> None:
    add = registry.register

    add("Identifier", lambda:
        diagram(
            seq(
                NT("IdentifierChars"),
                comment("but not ReservedKeyword, BooleanLiteral, or NullLiteral")
            )
        )
    )

    add("IdentifierChars", lambda:
        diagram(
            seq(NT("JavaLetter"), zero_or_more(NT("JavaLetterOrDigit")))
        )
    )

    add("JavaLetter", lambda:
        diagram(comment("any Unicode character that is a Java letter"))
    )

    add("JavaLetterOrDigit", lambda:
        diagram(comment("any Unicode character that is a Java letter-or-digit"))
    )

    add("TypeIdentifier", lambda:
        diagram(
            seq(
                NT("Identifier"),
                comment("but not permits, record, sealed, var, or yield")
            )
        )
    )

    add("UnqualifiedMethodIdentifier", lambda:
        diagram(
            seq(NT("Identifier"), comment("but not yield"))
        )
    )

    add("Literal", lambda:
        diagram(
            choice(0,
                NT("IntegerLiteral"),
                NT("FloatingPointLiteral"),
                NT("BooleanLiteral"),
                NT("CharacterLiteral"),
                NT("StringLiteral"),
                NT("TextBlock"),
                NT("NullLiteral")
            )
        )
    )
