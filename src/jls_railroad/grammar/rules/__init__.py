"""Diagram factories for JLS Chapter 19, one module per chapter."""

from jls_railroad.core.registry import RuleRegistry

from . import (
    arrays,
    classes,
    expressions,
    interfaces,
    lexical,
    names,
    packages,
    statements,
    types,
)

# Registration order mirrors the chapter order of the JLS
CHAPTERS = (lexical, types, names, packages, classes, interfaces, arrays, statements, expressions)


def register_all(registry: RuleRegistry) -> None:
    for chapter in CHAPTERS:
        chapter.register(registry)
