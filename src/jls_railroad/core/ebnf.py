"""
EBNF store: canonical textual productions keyed by rule name.

The text is authored independently of the diagram factories. Nothing here
checks that the two describe the same grammar; the coverage verifier only
checks that both stores define the same set of names.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType


class EbnfStore:
    """Read-only mapping of rule name to multi-line EBNF text."""

    def __init__(self, definitions: Mapping[str, str]) -> None:
        self._definitions: Mapping[str, str] = MappingProxyType(dict(definitions))

    def get(self, name: str) -> str | None:
        """EBNF text for a rule, or None when the rule has no definition."""
        return self._definitions.get(name)

    def names(self) -> list[str]:
        return list(self._definitions)

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[str]:
        return iter(self._definitions)
