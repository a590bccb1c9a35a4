"""
Section index: ordered grouping of rule names into grammar chapters.

Sections only control grouping and display order. A rule may appear in
several sections or in none; neither affects correctness.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .errors import UnknownSectionError


@dataclass(frozen=True)
class Section:
    """One grammar chapter."""

    id: str
    title: str
    rules: tuple[str, ...]


def filter_names(names: Iterable[str], query: str) -> list[str]:
    """
    Keep the names that contain ``query``, ignoring case.

    Surrounding whitespace in the query is ignored and an empty query
    keeps every name. Relative order is preserved.
    """
    q = query.strip().lower()
    if not q:
        return list(names)
    return [n for n in names if q in n.lower()]


class SectionIndex:
    """Ordered, immutable collection of sections."""

    def __init__(self, sections: Iterable[Section]) -> None:
        self._sections: tuple[Section, ...] = tuple(sections)
        self._by_id: dict[str, Section] = {s.id: s for s in self._sections}

    @property
    def order(self) -> list[str]:
        """Section ids in display order."""
        return [s.id for s in self._sections]

    @property
    def sections(self) -> tuple[Section, ...]:
        return self._sections

    def get(self, section_id: str) -> Section:
        try:
            return self._by_id[section_id]
        except KeyError:
            raise UnknownSectionError(
                f"Unknown section '{section_id}'. Available sections: {self.order}"
            ) from None

    def title(self, section_id: str) -> str:
        return self.get(section_id).title

    def rules(self, section_id: str) -> list[str]:
        return list(self.get(section_id).rules)

    def filtered(self, query: str = "") -> dict[str, list[str]]:
        """Filtered rule list for every section, in section order."""
        return {s.id: filter_names(s.rules, query) for s in self._sections}

    def all_rules(self) -> list[str]:
        """Every rule name in section order, first occurrence only."""
        seen: dict[str, None] = {}
        for s in self._sections:
            for name in s.rules:
                seen.setdefault(name, None)
        return list(seen)

    def __len__(self) -> int:
        return len(self._sections)
