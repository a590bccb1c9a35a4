"""
Presentation boundary.

GrammarCatalog ties the stores together for whatever displays them: per
rule, the rendered markup plus the paired EBNF text; per section, the rule
names that match a search string. Failures are contained to one rule.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .core.ebnf import EbnfStore
from .core.errors import ErrorContext
from .core.registry import RuleRegistry
from .core.sections import SectionIndex
from .core.settings import RenderSettings
from .render.adapter import RenderAdapter
from .render.results import RenderError, RenderResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuleView:
    """Everything needed to display one rule."""

    name: str
    markup: RenderResult
    ebnf: str | None


@dataclass(frozen=True)
class SectionView:
    """A section with its (possibly filtered) rule names."""

    id: str
    title: str
    rules: list[str]


class GrammarCatalog:
    def __init__(
        self,
        registry: RuleRegistry,
        ebnf: EbnfStore,
        sections: SectionIndex,
        adapter: RenderAdapter | None = None,
    ) -> None:
        self.registry = registry
        self.ebnf = ebnf
        self.sections = sections
        self.adapter = adapter or RenderAdapter()

    def markup(self, name: str, section: str | None = None) -> RenderResult:
        """
        Render one rule. Unknown names get the placeholder diagram; a
        construction failure becomes a RenderError for this rule only.

        Args:
            name: Rule name
            section: Section id the rule is shown under, used in error messages
        """
        try:
            return self.adapter.render(self.registry.diagram_for(name))
        except Exception as e:
            where = ErrorContext(rule=name, section=section).format()
            logger.exception(f"Failed to build diagram for {where}")
            return RenderError(message=f"{where}: {e}")

    def rule_view(self, name: str, section: str | None = None) -> RuleView:
        return RuleView(
            name=name, markup=self.markup(name, section), ebnf=self.ebnf.get(name)
        )

    def section_views(self, query: str = "") -> list[SectionView]:
        """
        Sections in display order with names filtered by ``query``.

        While a query is active, sections without matches are left out.
        """
        filtered = self.sections.filtered(query)
        active = bool(query.strip())
        views = []
        for section in self.sections.sections:
            names = filtered[section.id]
            if active and not names:
                continue
            views.append(SectionView(id=section.id, title=section.title, rules=names))
        return views


def load_catalog(settings: RenderSettings | None = None) -> GrammarCatalog:
    """Catalog over the bundled Java grammar."""
    from .grammar import build_ebnf_store, build_registry, build_section_index

    return GrammarCatalog(
        registry=build_registry(),
        ebnf=build_ebnf_store(),
        sections=build_section_index(),
        adapter=RenderAdapter(settings=settings),
    )
