"""
Render adapter: DiagramNode tree -> drawing-library objects -> markup.

build() walks the immutable tree bottom-up and constructs every node through
RenderCapability.construct, so constructor-shape differences are absorbed
uniformly for every node kind. serialize() turns the completed diagram into
a string and never raises: one broken rule must not take down a page.
"""

from __future__ import annotations

import logging
from typing import Any

from ..core.ir.nodes import (
    Choice,
    Comment,
    Diagram,
    DiagramItem,
    NonTerminal,
    OneOrMore,
    Optional,
    Sequence,
    Stack,
    Terminal,
    ZeroOrMore,
)
from ..core.settings import RenderSettings
from .capability import RailroadCapability, RenderCapability, serialize_node
from .results import Markup, RenderError, RenderResult

logger = logging.getLogger(__name__)


class RenderAdapter:
    """Bridges diagram trees to a drawing capability."""

    def __init__(
        self,
        capability: RenderCapability | None = None,
        settings: RenderSettings | None = None,
    ) -> None:
        self.settings = settings or RenderSettings()
        self._capability = capability

    @property
    def capability(self) -> RenderCapability:
        # Created on first use so empty input never imports the drawing library
        if self._capability is None:
            self._capability = RailroadCapability(standalone=self.settings.standalone)
        return self._capability

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def build(self, node: Diagram) -> Any:
        """
        Construct the drawing-library diagram for a tree.

        Raises:
            CapabilityError: If the capability lacks a constructor
            Exception: Unrecognized constructor failures propagate unchanged
        """
        root = self._build_item(node.root)
        if self.settings.diagram_type != "simple":
            return self.capability.construct("Diagram", root, type=self.settings.diagram_type)
        return self.capability.construct("Diagram", root)

    def _build_item(self, node: DiagramItem) -> Any:
        construct = self.capability.construct

        if isinstance(node, Terminal):
            return construct("Terminal", node.text)

        if isinstance(node, NonTerminal):
            href = self.settings.href_for(node.text)
            if href is not None:
                return construct("NonTerminal", node.text, href=href)
            return construct("NonTerminal", node.text)

        if isinstance(node, Comment):
            return construct("Comment", node.text)

        if isinstance(node, Sequence | Stack):
            if not node.items:
                return construct("Skip")
            kind = "Sequence" if isinstance(node, Sequence) else "Stack"
            return construct(kind, *(self._build_item(i) for i in node.items))

        if isinstance(node, Choice):
            return construct(
                "Choice", node.default_index, *(self._build_item(i) for i in node.items)
            )

        if isinstance(node, Optional):
            return construct("Optional", self._build_item(node.item))

        if isinstance(node, OneOrMore):
            return construct("OneOrMore", self._build_item(node.item))

        if isinstance(node, ZeroOrMore):
            return construct("ZeroOrMore", self._build_item(node.item))

        raise TypeError(f"Unknown diagram node: {type(node).__name__}")

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def serialize(self, built: Any) -> RenderResult:
        """
        Produce markup from a completed drawing-library diagram.

        None yields the empty-diagram placeholder. Strings from the markup
        producer are used verbatim; structured nodes are serialized. Any other
        shape, or any exception, becomes a RenderError.
        """
        if built is None:
            return Markup(text=self.settings.empty_markup)

        try:
            produced = self.capability.markup(built)
        except Exception as e:
            logger.warning(f"Markup production failed: {e}")
            return RenderError(message=str(e) or type(e).__name__)

        if isinstance(produced, str):
            return Markup(text=produced)

        try:
            text = serialize_node(produced)
        except Exception as e:
            logger.warning(f"Markup serialization failed: {e}")
            return RenderError(message=str(e) or type(e).__name__)
        if text is None:
            return RenderError(
                message=f"markup producer returned unexpected value: {type(produced).__name__}"
            )
        return Markup(text=text)

    def render(self, node: Diagram | None) -> RenderResult:
        """build() then serialize(). None never touches the capability."""
        if node is None:
            return self.serialize(None)
        return self.serialize(self.build(node))
