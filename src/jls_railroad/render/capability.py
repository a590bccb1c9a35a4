"""
Boundary to the external diagram-drawing library.

Drawing libraries expose their node constructors in different shapes:
plain factory functions (railroad's Optional and ZeroOrMore), ordinary
classes, and classes that refuse to be called directly and insist on
explicit construction. RenderCapability hides that behind one operation,
construct(kind, *args), so call sites never care which shape they got.

The disambiguation lives in invoke(): call the member directly, and only
if that fails with a recognizable "must be constructed" TypeError, retry
as an explicit constructor invocation. Any other failure propagates.
"""

from __future__ import annotations

import importlib
import logging
import re
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from collections.abc import Callable
from types import ModuleType
from typing import Any

from ..core.errors import CapabilityError

logger = logging.getLogger(__name__)

# Constructor names every capability must expose ("Skip" draws empty sequences)
NODE_CONSTRUCTORS = (
    "Terminal",
    "NonTerminal",
    "Sequence",
    "Choice",
    "Optional",
    "OneOrMore",
    "ZeroOrMore",
    "Stack",
    "Comment",
    "Diagram",
    "Skip",
)

_CONSTRUCT_REQUIRED = re.compile(
    r"without 'new'|class constructor|cannot call a class as a function|must be constructed",
    re.IGNORECASE,
)


def is_construct_required(error: BaseException) -> bool:
    """True if ``error`` is the signature of calling a class that must be constructed."""
    return isinstance(error, TypeError) and bool(_CONSTRUCT_REQUIRED.search(str(error)))


def invoke(member: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """
    Call a constructor of unknown shape.

    Args:
        member: Factory function or class exposed by the capability
        *args: Positional constructor arguments
        **kwargs: Keyword constructor arguments

    Returns:
        The constructed node

    Raises:
        CapabilityError: If the member demands construction but is not a class
        Exception: Any other failure from the member, unchanged
    """
    try:
        return member(*args, **kwargs)
    except TypeError as e:
        if not is_construct_required(e):
            raise
        logger.debug(f"Retrying {getattr(member, '__name__', member)!r} as a constructor: {e}")
        return _construct(member, args, kwargs, e)


def _construct(
    member: Callable[..., Any],
    args: tuple[Any, ...],
    kwargs: dict[str, Any],
    cause: TypeError,
) -> Any:
    if not isinstance(member, type):
        raise CapabilityError(f"{member!r} must be constructed but is not a class") from cause

    # Same steps as type.__call__, minus any metaclass __call__ guard
    if member.__new__ is object.__new__:
        instance = object.__new__(member)
    else:
        instance = member.__new__(member, *args, **kwargs)
    if isinstance(instance, member):
        instance.__init__(*args, **kwargs)
    return instance


def collect_svg(node: Any, standalone: bool = False) -> str:
    """Serialize an object that writes SVG through a ``write`` callback."""
    chunks: list[str] = []
    if standalone and hasattr(node, "writeStandalone"):
        node.writeStandalone(chunks.append)
    else:
        node.writeSvg(chunks.append)
    return "".join(chunks)


def serialize_node(node: Any) -> str | None:
    """
    Textual form of a structured markup node, or None if the shape is unknown.

    Handles ElementTree elements and anything with a ``writeSvg`` method.
    """
    if isinstance(node, ET.Element):
        return ET.tostring(node, encoding="unicode")
    if callable(getattr(node, "writeSvg", None)):
        return collect_svg(node)
    return None


class RenderCapability(ABC):
    """
    Abstract drawing capability.

    Subclasses say where constructors come from (member()) and how a
    completed diagram produces markup (markup()).
    """

    @abstractmethod
    def member(self, kind: str) -> Callable[..., Any]:
        """
        Raw constructor for a node kind.

        Raises:
            CapabilityError: If the capability has no such constructor
        """

    @abstractmethod
    def markup(self, diagram: Any) -> Any:
        """
        Produce markup from a completed diagram.

        Returns either a string or a structured node (see serialize_node).
        """

    def construct(self, kind: str, *args: Any, **kwargs: Any) -> Any:
        """Build one node, whatever shape its constructor has."""
        return invoke(self.member(kind), *args, **kwargs)


class ModuleCapability(RenderCapability):
    """Capability backed by a module (or any namespace) of constructors."""

    def __init__(self, namespace: Any, standalone: bool = False) -> None:
        self.namespace = namespace
        self.standalone = standalone

    def member(self, kind: str) -> Callable[..., Any]:
        found = getattr(self.namespace, kind, None)
        if found is None or not callable(found):
            name = getattr(self.namespace, "__name__", type(self.namespace).__name__)
            raise CapabilityError(f"{name} does not provide a '{kind}' constructor")
        return found

    def missing_constructors(self) -> list[str]:
        """Names from NODE_CONSTRUCTORS this namespace does not provide."""
        return [k for k in NODE_CONSTRUCTORS if not callable(getattr(self.namespace, k, None))]

    def markup(self, diagram: Any) -> Any:
        for method in ("to_svg", "toSVG"):
            producer = getattr(diagram, method, None)
            if callable(producer):
                return producer()
        if callable(getattr(diagram, "writeSvg", None)):
            return collect_svg(diagram, standalone=self.standalone)
        raise CapabilityError(
            f"{type(diagram).__name__} has no markup producer (to_svg, toSVG, writeSvg)"
        )


class RailroadCapability(ModuleCapability):
    """The railroad-diagrams library (``import railroad``)."""

    def __init__(self, module: ModuleType | None = None, standalone: bool = False) -> None:
        super().__init__(module if module is not None else load_railroad(), standalone)


def load_railroad() -> ModuleType:
    """Import the railroad-diagrams module on first use."""
    return importlib.import_module("railroad")
