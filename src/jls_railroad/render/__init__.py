"""Rendering: diagram trees to SVG markup through a drawing capability."""

from .adapter import RenderAdapter
from .capability import (
    ModuleCapability,
    RailroadCapability,
    RenderCapability,
    invoke,
    is_construct_required,
)
from .results import Markup, RenderError, RenderResult

__all__ = [
    "Markup",
    "ModuleCapability",
    "RailroadCapability",
    "RenderAdapter",
    "RenderCapability",
    "RenderError",
    "RenderResult",
    "invoke",
    "is_construct_required",
]
