"""
Render result variants.

Serialization never raises; it returns either Markup or RenderError. Both
expose ``text``, the string to embed in a page.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Markup(BaseModel):
    """Successfully produced markup, used verbatim."""

    kind: Literal["markup"] = "markup"
    text: str = Field(description="Serialized SVG (or placeholder) markup")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return True


class RenderError(BaseModel):
    """Markup production failed; ``text`` is an inline diagnostic comment."""

    kind: Literal["error"] = "error"
    message: str

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return False

    @property
    def text(self) -> str:
        # "-->" would close the comment early
        return f"<!-- Render error: {self.message.replace('-->', '--&gt;')} -->"


RenderResult = Markup | RenderError
