"""Tests for the render capability boundary and constructor-shape handling."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from jls_railroad.core.errors import CapabilityError
from jls_railroad.render.capability import (
    NODE_CONSTRUCTORS,
    ModuleCapability,
    invoke,
    is_construct_required,
)

GUARD_MESSAGE = "Class constructor {} cannot be invoked without 'new'"


class _GuardedMeta(type):
    """Metaclass that refuses plain calls, like a class demanding explicit construction."""

    def __call__(cls, *args, **kwargs):
        raise TypeError(GUARD_MESSAGE.format(cls.__name__))


class GuardedTerminal(metaclass=_GuardedMeta):
    def __init__(self, text: str, href: str | None = None) -> None:
        self.text = text
        self.href = href


class PlainTerminal:
    def __init__(self, text: str) -> None:
        self.text = text


def terminal_factory(text: str) -> tuple[str, str]:
    return ("terminal", text)


class TestIsConstructRequired:
    @pytest.mark.parametrize(
        "message",
        [
            "Class constructor Terminal cannot be invoked without 'new'",
            "Cannot call a class as a function",
            "Terminal must be constructed explicitly",
        ],
    )
    def test_recognized_messages(self, message: str) -> None:
        assert is_construct_required(TypeError(message))

    def test_other_type_error(self) -> None:
        assert not is_construct_required(TypeError("missing 1 required positional argument"))

    def test_other_exception_type(self) -> None:
        assert not is_construct_required(ValueError("without 'new'"))


class TestInvoke:
    def test_factory_function(self) -> None:
        assert invoke(terminal_factory, "if") == ("terminal", "if")

    def test_plain_class(self) -> None:
        node = invoke(PlainTerminal, "if")
        assert isinstance(node, PlainTerminal)
        assert node.text == "if"

    def test_guarded_class_is_retried(self) -> None:
        with pytest.raises(TypeError):
            GuardedTerminal("if")

        node = invoke(GuardedTerminal, "if", href="#if")
        assert isinstance(node, GuardedTerminal)
        assert node.text == "if"
        assert node.href == "#if"

    def test_unrelated_type_error_propagates(self) -> None:
        with pytest.raises(TypeError, match="positional argument"):
            invoke(PlainTerminal)

    def test_other_errors_propagate(self) -> None:
        def broken(text: str) -> None:
            raise ValueError("bad text")

        with pytest.raises(ValueError, match="bad text"):
            invoke(broken, "x")

    def test_guard_message_from_non_class(self) -> None:
        def pretends(text: str) -> None:
            raise TypeError(GUARD_MESSAGE.format("pretends"))

        with pytest.raises(CapabilityError, match="not a class"):
            invoke(pretends, "x")


class TestModuleCapability:
    def test_member_lookup(self) -> None:
        cap = ModuleCapability(SimpleNamespace(Terminal=GuardedTerminal))
        node = cap.construct("Terminal", "while")
        assert node.text == "while"

    def test_missing_member(self) -> None:
        cap = ModuleCapability(SimpleNamespace())
        with pytest.raises(CapabilityError, match="'Choice'"):
            cap.member("Choice")

    def test_missing_constructors(self) -> None:
        cap = ModuleCapability(SimpleNamespace(Terminal=PlainTerminal, Skip=PlainTerminal))
        missing = cap.missing_constructors()
        assert "Terminal" not in missing
        assert "Skip" not in missing
        assert len(missing) == len(NODE_CONSTRUCTORS) - 2

    def test_markup_prefers_to_svg(self) -> None:
        built = SimpleNamespace(to_svg=lambda: "<svg/>", writeSvg=lambda write: write("no"))
        assert ModuleCapability(SimpleNamespace()).markup(built) == "<svg/>"

    def test_markup_from_write_svg(self) -> None:
        built = SimpleNamespace(writeSvg=lambda write: (write("<svg>"), write("</svg>")))
        assert ModuleCapability(SimpleNamespace()).markup(built) == "<svg></svg>"

    def test_markup_standalone(self) -> None:
        built = SimpleNamespace(
            writeSvg=lambda write: write("plain"),
            writeStandalone=lambda write: write("standalone"),
        )
        cap = ModuleCapability(SimpleNamespace(), standalone=True)
        assert cap.markup(built) == "standalone"

    def test_markup_without_producer(self) -> None:
        with pytest.raises(CapabilityError, match="no markup producer"):
            ModuleCapability(SimpleNamespace()).markup(object())


class TestRailroadCapability:
    def test_railroad_provides_every_constructor(self) -> None:
        from jls_railroad.render.capability import RailroadCapability

        assert RailroadCapability().missing_constructors() == []

    def test_function_shaped_members(self) -> None:
        import railroad

        from jls_railroad.render.capability import RailroadCapability

        cap = RailroadCapability()
        # Optional is a plain function in railroad, Terminal is a class
        node = cap.construct("Optional", cap.construct("Terminal", "x"))
        assert isinstance(node, railroad.Choice)
