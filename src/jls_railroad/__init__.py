"""
jls-railroad - Railroad diagrams and EBNF for the Java Language Specification grammar.

Diagram factories and EBNF text are kept as two independent stores; the
coverage check keeps their rule sets in sync.
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.errors import CapabilityError, RailroadError, RegistryError, SettingsError

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "RailroadError",
    "RegistryError",
    "CapabilityError",
    "SettingsError",
]
