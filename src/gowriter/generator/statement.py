"""
Node contract shared by every element of a generated Go document.
"""

import copy
from abc import ABC, abstractmethod
from typing import Iterable, TypeVar

INDENT_UNIT = "\t"

E = TypeVar("E", bound="Evolvable")


def build_indent(indent_level: int) -> str:
    """Indentation prefix for ``indent_level``: one tab per level."""
    if indent_level < 0:
        raise ValueError(f"indent_level must not be negative: {indent_level}")
    return INDENT_UNIT * indent_level


def generate_statements(statements: Iterable["Statement"], indent_level: int) -> str:
    """
    Generate children in order and concatenate them.

    The first child that raises aborts the whole call; its exception
    propagates unchanged and no partial text is returned.
    """
    return "".join([stmt.generate(indent_level) for stmt in statements])


class Evolvable:
    """
    Copy-on-write base for builder values.

    Mutators return a modified shallow copy and leave the receiver alone.
    Every collection attribute is a tuple, so a copy never shares mutable
    storage with its origin.
    """

    def _evolve(self: E, **changes) -> E:
        clone = copy.copy(self)
        for name, value in changes.items():
            setattr(clone, f"_{name}", value)
        return clone


class Statement(Evolvable, ABC):
    """A node that can generate itself as Go code."""

    @abstractmethod
    def generate(self, indent_level: int = 0) -> str:
        """
        Generate Go code for this node.

        Args:
            indent_level: Number of tabs prefixed to the lines this node opens

        Returns:
            Generated code

        Raises:
            GowriterError: The node (or one of its children) is invalid
        """
