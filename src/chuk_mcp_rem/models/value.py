"""
Value tree - the recursive shape of a CSS property value.

A value is one of:
- Token: a single atom, carried as text
- SpaceList: space-separated sequence of nodes
- CommaList: comma-separated collection of nodes

Value wraps the top-level node together with its decoration
(`!important`), which never takes part in conversion.

All nodes are immutable; conversion builds new trees of the same shape.
Lists remember the separator text they were parsed with (compared as
equal regardless), so untouched values render back as written.
"""

from __future__ import annotations

from dataclasses import dataclass, field


def _join(items: tuple[ValueNode, ...], separators: tuple[str, ...], default: str) -> str:
    """Join rendered items with the separators they were written with, if known."""
    if len(separators) != len(items) - 1:
        return default.join(item.render() for item in items)
    parts = [items[0].render()] if items else []
    for separator, item in zip(separators, items[1:]):
        parts.append(separator)
        parts.append(item.render())
    return "".join(parts)


@dataclass(frozen=True)
class Token:
    """A single value atom, verbatim."""

    text: str

    def render(self) -> str:
        return self.text


@dataclass(frozen=True)
class SpaceList:
    """Space-separated sequence, e.g. `1px solid red`."""

    items: tuple[ValueNode, ...]
    separators: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "separators", tuple(self.separators))

    def render(self) -> str:
        return _join(self.items, self.separators, " ")


@dataclass(frozen=True)
class CommaList:
    """Comma-separated collection, e.g. `0 0 2px red, inset 0 1px blue`."""

    items: tuple[ValueNode, ...]
    separators: tuple[str, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        object.__setattr__(self, "separators", tuple(self.separators))

    def render(self) -> str:
        return _join(self.items, self.separators, ", ")


ValueNode = Token | SpaceList | CommaList


@dataclass(frozen=True)
class Value:
    """
    A complete property value: an optional tree plus decoration.

    An empty value has no node and renders as the empty string.
    The decoration is always rendered last, exactly once.
    """

    node: ValueNode | None = None
    decoration: str | None = None
    decoration_separator: str = field(default=" ", compare=False)

    @property
    def is_empty(self) -> bool:
        return self.node is None

    def render(self) -> str:
        if self.node is None:
            return self.decoration or ""
        text = self.node.render()
        if self.decoration:
            text = f"{text}{self.decoration_separator}{self.decoration}"
        return text

    def __str__(self) -> str:
        return self.render()
