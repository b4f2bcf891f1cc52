"""
Value parser - turns a CSS value expression into a Value tree.

Surface grammar:
- comma-separated groups, each a run of space-separated tokens
- parenthesized function calls and quoted strings are single tokens
- `!important` (optionally glued to the previous token or written
  `! important`) is detached and kept as the value's decoration

Separators are kept as written, so a value renders back to its own text
(outer whitespace aside) unless a length was converted in it.

The parser never raises on odd input. An unbalanced parenthesis or an
unterminated string swallows the rest of the expression into one opaque
token; an empty comma group becomes an empty token.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from chuk_mcp_rem.constants import IMPORTANT_MARKER
from chuk_mcp_rem.core.units import format_number
from chuk_mcp_rem.models.value import CommaList, SpaceList, Token, Value, ValueNode

logger = logging.getLogger(__name__)

_QUOTES = ("'", '"')


@dataclass(frozen=True)
class _Span:
    """A raw token and where it sits in the source text."""

    text: str
    start: int
    end: int


def _tokenize(text: str) -> list[list[_Span]]:
    """Split text into comma groups of space-separated raw tokens."""
    groups: list[list[_Span]] = []
    group: list[_Span] = []
    start: int | None = None
    depth = 0
    quote: str | None = None
    escaped = False

    def flush(end: int) -> None:
        nonlocal start
        if start is not None:
            group.append(_Span(text[start:end], start, end))
            start = None

    for i, ch in enumerate(text):
        if quote is not None:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
            continue

        if depth == 0 and ch.isspace():
            flush(i)
            continue
        if depth == 0 and ch == ",":
            flush(i)
            groups.append(group)
            group = []
            continue

        if start is None:
            start = i
        if ch in _QUOTES:
            quote = ch
        elif ch == "(":
            depth += 1
        elif ch == ")" and depth > 0:
            depth -= 1

    if depth > 0 or quote is not None:
        logger.debug("Unbalanced fragment kept opaque: %r", text[start:] if start is not None else "")
    flush(len(text))
    groups.append(group)
    return groups


def _split_marker(span: _Span) -> tuple[_Span, _Span | None]:
    """Split a trailing glued `!important` off a token."""
    marker_len = len(IMPORTANT_MARKER)
    if len(span.text) > marker_len and span.text[-marker_len:].lower() == IMPORTANT_MARKER:
        cut = span.end - marker_len
        return _Span(span.text[:-marker_len], span.start, cut), _Span(span.text[-marker_len:], cut, span.end)
    return span, None


def _detach_decorations(
    groups: list[list[_Span]], text: str
) -> tuple[list[list[_Span]], list[_Span]]:
    """Remove every `!important` marker, returning the groups and the markers found."""
    markers: list[_Span] = []
    cleaned: list[list[_Span]] = []

    for group in groups:
        kept: list[_Span] = []
        i = 0
        while i < len(group):
            span = group[i]
            if span.text.lower() == IMPORTANT_MARKER:
                markers.append(span)
            elif span.text == "!" and i + 1 < len(group) and group[i + 1].text.lower() == "important":
                end = group[i + 1].end
                markers.append(_Span(text[span.start : end], span.start, end))
                i += 1
            else:
                head, marker = _split_marker(span)
                kept.append(head)
                if marker:
                    markers.append(marker)
            i += 1
        cleaned.append(kept)

    # A marker alone after the last comma is not a group of its own
    if len(cleaned) > 1 and not cleaned[-1] and markers and groups[-1]:
        cleaned.pop()

    return cleaned, markers


def _separators(text: str, spans: list[_Span], expected: str) -> tuple[str, ...]:
    """
    The source text between neighbouring spans.

    Falls back to no separators (default rendering) when a gap held
    anything but whitespace and the expected separator, e.g. a detached
    marker.
    """
    gaps = tuple(text[left.end : right.start] for left, right in zip(spans, spans[1:]))
    for gap in gaps:
        if expected == " " and not (gap and gap.isspace()):
            return ()
        if expected == "," and gap.strip() != ",":
            return ()
    return gaps


def _group_node(text: str, spans: list[_Span]) -> ValueNode:
    if not spans:
        logger.debug("Empty comma group kept as an empty token")
        return Token("")
    if len(spans) == 1:
        return Token(spans[0].text)
    return SpaceList(tuple(Token(s.text) for s in spans), _separators(text, spans, " "))


def _comma_separators(text: str, groups: list[list[_Span]]) -> tuple[str, ...]:
    if not all(groups):
        return ()
    edges = [_Span("", g[0].start, g[-1].end) for g in groups]
    return _separators(text, edges, ",")


def _decoration_separator(text: str, groups: list[list[_Span]], markers: list[_Span]) -> str:
    """Whitespace written before a single trailing marker, or a plain space."""
    last = next((g[-1] for g in reversed(groups) if g), None)
    if len(markers) != 1 or last is None or markers[0].start < last.end:
        return " "
    gap = text[last.end : markers[0].start]
    if gap == "" or gap.isspace():
        return gap
    return " "


def parse_value(text: str) -> Value:
    """
    Parse a value expression.

    Args:
        text: Raw CSS value, e.g. '44px auto, 50% 312px !important'

    Returns:
        Value with the tree and the detached decoration

    Example:
        >>> parse_value("1px  solid red").render()
        '1px  solid red'
    """
    if not text.strip():
        return Value()

    groups, markers = _detach_decorations(_tokenize(text), text)
    decoration = " ".join(m.text for m in markers) if markers else None
    decoration_separator = _decoration_separator(text, groups, markers)

    if len(groups) == 1:
        if not groups[0]:
            return Value(decoration=decoration)
        node: ValueNode = _group_node(text, groups[0])
    else:
        node = CommaList(
            tuple(_group_node(text, g) for g in groups),
            _comma_separators(text, groups),
        )

    return Value(node, decoration, decoration_separator)


def coerce_value(value: Any) -> Value:
    """
    Accept the value forms callers pass around.

    - str: parsed with parse_value
    - Value: returned as is
    - Token / SpaceList / CommaList: wrapped without decoration
    - int / float: a unitless number token

    Raises:
        TypeError: for anything else
    """
    if isinstance(value, Value):
        return value
    if isinstance(value, (Token, SpaceList, CommaList)):
        return Value(value)
    if isinstance(value, str):
        return parse_value(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return Value(Token(format_number(value)))
    raise TypeError(f"Unsupported value type: {type(value).__name__}")
