"""
Nested-container pretty-printer.

Re-indents the compact debug text of sequence-like values according to their
bracket nesting depth, e.g. a 2D matrix:

    [[1, 2], [3, 4]]   ->   [
                                [1, 2],
                                [3, 4]
                            ]

Bracket tracking is quote-aware: '[' and ']' inside quoted strings never
count. Malformed input is not rejected, it only yields an odd layout.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import warnings
from typing import Any, Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .debug import PrettyConf, debug_text, pretty_debug

# @formatter:off

# Literal rewrites for regular nested lists of depth 2 to 4, applied in order
_ARRAY_REWRITES: dict[int, tuple[tuple[str, str], ...]] = {
    2: (
        ("[[", "[\n    ["),
        ("]]", "]\n]"),
        ("], [", "],\n    ["),
    ),
    3: (
        ("[[[", "[\n    [\n        ["),
        ("]]]", "]\n    ]\n]"),
        ("]], [[", "]\n    ],\n    [\n        ["),
        ("], [", "],\n        ["),
    ),
    4: (
        ("[[[[", "[\n    [\n        [\n            ["),
        ("]]]]", "]\n        ]\n    ]\n]"),
        ("]]], [[[", "]\n        ]\n    ],\n    [\n        [\n            ["),
        ("]], [[", "]\n        ],\n        [\n            ["),
        ("], [", "],\n            ["),
    ),
}

# @formatter:on

_QUOTES = "'\""


# Methods --------------------------------------------------------------------------------------------------------------


def format_container(value: Any) -> str:
    """
    Render a value for the array-pretty directive.

    Dispatch on the shape of the value's debug text:
        - '[' led (sequence-like) → format_array()
        - '{' led (map-like) → unchanged if single-line and shorter than
          PrettyConf.MAP_INLINE_LIMIT, otherwise pretty_debug()
        - anything else (scalar) → unchanged

    Examples:
        >>> format_container([1, 2, 3])
        '[1, 2, 3]'
        >>> print(format_container([[1, 2], [3, 4]]))
        [
            [1, 2],
            [3, 4]
        ]
        >>> format_container(42)
        '42'
    """
    text = debug_text(value)
    if text.startswith("["):
        return format_array(text)
    if text.startswith("{"):
        if "\n" not in text and len(text) < PrettyConf.MAP_INLINE_LIMIT:
            return text
        return pretty_debug(value)
    return text


def format_array(text: str, depth: int | None = None) -> str:
    """
    Re-indent sequence debug text by nesting depth.

    Depth 1 (or less) is returned unchanged, depths 2 to 4 go through fixed
    rewrite tables, deeper text through format_nested_array().

    Args:
        text: Debug text of a sequence, e.g. "[[1, 2], [3, 4]]".
        depth: Precomputed nesting depth; computed from text when None.

    Returns:
        The indented layout. Unbalanced brackets emit a RuntimeWarning and
        still produce a (possibly odd) layout.
    """
    max_depth, balanced = _bracket_profile(text)
    if not balanced:
        warnings.warn(
            f"unbalanced brackets in debug text: {text[:40]!r}", RuntimeWarning, stacklevel=2
        )
    if depth is None:
        depth = max_depth

    if depth <= 1:
        return text
    if depth in _ARRAY_REWRITES:
        return _rewrite_unquoted(text, _ARRAY_REWRITES[depth])
    return format_nested_array(text)


def format_nested_array(text: str, indent: int = PrettyConf.INDENT) -> str:
    """
    Generic single-pass re-indentation of bracketed debug text.

    Walks the text tracking the bracket level outside quotes:
        - '[': level up, emit it, then a line break indented to level-1 when level > 1
        - ']': level down, then a line break indented to level when level >= 1, then emit it
        - ',': emit it, then a line break indented to level when the next
          non-whitespace character is '['
        - anything else is emitted unchanged, including the spaces after a comma

    Scalar siblings stay on the same line; only nested-array siblings start
    a new one.

    Examples:
        >>> format_nested_array("[1, 2, 3]")
        '[1, 2, 3]'
        >>> print(format_nested_array("[1, [2, 3]]"))
        [1,
             [
            2, 3
            ]]
    """
    out: list[str] = []
    level = 0
    for i, ch, quoted in _scan(text):
        if quoted:
            out.append(ch)
        elif ch == "[":
            level += 1
            out.append(ch)
            if level > 1:
                out.append("\n" + " " * (indent * (level - 1)))
        elif ch == "]":
            level -= 1
            if level >= 1:
                out.append("\n" + " " * (indent * level))
            out.append(ch)
        elif ch == ",":
            out.append(ch)
            if _next_non_space(text, i + 1) == "[":
                out.append("\n" + " " * (indent * max(level, 0)))
        else:
            out.append(ch)
    return "".join(out)


def nesting_depth(text: str) -> int:
    """
    Maximum bracket nesting depth of debug text, ignoring quoted substrings.

    Examples:
        >>> nesting_depth("[[1], [2, [3]]]")
        3
        >>> nesting_depth('["["]')
        1
    """
    return _bracket_profile(text)[0]


# Private Methods ------------------------------------------------------------------------------------------------------


def _scan(text: str) -> Iterator[tuple[int, str, bool]]:
    """
    Yield (index, char, quoted) for every character.

    A quote opens on ' or " and closes on the same unescaped quote character;
    the quote characters themselves count as quoted.
    """
    quote = None
    escaped = False
    for i, ch in enumerate(text):
        if quote is None:
            if ch in _QUOTES:
                quote = ch
                yield i, ch, True
            else:
                yield i, ch, False
            continue
        if escaped:
            escaped = False
        elif ch == "\\":
            escaped = True
        elif ch == quote:
            quote = None
        yield i, ch, True


def _bracket_profile(text: str) -> tuple[int, bool]:
    """Return (max depth, balanced) for the unquoted brackets of text."""
    depth = 0
    max_depth = 0
    balanced = True
    for _, ch, quoted in _scan(text):
        if quoted:
            continue
        if ch == "[":
            depth += 1
            max_depth = max(max_depth, depth)
        elif ch == "]":
            depth -= 1
            if depth < 0:
                balanced = False
    return max_depth, balanced and depth == 0


def _next_non_space(text: str, start: int) -> str | None:
    for ch in text[start:]:
        if not ch.isspace():
            return ch
    return None


def _split_quoted(text: str) -> Iterator[tuple[str, bool]]:
    """Split text into maximal runs of (segment, quoted)."""
    buf: list[str] = []
    current = False
    for _, ch, quoted in _scan(text):
        if quoted != current and buf:
            yield "".join(buf), current
            buf = []
        current = quoted
        buf.append(ch)
    if buf:
        yield "".join(buf), current


def _rewrite_unquoted(text: str, rewrites: tuple[tuple[str, str], ...]) -> str:
    parts = []
    for segment, quoted in _split_quoted(text):
        if not quoted:
            for old, new in rewrites:
                segment = segment.replace(old, new)
        parts.append(segment)
    return "".join(parts)
