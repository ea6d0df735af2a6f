"""
Debug text of values: the structural string forms the formatters work from.

debug_text() gives the compact one-line form (repr, with list-like containers
shown as list literals), pretty_debug() the fully expanded multi-line form.
Both survive broken __repr__ methods and recursive containers.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import array
import collections
import collections.abc as abc
import dataclasses
from typing import Any


# Classes --------------------------------------------------------------------------------------------------------------


class PrettyConf:
    """
    Layout constants shared by the debug and pretty-print formatters.

    Attributes:
        INDENT: Spaces per nesting level in expanded layouts.
        MAP_INLINE_LIMIT: Map-like debug text shorter than this stays on one line
            under the array-pretty directive.
        LIST_LIKE: Container types whose debug text is shown in list-literal form,
            e.g. ``deque([1, 2])`` as ``[1, 2]``.
    """

    INDENT = 4
    MAP_INLINE_LIMIT = 100
    LIST_LIKE = (collections.deque, collections.UserList, array.array)


# Methods --------------------------------------------------------------------------------------------------------------


def debug_text(value: Any) -> str:
    """
    Return the compact structural string form of a value.

    Examples:
        >>> debug_text([1, "a"])
        "[1, 'a']"
        >>> debug_text(collections.deque([1, 2]))
        '[1, 2]'
    """
    if isinstance(value, PrettyConf.LIST_LIKE):
        return safe_repr(list(value))
    return safe_repr(value)


def compact_debug(value: Any) -> str:
    """
    Single-line debug text; never contains a line break.

    Multi-line reprs (custom __repr__ methods) are folded into one line,
    joining the stripped lines with a single space.
    """
    text = debug_text(value)
    lines = text.splitlines()
    if len(lines) > 1 or text != "".join(lines):
        text = " ".join(line.strip() for line in lines if line.strip())
    return text


def pretty_debug(value: Any, *, indent: int = PrettyConf.INDENT) -> str:
    """
    Fully expanded multi-line debug text, one element per line.

    Lists, tuples, sets, mappings, named tuples and dataclass instances are
    expanded at every level with a trailing comma after each element; other
    values use their repr. Empty containers stay on one line.

    Examples:
        >>> print(pretty_debug({"a": [1, 2]}))
        {
            'a': [
                1,
                2,
            ],
        }
    """
    return _expand(value, 0, indent, set())


def safe_repr(obj: Any) -> str:
    """repr() that survives a broken __repr__."""
    try:
        return repr(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (repr failed: {type(e).__name__})>"


def safe_str(obj: Any) -> str:
    """str() that survives a broken __str__."""
    try:
        return str(obj)
    except Exception as e:
        return f"<{type(obj).__name__} object (str failed: {type(e).__name__})>"


# Private Methods ------------------------------------------------------------------------------------------------------


def _expand(obj: Any, level: int, indent: int, seen: set[int]) -> str:
    shape = _shape(obj)
    if shape is None:
        return safe_repr(obj)

    open_ch, close_ch, entries = shape
    if id(obj) in seen:
        return f"{open_ch}...{close_ch}"
    if not entries:
        if isinstance(obj, (set, frozenset)):
            return f"{type(obj).__name__}()"
        return f"{open_ch}{close_ch}"

    seen.add(id(obj))
    try:
        pad = " " * (indent * (level + 1))
        lines = [open_ch]
        for label, item in entries:
            lines.append(f"{pad}{label}{_expand(item, level + 1, indent, seen)},")
        lines.append(" " * (indent * level) + close_ch)
    finally:
        seen.discard(id(obj))
    return "\n".join(lines)


def _shape(obj: Any) -> tuple[str, str, list[tuple[str, Any]]] | None:
    """Delimiters and (label, item) entries of an expandable value, None for scalars."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = [(f"{f.name}=", getattr(obj, f.name)) for f in dataclasses.fields(obj) if f.repr]
        return f"{type(obj).__name__}(", ")", fields

    if isinstance(obj, tuple) and hasattr(obj, "_fields"):
        return f"{type(obj).__name__}(", ")", [(f"{k}=", v) for k, v in zip(obj._fields, obj)]

    if isinstance(obj, abc.Mapping):
        return "{", "}", [(f"{safe_repr(k)}: ", v) for k, v in obj.items()]

    if isinstance(obj, (list, *PrettyConf.LIST_LIKE)):
        return "[", "]", [("", x) for x in obj]

    if isinstance(obj, tuple):
        return "(", ")", [("", x) for x in obj]

    if isinstance(obj, (set, frozenset)):
        return "{", "}", [("", x) for x in obj]

    return None
