"""
Value references used inside template placeholders.

A reference names one of the arguments passed to a render call and optionally
walks into it with attribute, item and call steps:

    0               first positional argument
    name            keyword argument ``name``
    user.name       attribute access
    rows[1][-1]     item access with literal keys
    text.upper()    call with literal arguments
    cities.get('Paris', 'unknown')

Nothing is evaluated: keys and call arguments must be Python literals.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import ast
import re
from dataclasses import dataclass
from typing import Any, Literal, Mapping, Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ExpressionSyntaxError, UnresolvedReferenceError

# Classes --------------------------------------------------------------------------------------------------------------

StepKind = Literal["attr", "item", "call"]

_HEAD = re.compile(r"(?P<index>\d+)|(?P<name>[A-Za-z_]\w*)")
_ATTR = re.compile(r"\.\s*(?P<name>[A-Za-z_]\w*)")
_CLOSERS = {"[": "]", "(": ")"}


@dataclass(frozen=True)
class Step:
    """One access step applied to the value resolved so far."""

    kind: StepKind
    name: str | None = None
    key: Any = None
    args: tuple = ()

    def apply(self, obj: Any, text: str) -> Any:
        if self.kind == "attr":
            try:
                return getattr(obj, self.name)
            except AttributeError:
                raise UnresolvedReferenceError(
                    f"{type(obj).__name__!r} object has no attribute {self.name!r}", fragment=text
                ) from None

        if self.kind == "item":
            try:
                return obj[self.key]
            except (KeyError, IndexError, TypeError) as exc:
                raise UnresolvedReferenceError(
                    f"cannot get item {self.key!r} of {type(obj).__name__!r} object: "
                    f"{type(exc).__name__}",
                    fragment=text,
                ) from None

        if not callable(obj):
            raise UnresolvedReferenceError(
                f"{type(obj).__name__!r} object is not callable", fragment=text
            )
        return obj(*self.args)


@dataclass(frozen=True)
class Reference:
    """
    Parsed value reference.

    Attributes:
        text: The expression text the reference was parsed from.
        head: Positional index (int) or keyword name (str).
        steps: Access steps applied left to right after the head is looked up.
    """

    text: str
    head: int | str
    steps: tuple[Step, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "Reference":
        """
        Parse expression text into a Reference.

        Raises:
            ExpressionSyntaxError: If the text is not a valid value reference.

        Examples:
            >>> Reference.parse("rows[0].upper()").head
            'rows'
            >>> Reference.parse("1").head
            1
        """
        src = text.strip()
        m = _HEAD.match(src)
        if not m:
            raise ExpressionSyntaxError("expected an argument index or name", fragment=text)
        head: int | str = int(m["index"]) if m["index"] is not None else m["name"]

        steps: list[Step] = []
        pos = m.end()
        while True:
            pos = _skip_space(src, pos)
            if pos >= len(src):
                break
            ch = src[pos]
            if ch == ".":
                am = _ATTR.match(src, pos)
                if not am:
                    raise ExpressionSyntaxError("expected attribute name after '.'", fragment=text)
                steps.append(Step("attr", name=am["name"]))
                pos = am.end()
            elif ch in _CLOSERS:
                end = _find_closer(src, pos, text)
                inner = src[pos + 1 : end]
                if ch == "[":
                    steps.append(Step("item", key=_literal(inner, text)))
                else:
                    args = _literal(f"({inner},)", text) if inner.strip() else ()
                    steps.append(Step("call", args=args))
                pos = end + 1
            else:
                raise ExpressionSyntaxError(f"unexpected character {ch!r}", fragment=text)

        return cls(text=src, head=head, steps=tuple(steps))

    def resolve(self, args: Sequence[Any], kwargs: Mapping[str, Any]) -> Any:
        """
        Look the reference up in the call arguments.

        Raises:
            UnresolvedReferenceError: If the argument or any access step is missing.
        """
        if isinstance(self.head, int):
            if self.head >= len(args):
                raise UnresolvedReferenceError(
                    f"positional argument {self.head} not provided ({len(args)} given)",
                    fragment=self.text,
                )
            obj = args[self.head]
        else:
            if self.head not in kwargs:
                raise UnresolvedReferenceError(
                    f"keyword argument {self.head!r} not provided", fragment=self.text
                )
            obj = kwargs[self.head]

        for step in self.steps:
            obj = step.apply(obj, self.text)
        return obj


# Private Methods ------------------------------------------------------------------------------------------------------


def _skip_space(s: str, pos: int) -> int:
    while pos < len(s) and s[pos].isspace():
        pos += 1
    return pos


def _find_closer(s: str, start: int, text: str) -> int:
    """Index of the bracket closing s[start], skipping quoted literals."""
    stack = [_CLOSERS[s[start]]]
    quote = None
    escaped = False
    for i in range(start + 1, len(s)):
        ch = s[i]
        if quote:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == quote:
                quote = None
        elif ch in "'\"":
            quote = ch
        elif ch in _CLOSERS:
            stack.append(_CLOSERS[ch])
        elif ch in ")]":
            if ch != stack.pop():
                break
            if not stack:
                return i
    raise ExpressionSyntaxError(f"unbalanced {s[start]!r}", fragment=text)


def _literal(source: str, text: str) -> Any:
    try:
        return ast.literal_eval(source.strip())
    except (ValueError, SyntaxError, TypeError, MemoryError, RecursionError):
        raise ExpressionSyntaxError(
            f"expected a literal, found {source.strip()!r}", fragment=text
        ) from None
