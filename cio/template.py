"""
Template parsing: split a template into literal spans and placeholders.

Placeholder syntax:

    {expr}          default rendering
    {expr:spec}     directive-controlled rendering
    {{ and }}       literal braces

The placeholder body may hold balanced parentheses but no braces. It is split
at the first colon outside parentheses, so a colon outside parentheses in the
expression itself (e.g. a slice inside an item access) is read as the spec
delimiter.
"""

# Standard library -----------------------------------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Iterator

# Local ----------------------------------------------------------------------------------------------------------------
from .errors import ExpressionSyntaxError
from .references import Reference


# Classes --------------------------------------------------------------------------------------------------------------


@dataclass(frozen=True)
class Placeholder:
    """
    One ``{expression:spec}`` region of a template.

    Attributes:
        raw: The placeholder text including braces.
        expression: Trimmed, non-empty expression text.
        spec: Text after the first top-level colon, None when there is no colon.
        position: Offset of the opening brace in the template.
        reference: The parsed expression, None for a placeholder built by hand.
    """

    raw: str
    expression: str
    spec: str | None
    position: int = 0
    reference: Reference | None = field(default=None, compare=False, repr=False)


@dataclass(frozen=True)
class Template:
    """
    Parsed template: literal spans interleaved with placeholders.

    There is always one more literal than placeholders; spans come out of
    ``spans()`` in source order.

    Examples:
        >>> t = Template.parse("x={x}, hex={n:x}")
        >>> t.literals
        ('x=', ', hex=', '')
        >>> [p.spec for p in t.placeholders]
        [None, 'x']
    """

    text: str
    literals: tuple[str, ...]
    placeholders: tuple[Placeholder, ...]

    @classmethod
    def parse(cls, text: str) -> "Template":
        """
        Parse template text.

        Raises:
            ExpressionSyntaxError: On an empty, unterminated or nested placeholder,
                unbalanced parentheses, a single '}' or an invalid value reference.
        """
        literals: list[str] = []
        placeholders: list[Placeholder] = []
        buf: list[str] = []
        i, n = 0, len(text)
        while i < n:
            ch = text[i]
            if ch == "{":
                if text.startswith("{", i + 1):
                    buf.append("{")
                    i += 2
                    continue
                i, ph = _scan_placeholder(text, i)
                literals.append("".join(buf))
                placeholders.append(ph)
                buf = []
            elif ch == "}":
                if text.startswith("}", i + 1):
                    buf.append("}")
                    i += 2
                    continue
                raise ExpressionSyntaxError("single '}' in template", fragment="}", position=i)
            else:
                buf.append(ch)
                i += 1
        literals.append("".join(buf))
        return cls(text=text, literals=tuple(literals), placeholders=tuple(placeholders))

    def spans(self) -> Iterator[tuple[str, Placeholder | None]]:
        """Yield (literal, placeholder) pairs; the last pair has no placeholder."""
        for literal, ph in zip(self.literals, self.placeholders):
            yield literal, ph
        yield self.literals[-1], None


# Private Methods ------------------------------------------------------------------------------------------------------


def _scan_placeholder(text: str, start: int) -> tuple[int, Placeholder]:
    """Scan the placeholder opened at text[start]; return the offset after it and the Placeholder."""
    depth = 0
    colon = None
    for j in range(start + 1, len(text)):
        ch = text[j]
        if ch == "{":
            raise ExpressionSyntaxError(
                "nested '{' in placeholder", fragment=text[start : j + 1], position=start
            )
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ExpressionSyntaxError(
                    "unbalanced ')' in placeholder", fragment=text[start : j + 1], position=start
                )
        elif ch == ":" and depth == 0 and colon is None:
            colon = j
        elif ch == "}":
            raw = text[start : j + 1]
            if depth:
                raise ExpressionSyntaxError(
                    "unbalanced '(' in placeholder", fragment=raw, position=start
                )
            return j + 1, _make_placeholder(raw, start, None if colon is None else colon - start)
    raise ExpressionSyntaxError("unterminated placeholder", fragment=text[start:], position=start)


def _make_placeholder(raw: str, position: int, colon: int | None) -> Placeholder:
    body = raw[1:-1]
    if not body.strip():
        raise ExpressionSyntaxError("empty placeholder", fragment=raw, position=position)

    if colon is None:
        expression, spec = body.strip(), None
    else:
        expression, spec = raw[1:colon].strip(), raw[colon + 1 : -1]
    if not expression:
        raise ExpressionSyntaxError("empty expression in placeholder", fragment=raw, position=position)

    try:
        reference = Reference.parse(expression)
    except ExpressionSyntaxError as exc:
        exc.position = position
        raise

    return Placeholder(
        raw=raw, expression=expression, spec=spec, position=position, reference=reference
    )
