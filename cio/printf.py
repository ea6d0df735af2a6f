"""
Template printing with explicit arguments.

Placeholders reference the call arguments by position or name:

    >>> sprintf("{0} has {n:04} items", "cart", n=7)
    'cart has 0007 items'
    >>> printf("{m:a}\\n", m=[[1, 2], [3, 4]])
    [
        [1, 2],
        [3, 4]
    ]

Format specs: "a" (array-pretty), "c" (compact debug), "j" (expanded debug),
anything else is a standard format spec ("04", ".2", "x", "b", "o", "e", ">10").

Rendering is all-or-nothing: the whole output is built before anything is
written, so a template error never leaves partial output behind. No trailing
newline is added.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys
from typing import Any, TextIO

# Local ----------------------------------------------------------------------------------------------------------------
from .directives import Directive, dispatch
from .errors import FormatSpecError
from .template import Template


# Methods --------------------------------------------------------------------------------------------------------------


def sprintf(template: str, /, *args: Any, **kwargs: Any) -> str:
    """
    Render template against the given arguments and return the text.

    Args:
        template: Template text with ``{expr}`` / ``{expr:spec}`` placeholders.
        *args: Values referenced by index, e.g. ``{0}``.
        **kwargs: Values referenced by name, e.g. ``{name}``.

    Raises:
        ExpressionSyntaxError: Malformed placeholder or invalid value reference.
        UnresolvedReferenceError: Reference not found among the arguments.
        FormatSpecError: Format spec with invalid syntax or rejected by the value's formatter.
    """
    parsed = Template.parse(template)
    directives: list[Directive] = []
    for ph in parsed.placeholders:
        try:
            directives.append(Directive.from_spec(ph.spec))
        except FormatSpecError as exc:
            exc.position = ph.position
            raise
    rendered = [
        dispatch(directive, ph.reference.resolve(args, kwargs))
        for directive, ph in zip(directives, parsed.placeholders)
    ]
    parts: list[str] = []
    for (literal, _), value in zip(parsed.spans(), rendered + [""]):
        parts.append(literal)
        parts.append(value)
    return "".join(parts)


def fprintf(stream: TextIO, template: str, /, *args: Any, **kwargs: Any) -> None:
    """Render template and write it to stream in a single write."""
    stream.write(sprintf(template, *args, **kwargs))


def printf(template: str, /, *args: Any, **kwargs: Any) -> None:
    """Render template and write it to standard output."""
    fprintf(sys.stdout, template, *args, **kwargs)
