"""
Format directives and the dispatcher that renders a value for one placeholder.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum, unique
from typing import Any

# Local ----------------------------------------------------------------------------------------------------------------
from .debug import compact_debug, pretty_debug, safe_str
from .errors import FormatSpecError
from .pretty import format_container

# Precision without a presentation type, e.g. ".2" or "08.3"
_PRECISION_ONLY = re.compile(r".*\.\d+")

# Standard format spec: [[fill]align][sign][z][#][0][width][grouping][.precision][type]
_STANDARD_SPEC = re.compile(
    r"(?:.?[<>=^])?[-+ ]?z?#?0?\d*[,_]?(?:\.\d+)?[bcdeEfFgGnosxX%]?", re.DOTALL
)


# Classes --------------------------------------------------------------------------------------------------------------


@unique
class DirectiveKind(StrEnum):
    """
    Rendering strategies selected by a placeholder's format spec.

    Attributes:
        DEFAULT: No spec (or empty spec), the value's str().
        ARRAY_PRETTY: Spec "a", depth-indented layout of sequence debug text.
        DEBUG_COMPACT: Spec "c", single-line debug text.
        JSON_PRETTY: Spec "j", fully expanded multi-line debug text.
        NUMERIC: Any other spec, forwarded to the value's __format__.
    """

    DEFAULT = "default"
    ARRAY_PRETTY = "a"
    DEBUG_COMPACT = "c"
    JSON_PRETTY = "j"
    NUMERIC = "numeric"


_LETTERS = {
    "a": DirectiveKind.ARRAY_PRETTY,
    "c": DirectiveKind.DEBUG_COMPACT,
    "j": DirectiveKind.JSON_PRETTY,
}


@dataclass(frozen=True)
class Directive:
    """Resolved rendering directive; spec is set for NUMERIC only."""

    kind: DirectiveKind
    spec: str | None = None

    @classmethod
    def from_spec(cls, spec: str | None) -> "Directive":
        """
        Resolve a placeholder format spec.

        Any spec other than the directive letters must follow the standard
        format spec syntax. Whether the value accepts it is only known at
        dispatch time.

        Raises:
            FormatSpecError: If the spec is not a valid standard format spec.

        Examples:
            >>> Directive.from_spec("a").kind
            <DirectiveKind.ARRAY_PRETTY: 'a'>
            >>> Directive.from_spec("04")
            Directive(kind=<DirectiveKind.NUMERIC: 'numeric'>, spec='04')
        """
        if not spec:
            return cls(DirectiveKind.DEFAULT)
        if spec in _LETTERS:
            return cls(_LETTERS[spec])
        if not _STANDARD_SPEC.fullmatch(spec):
            raise FormatSpecError("invalid format spec", fragment=spec)
        return cls(DirectiveKind.NUMERIC, spec)


# Methods --------------------------------------------------------------------------------------------------------------


def dispatch(directive: Directive, value: Any) -> str:
    """
    Render value according to directive.

    Raises:
        FormatSpecError: If a NUMERIC spec is rejected by the value's formatter.

    Examples:
        >>> dispatch(Directive.from_spec("04"), 5)
        '0005'
        >>> dispatch(Directive.from_spec("x"), 255)
        'ff'
        >>> dispatch(Directive.from_spec(".2"), 3.14159)
        '3.14'
    """
    kind = directive.kind
    if kind is DirectiveKind.ARRAY_PRETTY:
        return format_container(value)
    if kind is DirectiveKind.DEBUG_COMPACT:
        return compact_debug(value)
    if kind is DirectiveKind.JSON_PRETTY:
        return pretty_debug(value)
    if kind is DirectiveKind.NUMERIC:
        return format_numeric(value, directive.spec)
    return safe_str(value)


def format_numeric(value: Any, spec: str) -> str:
    """
    Format value with a standard format spec.

    A precision without presentation type (".2", "08.3") means fixed-point
    decimals for float and Decimal values.
    """
    if isinstance(value, (float, Decimal)) and _PRECISION_ONLY.fullmatch(spec):
        spec += "f"
    try:
        return format(value, spec)
    except (ValueError, TypeError) as exc:
        raise FormatSpecError(
            f"invalid format spec for {type(value).__name__!r} value ({exc})", fragment=spec
        ) from exc
