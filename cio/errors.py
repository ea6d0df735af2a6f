"""
Exceptions raised while compiling and rendering templates.

All of them are raised before a render call writes anything.
"""


# Classes --------------------------------------------------------------------------------------------------------------


class TemplateError(ValueError):
    """
    Base class for template failures.

    Attributes:
        fragment: The offending template text (placeholder, expression or spec).
        position: Offset of the fragment in the template, or None when unknown.
    """

    def __init__(self, message: str, *, fragment: str = "", position: int | None = None):
        super().__init__(message)
        self.message = message
        self.fragment = fragment
        self.position = position

    def __str__(self) -> str:
        where = f" at position {self.position}" if self.position is not None else ""
        return f"{self.message}{where}: {self.fragment!r}"


class ExpressionSyntaxError(TemplateError):
    """Malformed placeholder or expression text that is not a valid value reference."""


class UnresolvedReferenceError(ExpressionSyntaxError):
    """Value reference that cannot be looked up in the render call arguments."""


class FormatSpecError(TemplateError):
    """Format spec with invalid syntax or rejected by the value's formatter."""
