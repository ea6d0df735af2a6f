"""
Interactive line prompt that retries until the input parses.
"""

# Standard library -----------------------------------------------------------------------------------------------------
import sys
from typing import Callable, TextIO, TypeVar

T = TypeVar("T")

EMPTY_INPUT_MESSAGE = "Error: Unauthorized empty input."


# Methods --------------------------------------------------------------------------------------------------------------


def prompt(
    message: str,
    convert: Callable[[str], T] = str,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> T:
    """
    Ask for one line of input until it converts successfully.

    Each round writes the prompt, reads a line and trims it. An empty line
    prints EMPTY_INPUT_MESSAGE and asks again; a ValueError or TypeError from
    convert prints ``Error: <reason>.`` and asks again.

    Args:
        message: Prompt text, written without a trailing newline.
        convert: Parser for the trimmed text. ``bool`` is replaced by parse_bool,
            since bool("false") is True.
        stdin: Input stream, sys.stdin by default.
        stdout: Output stream for the prompt and error messages, sys.stdout by default.

    Returns:
        The first successfully converted value.

    Raises:
        EOFError: If the input stream is exhausted.

    Examples:
        >>> age = prompt("Your age: ", int)  # doctest: +SKIP
        Your age: forty
        Error: invalid literal for int() with base 10: 'forty'.
        Your age: 40
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    parse = parse_bool if convert is bool else convert

    while True:
        stdout.write(message)
        stdout.flush()
        line = stdin.readline()
        if not line:
            raise EOFError("no more input")
        text = line.strip()
        if not text:
            print(EMPTY_INPUT_MESSAGE, file=stdout)
            continue
        try:
            return parse(text)
        except (ValueError, TypeError) as e:
            print(f"Error: {e}.", file=stdout)


def parse_bool(text: str) -> bool:
    """Parse exactly 'true' or 'false'."""
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError("provided string was not `true` or `false`")


def parse_char(text: str) -> str:
    """Parse exactly one character."""
    if len(text) != 1:
        raise ValueError("too many characters in string" if text else "cannot parse char from empty string")
    return text
