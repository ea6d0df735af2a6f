#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
from typing import Callable

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------


@pytest.fixture
def streams() -> Callable[[str], tuple[io.StringIO, io.StringIO]]:
    """Fixture to create (stdin, stdout) text streams with the given input."""

    def _make(text: str = "") -> tuple[io.StringIO, io.StringIO]:
        return io.StringIO(text), io.StringIO()

    return _make


@pytest.fixture
def matrix_4d() -> list:
    return [
        [[[1, 2], [3, 4]], [[5, 6], [7, 8]]],
        [[[9, 10], [11, 12]], [[13, 14], [15, 16]]],
    ]


@pytest.fixture
def matrix_4d_pretty() -> str:
    return (
        "[\n"
        "    [\n"
        "        [\n"
        "            [1, 2],\n"
        "            [3, 4]\n"
        "        ],\n"
        "        [\n"
        "            [5, 6],\n"
        "            [7, 8]\n"
        "        ]\n"
        "    ],\n"
        "    [\n"
        "        [\n"
        "            [9, 10],\n"
        "            [11, 12]\n"
        "        ],\n"
        "        [\n"
        "            [13, 14],\n"
        "            [15, 16]\n"
        "        ]\n"
        "    ]\n"
        "]"
    )
