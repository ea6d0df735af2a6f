#
# CIO - Prompt Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from cio.prompt import EMPTY_INPUT_MESSAGE, parse_bool, parse_char, prompt


# Tests ----------------------------------------------------------------------------------------------------------------


class TestPrompt:
    def test_first_try(self, streams):
        stdin, stdout = streams("42\n")
        assert prompt("Age: ", int, stdin=stdin, stdout=stdout) == 42
        assert stdout.getvalue() == "Age: "

    def test_trimmed(self, streams):
        stdin, stdout = streams("  Ada  \n")
        assert prompt("Name: ", stdin=stdin, stdout=stdout) == "Ada"

    def test_empty_retries(self, streams):
        stdin, stdout = streams("\n   \n7\n")
        assert prompt("Age: ", int, stdin=stdin, stdout=stdout) == 7
        expected = f"Age: {EMPTY_INPUT_MESSAGE}\nAge: {EMPTY_INPUT_MESSAGE}\nAge: "
        assert stdout.getvalue() == expected

    def test_parse_error_retries(self, streams):
        stdin, stdout = streams("abc\n5\n")
        assert prompt("Age: ", int, stdin=stdin, stdout=stdout) == 5
        assert "Error: invalid literal for int() with base 10: 'abc'.\n" in stdout.getvalue()
        assert stdout.getvalue().count("Age: ") == 2

    def test_bool_uses_strict_parser(self, streams):
        stdin, stdout = streams("false\n")
        assert prompt("Married? ", bool, stdin=stdin, stdout=stdout) is False

    def test_bool_rejects_other_words(self, streams):
        stdin, stdout = streams("yes\ntrue\n")
        assert prompt("Married? ", bool, stdin=stdin, stdout=stdout) is True
        assert "Error: provided string was not `true` or `false`." in stdout.getvalue()

    def test_char(self, streams):
        stdin, stdout = streams("ab\nz\n")
        assert prompt("Letter: ", parse_char, stdin=stdin, stdout=stdout) == "z"
        assert "Error: too many characters in string." in stdout.getvalue()

    def test_eof(self, streams):
        stdin, stdout = streams("")
        with pytest.raises(EOFError):
            prompt("Age: ", int, stdin=stdin, stdout=stdout)

    def test_eof_after_errors(self, streams):
        stdin, stdout = streams("\nx\n")
        with pytest.raises(EOFError):
            prompt("Age: ", int, stdin=stdin, stdout=stdout)

    def test_default_streams(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("1.5\n"))
        assert prompt("Height: ", float) == 1.5
        assert capsys.readouterr().out == "Height: "


class TestParsers:
    @pytest.mark.parametrize(
        "text, expected",
        [
            pytest.param("true", True, id="true"),
            pytest.param("false", False, id="false"),
        ],
    )
    def test_bool(self, text, expected):
        assert parse_bool(text) is expected

    @pytest.mark.parametrize("text", ["True", "1", "yes", ""])
    def test_bool_invalid(self, text):
        with pytest.raises(ValueError):
            parse_bool(text)

    def test_char_invalid(self):
        with pytest.raises(ValueError, match="empty"):
            parse_char("")
