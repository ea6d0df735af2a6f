#
# CIO - Printf Tests
#

# Standard library -----------------------------------------------------------------------------------------------------
import io
from unittest.mock import Mock

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest

# Local ----------------------------------------------------------------------------------------------------------------
from cio.errors import ExpressionSyntaxError, FormatSpecError, UnresolvedReferenceError
from cio.printf import fprintf, printf, sprintf


# Tests ----------------------------------------------------------------------------------------------------------------


class TestSprintf:
    @pytest.mark.parametrize(
        "template",
        [
            pytest.param("", id="empty"),
            pytest.param("plain", id="plain"),
            pytest.param("line\nbreak\n", id="newlines"),
            pytest.param("[1, 2] (x) : ;", id="punctuation"),
        ],
    )
    def test_no_placeholders_identity(self, template):
        assert sprintf(template) == template

    def test_escaped_braces(self):
        assert sprintf("{{literal}} {0}", 1) == "{literal} 1"

    def test_source_order(self):
        assert sprintf("{2}{0}{1}", "a", "b", "c") == "cab"

    def test_repeated_reference(self):
        assert sprintf("{0}{0}{x}", "a", x="b") == "aab"

    def test_named_and_positional(self):
        assert sprintf("{0} is {age} years old", "Ada", age=36) == "Ada is 36 years old"

    def test_references(self):
        out = sprintf("{name.upper()} {d['k']} {rows[-1]}", name="ada", d={"k": 1}, rows=[1, 2])
        assert out == "ADA 1 2"

    @pytest.mark.parametrize(
        "template, value, expected",
        [
            pytest.param("{0:a}", [1, 2, 3], "[1, 2, 3]", id="array_flat"),
            pytest.param("{0:a}", [[1, 2], [3, 4]], "[\n    [1, 2],\n    [3, 4]\n]", id="array_2d"),
            pytest.param("{0:c}", [[1, 2], [3, 4]], "[[1, 2], [3, 4]]", id="compact"),
            pytest.param("{0:j}", [1], "[\n    1,\n]", id="json"),
            pytest.param("{0:04}", 5, "0005", id="zero_pad"),
            pytest.param("{0:x}", 255, "ff", id="hex"),
            pytest.param("{0:.2}", 3.14159, "3.14", id="precision"),
            pytest.param("{0}", "text", "text", id="default"),
        ],
    )
    def test_directives(self, template, value, expected):
        assert sprintf(template, value) == expected

    def test_matrix_4d(self, matrix_4d, matrix_4d_pretty):
        assert sprintf("4D:\n{m:a}", m=matrix_4d) == "4D:\n" + matrix_4d_pretty


class TestPrintf:
    def test_writes_stdout(self, capsys):
        printf("x={0}", 1)
        assert capsys.readouterr().out == "x=1"

    def test_no_trailing_newline(self, capsys):
        printf("a")
        printf("b\n")
        assert capsys.readouterr().out == "ab\n"

    @pytest.mark.parametrize(
        "template, args, kwargs, error",
        [
            pytest.param("a {missing} b", (), {}, UnresolvedReferenceError, id="unresolved"),
            pytest.param("a {0} {} b", (1,), {}, ExpressionSyntaxError, id="syntax"),
            pytest.param("a {0} {1:q} b", (1, 2), {}, FormatSpecError, id="format_spec"),
        ],
    )
    def test_nothing_written_on_error(self, capsys, template, args, kwargs, error):
        with pytest.raises(error):
            printf(template, *args, **kwargs)
        assert capsys.readouterr().out == ""


class TestFprintf:
    def test_stream(self):
        buf = io.StringIO()
        fprintf(buf, "{0}+{1}", 1, 2)
        assert buf.getvalue() == "1+2"

    def test_single_write(self):
        stream = Mock()
        fprintf(stream, "a{0}b{1}c", 1, 2)
        stream.write.assert_called_once_with("a1b2c")

    def test_invalid_spec_before_resolution(self):
        """A malformed spec is reported even when a reference is missing."""
        stream = Mock()
        with pytest.raises(FormatSpecError) as exc_info:
            fprintf(stream, "{missing} {0:q}", 1)
        assert exc_info.value.position == 10
        stream.write.assert_not_called()

    def test_no_write_on_error(self):
        stream = Mock()
        with pytest.raises(UnresolvedReferenceError):
            fprintf(stream, "{0} {1}", 1)
        stream.write.assert_not_called()
