"""Tests for the value prompt loop."""
import pytest

from keymenu.errors import UserCancelled
from keymenu.menu import ValueLeaf
from keymenu.prompt import ValuePrompt
from keymenu.scripted import RecordingWriter, ScriptedReader
from keymenu.values import Value, ValueKind


def capture(kind, lines, **settings):
    reader = ScriptedReader(lines=lines)
    writer = RecordingWriter()
    prompt = ValuePrompt(reader, writer, **settings)
    value = prompt.capture(ValueLeaf("Field", kind), ("Main", "Field"))
    return value, writer


class TestValuePrompt:
    """Test ValuePrompt.capture()."""

    def test_first_try(self):
        """Test a valid line is returned straight away."""
        value, writer = capture(ValueKind.FLOAT, ["2.5"])
        assert value == Value(ValueKind.FLOAT, 2.5)
        assert len(writer.frames) == 1

    def test_no_retry_limit(self):
        """Test invalid lines keep re-prompting."""
        value, writer = capture(ValueKind.UNSIGNED_INT, ["x"] * 50 + ["7"])
        assert value.data == 7
        assert len(writer.frames) == 51

    def test_error_shows_latest_input(self):
        """Test the error line reflects the last rejected attempt."""
        _, writer = capture(ValueKind.CHAR, ["ab", "cd", "e"])
        assert "Invalid single character: 'cd'" in writer.frames[2]

    def test_empty_string_reprompts(self):
        """Test an empty line never completes a string prompt."""
        value, writer = capture(ValueKind.STRING, ["", "hi"])
        assert value.data == "hi"
        assert len(writer.frames) == 2

    def test_trailing_newline_stripped(self):
        """Test readers that keep the terminator still work."""
        value, _ = capture(ValueKind.SIGNED_INT, ["-3\n"])
        assert value.data == -3

    def test_cancel(self):
        """Test the default cancel token aborts."""
        with pytest.raises(UserCancelled) as exc:
            capture(ValueKind.BOOL, ["\x1b"])
        assert exc.value.reason == "prompt"

    def test_cancel_after_errors(self):
        """Test cancelling works after rejected attempts."""
        with pytest.raises(UserCancelled):
            capture(ValueKind.BOOL, ["maybe", "\x1b"])

    def test_custom_cancel_token_rendered(self):
        """Test the capture indicator names the custom cancel token."""
        writer = RecordingWriter()
        prompt = ValuePrompt(ScriptedReader(lines=[":q"]), writer, cancel_token=":q")
        with pytest.raises(UserCancelled):
            prompt.capture(ValueLeaf("Flag", ValueKind.BOOL), ("Main", "Flag"))
        assert writer.frames[0][-1] == "Enter yes/no value (':q' to cancel):"
