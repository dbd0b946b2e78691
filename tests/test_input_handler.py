#!/usr/bin/env python3
# ABOUTME: Tests for the input handler module.
# ABOUTME: Verifies text assembly from arguments and stdin and language resolution.

import io

import pytest

from tgf_translate.errors import InvalidInputError
from tgf_translate.input_handler import InputHandler


class TTYInput(io.StringIO):
    """A stdin stand-in that claims to be a terminal."""

    def isatty(self):
        return True


class BrokenInput(io.StringIO):
    """A piped stdin that fails on read."""

    def read(self, *args):
        raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")


def test_resolve_target_language_prefers_flag():
    """Test that an explicit language wins over the default."""
    assert InputHandler.resolve_target_language("french", "spanish") == "french"


def test_resolve_target_language_trims_flag():
    """Test that the flag value is trimmed."""
    assert InputHandler.resolve_target_language("  french ", "spanish") == "french"


@pytest.mark.parametrize("flag_value", [None, "", "   "])
def test_resolve_target_language_falls_back(flag_value):
    """Test that a blank flag falls back to the default."""
    assert InputHandler.resolve_target_language(flag_value, "spanish") == "spanish"


def test_read_stdin_piped():
    """Test that piped content is read completely."""
    assert InputHandler.read_stdin(io.StringIO("line one\nline two\n")) == "line one\nline two\n"


def test_read_stdin_terminal():
    """Test that nothing is read from a terminal."""
    assert InputHandler.read_stdin(TTYInput("should not be read")) == ""


def test_read_stdin_failure():
    """Test that undecodable input is reported as invalid input."""
    with pytest.raises(InvalidInputError):
        InputHandler.read_stdin(BrokenInput())


def test_assemble_joins_args_and_stdin():
    """Test that arguments are space-joined and stdin follows directly."""
    request = InputHandler.assemble(
        ["Hello", "world"], "!\nMore text", language="", context="", default_language="english"
    )

    assert request.text == "Hello world!\nMore text"
    assert request.target_language == "english"
    assert request.context == ""


def test_assemble_stdin_only():
    """Test assembling text from piped input alone."""
    request = InputHandler.assemble([], "Guten Tag\n", None, None, "english")

    assert request.text == "Guten Tag\n"


def test_assemble_keeps_context_separate_from_language():
    """Test that the context hint does not replace the target language."""
    request = InputHandler.assemble(
        ["Hello"], "", language="french", context="medical", default_language="english"
    )

    assert request.target_language == "french"
    assert request.context == "medical"


def test_assemble_context_without_language():
    """Test that a context hint alone leaves the default language in place."""
    request = InputHandler.assemble(["Hello"], "", language="", context="medical", default_language="spanish")

    assert request.target_language == "spanish"
    assert request.context == "medical"


@pytest.mark.parametrize(
    "args, stdin_text",
    [
        ([], ""),
        ([" "], ""),
        ([], "\n\n  \t"),
        (["", ""], "  "),
    ],
)
def test_assemble_blank_text_fails(args, stdin_text):
    """Test that blank text is rejected."""
    with pytest.raises(InvalidInputError) as exc_info:
        InputHandler.assemble(args, stdin_text, "french", "", "english")

    assert str(exc_info.value) == "no valid text to translate"
    assert exc_info.value.exit_code == 3
