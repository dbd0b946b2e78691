#!/usr/bin/env python3
# ABOUTME: Tests for the prompts module.
# ABOUTME: Verifies the instruction prompt and its optional context suffix.

import pytest

from tgf_translate.prompts import Prompts


def test_prompt_contains_text_and_language():
    """Test that the literal text and language appear in the prompt."""
    prompt = Prompts.translation_prompt("Good morning, Marcel!", "Klingon")

    assert "Good morning, Marcel!" in prompt
    assert "Klingon" in prompt
    assert prompt.startswith("Your only job is to translate the following text to Klingon language")


def test_prompt_keeps_text_verbatim():
    """Test that whitespace and formatting of the text are untouched."""
    text = "  # Title\n\n- item one\n- item two\n"
    prompt = Prompts.translation_prompt(text, "german")

    assert prompt.endswith(":" + text)


@pytest.mark.parametrize("context", [None, "", "   ", "\n\t"])
def test_blank_context_adds_no_suffix(context):
    """Test that a blank context hint leaves no parenthesized suffix."""
    prompt = Prompts.translation_prompt("Hello", "french", context)

    assert "(" not in prompt
    assert ")" not in prompt
    assert "without assumptions:Hello" in prompt


def test_context_suffix_is_trimmed():
    """Test that exactly one suffix with the trimmed hint is added."""
    prompt = Prompts.translation_prompt("Hello", "french", "  legal document  ")

    assert prompt.count("(") == 1
    assert prompt.count(")") == 1
    assert "without assumptions (legal document):Hello" in prompt


def test_context_suffix():
    """Test the suffix helper directly."""
    assert Prompts.context_suffix(None) == ""
    assert Prompts.context_suffix(" ") == ""
    assert Prompts.context_suffix("casual tone") == " (casual tone)"
