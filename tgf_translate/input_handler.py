#!/usr/bin/env python3
# ABOUTME: Input assembly for the translator command.
# ABOUTME: Joins positional arguments with piped stdin and resolves the target language.

import logging
import sys
from typing import IO, Optional, Sequence

from tgf_translate.errors import InvalidInputError
from tgf_translate.models import TranslationRequest

logger = logging.getLogger(__name__)


class InputHandler:
    """Builds a TranslationRequest from command-line arguments and stdin."""

    @staticmethod
    def resolve_target_language(flag_value: Optional[str], default_language: str) -> str:
        """Pick the explicit language flag if non-blank, else the default.

        Args:
            flag_value: Value of --language, may be None or blank
            default_language: Configured fallback language

        Returns:
            The target language
        """
        language = (flag_value or "").strip()
        if language:
            return language
        return default_language

    @staticmethod
    def read_stdin(stream: Optional[IO[str]] = None) -> str:
        """Read all piped input.

        Args:
            stream: Stream to read, defaults to sys.stdin

        Returns:
            The piped content, or "" when stdin is a terminal or unavailable

        Raises:
            InvalidInputError: If the piped data cannot be read or decoded
        """
        if stream is None:
            stream = sys.stdin
        if stream is None or stream.isatty():
            return ""

        try:
            data = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            raise InvalidInputError(f"could not read standard input: {e}") from e
        logger.debug("Read %d characters from stdin", len(data))
        return data

    @classmethod
    def assemble(
        cls,
        args: Sequence[str],
        stdin_text: str,
        language: Optional[str],
        context: Optional[str],
        default_language: str,
    ) -> TranslationRequest:
        """Assemble the translation request.

        Positional arguments are joined with single spaces and the piped
        input follows them directly.

        Args:
            args: Positional (non-flag) arguments
            stdin_text: Content read from stdin
            language: Value of --language
            context: Value of --context
            default_language: Configured fallback language

        Returns:
            The translation request

        Raises:
            InvalidInputError: If the text is blank
        """
        text = " ".join(args) + stdin_text
        if not text.strip():
            raise InvalidInputError()

        return TranslationRequest(
            text=text,
            target_language=cls.resolve_target_language(language, default_language),
            context=context,
        )
