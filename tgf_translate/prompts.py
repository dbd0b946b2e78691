#!/usr/bin/env python3
# ABOUTME: Contains the instruction prompt sent to the chat model.
# ABOUTME: Embeds target language, optional context hint and the text itself.

from typing import Optional


class Prompts:
    """Class containing the prompt used for translation."""

    TRANSLATION_TEMPLATE = (
        "Your only job is to translate the following text to {target_language} language "
        "by keeping its format without assumptions{context_suffix}:{text}"
    )

    @staticmethod
    def context_suffix(context: Optional[str]) -> str:
        """Get the parenthesized context suffix.

        Args:
            context: Optional context hint for the chat model

        Returns:
            " (hint)" with the trimmed hint, or "" if the hint is blank
        """
        hint = (context or "").strip()
        if not hint:
            return ""
        return f" ({hint})"

    @classmethod
    def translation_prompt(
        cls, text: str, target_language: str, context: Optional[str] = None
    ) -> str:
        """Get the user prompt for translation.

        Args:
            text: The text to translate, passed through verbatim
            target_language: The target language for translation
            context: Optional context hint

        Returns:
            The user prompt for translation
        """
        return cls.TRANSLATION_TEMPLATE.format(
            target_language=target_language,
            context_suffix=cls.context_suffix(context),
            text=text,
        )
