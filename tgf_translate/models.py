#!/usr/bin/env python3
# ABOUTME: Value types passed between input assembly and the translation client.
# ABOUTME: Neither type outlives a single invocation.

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class TranslationRequest:
    """Text to translate plus the language and optional context hint."""

    text: str
    target_language: str
    context: Optional[str] = None


@dataclass(frozen=True)
class TranslationResult:
    """Translated text taken from the first completion choice."""

    translated_text: str
    model: str = ""
    usage: Dict[str, int] = field(default_factory=dict)
