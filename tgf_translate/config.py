#!/usr/bin/env python3
# ABOUTME: Configuration for the chat model, endpoint and process settings.
# ABOUTME: Loads the local .env file and resolves defaults from the environment.

import logging
import os
from pathlib import Path
from typing import Mapping, Optional, Union

from dotenv import load_dotenv
from dotenv.parser import parse_stream

from tgf_translate.errors import EnvFileReadError

logger = logging.getLogger(__name__)


class ModelConfig:
    """Fixed parameters of the chat-completion request."""

    # gpt-3.5 is enough for plain translation
    MODEL = "gpt-3.5-turbo-0125"
    TEMPERATURE = 0

    API_BASE_URL = "https://api.openai.com/v1"
    CHAT_COMPLETIONS_URL = f"{API_BASE_URL}/chat/completions"

    DEFAULT_TIMEOUT = 60.0
    FALLBACK_LANGUAGE = "english"

    API_KEY_VARIABLE = "OPENAI_API_KEY"
    DEFAULT_LANGUAGE_VARIABLE = "TGF_DEFAULT_LANGUAGE"

    ENV_FILE = ".env"


class Settings:
    """Process-wide settings, resolved once at start and passed explicitly."""

    def __init__(
        self,
        default_language: str = ModelConfig.FALLBACK_LANGUAGE,
        api_key: Optional[str] = None,
        timeout: float = ModelConfig.DEFAULT_TIMEOUT,
    ):
        self.default_language = default_language
        self.api_key = api_key
        self.timeout = timeout

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None, timeout: Optional[float] = None
    ) -> "Settings":
        """Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ
            timeout: Request timeout in seconds, defaults to ModelConfig.DEFAULT_TIMEOUT

        Returns:
            Resolved settings
        """
        if environ is None:
            environ = os.environ

        default_language = environ.get(ModelConfig.DEFAULT_LANGUAGE_VARIABLE, "").strip()
        if not default_language:
            default_language = ModelConfig.FALLBACK_LANGUAGE

        api_key = environ.get(ModelConfig.API_KEY_VARIABLE, "").strip() or None

        settings = cls(
            default_language=default_language,
            api_key=api_key,
            timeout=ModelConfig.DEFAULT_TIMEOUT if timeout is None else timeout,
        )
        logger.debug(
            "Resolved settings: default_language=%s, api_key=%s, timeout=%s",
            settings.default_language,
            "set" if settings.api_key else "missing",
            settings.timeout,
        )
        return settings

    def __repr__(self) -> str:
        return (
            f"Settings(default_language={self.default_language!r}, "
            f"api_key={'***' if self.api_key else None}, timeout={self.timeout!r})"
        )


def load_env_file(path: Union[str, Path] = ModelConfig.ENV_FILE) -> bool:
    """Merge KEY=VALUE pairs from a .env file into the process environment.

    Variables that are already set are left untouched. A missing file is not
    an error.

    Args:
        path: Path of the env file

    Returns:
        True if a file was loaded, False if there was none

    Raises:
        EnvFileReadError: If the file cannot be read or contains a malformed line
    """
    env_path = Path(path)
    if not env_path.exists():
        return False

    try:
        with open(env_path, "r", encoding="utf-8") as stream:
            for binding in parse_stream(stream):
                if binding.error:
                    raise EnvFileReadError(
                        f"could not parse {env_path} at line {binding.original.line}: "
                        f"{binding.original.string.strip()!r}"
                    )
    except (OSError, UnicodeDecodeError) as e:
        raise EnvFileReadError(f"could not read {env_path}: {e}") from e

    load_dotenv(env_path, override=False)
    return True
