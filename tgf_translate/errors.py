#!/usr/bin/env python3
# ABOUTME: Exception hierarchy for the translator command.
# ABOUTME: Each error carries the process exit code the CLI reports for it.


class TranslatorError(Exception):
    """Base class for all errors surfaced by the translator."""

    exit_code = 1


class EnvFileReadError(TranslatorError):
    """The local .env file exists but could not be read or parsed."""

    exit_code = 2


class InvalidInputError(TranslatorError):
    """There is no non-blank text to translate."""

    exit_code = 3

    def __init__(self, message: str = "no valid text to translate"):
        super().__init__(message)


class TranslationError(TranslatorError):
    """Base class for failures of the translation request itself."""

    exit_code = 4


class MissingCredentialError(TranslationError):
    """The API key is unset or blank."""

    def __init__(self, variable: str = "OPENAI_API_KEY"):
        super().__init__(f"missing {variable} environment variable")
        self.variable = variable


class SerializationError(TranslationError):
    """The request payload could not be encoded."""


class NetworkError(TranslationError):
    """The request never produced an HTTP response."""


class UpstreamError(TranslationError):
    """The API answered with a status other than 200."""

    def __init__(self, status_code: int):
        super().__init__(f"unexpected status code {status_code}")
        self.status_code = status_code


class ResponseParseError(TranslationError):
    """The response body is not a chat completion."""


class EmptyChoicesError(TranslationError):
    """The response contained no completion choices."""

    def __init__(self):
        super().__init__("response contained no choices")
