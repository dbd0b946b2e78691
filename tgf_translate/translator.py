#!/usr/bin/env python3
# ABOUTME: Core translation logic using the OpenAI chat completions API.
# ABOUTME: Sends one request per call and extracts the first choice's text.

import json
import logging
from typing import Any, Dict, Optional

import httpx
import openai
from openai.types.chat import ChatCompletion

from tgf_translate.config import ModelConfig, Settings
from tgf_translate.errors import (
    EmptyChoicesError,
    MissingCredentialError,
    NetworkError,
    ResponseParseError,
    SerializationError,
    UpstreamError,
)
from tgf_translate.models import TranslationRequest, TranslationResult
from tgf_translate.prompts import Prompts

logger = logging.getLogger(__name__)


class Translator:
    """Translates text through a single chat-completion request.

    There are no retries and no streaming: every call to translate_text
    issues exactly one POST to the chat completions endpoint and either
    returns the complete translation or raises a TranslationError.
    """

    def __init__(self, settings: Settings, http_client: Optional[httpx.Client] = None):
        """Initialize the translator.

        Args:
            settings: Resolved process settings holding the API key and timeout
            http_client: Optional httpx client for the SDK to send requests with
        """
        self.settings = settings
        self.http_client = http_client

    def setup_openai_client(self) -> openai.OpenAI:
        """Create an OpenAI client bound to the fixed endpoint."""
        return openai.OpenAI(
            api_key=self.settings.api_key,
            base_url=ModelConfig.API_BASE_URL,
            timeout=self.settings.timeout,
            max_retries=0,
            http_client=self.http_client,
        )

    @staticmethod
    def build_request_params(request: TranslationRequest) -> Dict[str, Any]:
        """Build the chat-completion request body.

        Args:
            request: The translation request

        Returns:
            Keyword arguments for chat.completions.create
        """
        prompt = Prompts.translation_prompt(
            request.text, request.target_language, request.context
        )
        return {
            "model": ModelConfig.MODEL,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": ModelConfig.TEMPERATURE,
        }

    @staticmethod
    def check_encodable(params: Dict[str, Any]) -> None:
        """Check that the request body can be sent as UTF-8 JSON.

        Raises:
            SerializationError: If the body cannot be encoded
        """
        try:
            json.dumps(params, ensure_ascii=False).encode("utf-8")
        except (TypeError, ValueError) as e:
            raise SerializationError(f"could not encode request: {e}") from e

    def translate_text(self, request: TranslationRequest) -> TranslationResult:
        """Translate text into the target language.

        Args:
            request: Text, target language and optional context hint

        Returns:
            The translation result

        Raises:
            MissingCredentialError: If no API key is configured
            SerializationError: If the request body cannot be encoded
            NetworkError: If the request fails before a response arrives
            UpstreamError: If the API answers with a status other than 200
            ResponseParseError: If the body is not a chat completion
            EmptyChoicesError: If the completion has no choices
        """
        if not (self.settings.api_key or "").strip():
            raise MissingCredentialError(ModelConfig.API_KEY_VARIABLE)

        params = self.build_request_params(request)
        self.check_encodable(params)
        logger.debug(
            "Translating %d characters to %s with %s",
            len(request.text),
            request.target_language,
            ModelConfig.MODEL,
        )

        with self.setup_openai_client() as client:
            completion = self._send(client, params)

        return self._extract_result(completion)

    def _send(self, client: openai.OpenAI, params: Dict[str, Any]) -> Any:
        """POST the request and parse the body of a 200 response."""
        try:
            with client.chat.completions.with_streaming_response.create(**params) as response:
                logger.debug(
                    "%s answered with status %d",
                    ModelConfig.CHAT_COMPLETIONS_URL,
                    response.status_code,
                )
                if response.status_code != 200:
                    raise UpstreamError(response.status_code)

                try:
                    return response.parse()
                except (ValueError, openai.APIResponseValidationError) as e:
                    raise ResponseParseError(f"could not parse response: {e}") from e
        except openai.APIStatusError as e:
            raise UpstreamError(e.status_code) from e
        except (openai.APIConnectionError, httpx.TransportError) as e:
            raise NetworkError(f"request failed: {e}") from e

    @staticmethod
    def _extract_result(completion: Any) -> TranslationResult:
        """Pull the first choice's content out of a parsed completion."""
        if not isinstance(completion, ChatCompletion):
            raise ResponseParseError("response is not a chat completion")

        choices = getattr(completion, "choices", None)
        if not isinstance(choices, list):
            raise ResponseParseError("response has no choices list")
        if not choices:
            raise EmptyChoicesError()

        try:
            content = choices[0].message.content
        except AttributeError as e:
            raise ResponseParseError("first choice has no message") from e

        if content is None:
            content = ""
        elif not isinstance(content, str):
            raise ResponseParseError("message content is not a string")

        usage = getattr(completion, "usage", None)
        usage_dict = {
            "prompt_tokens": getattr(usage, "prompt_tokens", 0) or 0,
            "completion_tokens": getattr(usage, "completion_tokens", 0) or 0,
            "total_tokens": getattr(usage, "total_tokens", 0) or 0,
        }
        logger.debug("Token usage: %s", usage_dict)

        return TranslationResult(
            translated_text=content,
            model=getattr(completion, "model", None) or ModelConfig.MODEL,
            usage=usage_dict,
        )
