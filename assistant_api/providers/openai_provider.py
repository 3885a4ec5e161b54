"""OpenAI-compatible provider used for OpenAI, OpenRouter and the free models."""

import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx
from langsmith import traceable
from openai import APIStatusError, AsyncOpenAI

from assistant_api.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ModelIdentifier,
)
from assistant_api.normalizers import normalize_openai_response
from assistant_api.results import NormalizedResult
from assistant_api.schemas import Message

from .base import Translator, json_body, log_provider_result, redact_trace_inputs

logger = logging.getLogger(__name__)


class OpenAICompatibleChatProvider:
    """Chat Completions client authenticated with ``Authorization: Bearer``.

    A fresh ``AsyncOpenAI`` client is built per call with retries disabled, so
    each send is a single attempt on its own connection.
    """

    def __init__(
        self,
        name: str,
        base_url: str,
        translate: Translator,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.name = name
        self._base_url = base_url
        self._translate = translate
        self._timeout = timeout
        self._transport = transport

    async def send(
        self,
        identifier: ModelIdentifier,
        credential: str,
        conversation: Sequence[Message],
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> NormalizedResult:
        request = self._translate(identifier, conversation, max_tokens=max_tokens)

        start = time.time()
        status_code, status_text, body = await self._create_chat_completion(
            credential, request.payload
        )
        duration_ms = int((time.time() - start) * 1000)

        result = normalize_openai_response(status_code, status_text, body)
        log_provider_result(logger, self.name, request.model, duration_ms, status_code, result)
        return result

    @traceable(
        run_type="llm", name="openai.chat.completions.create", process_inputs=redact_trace_inputs
    )
    async def _create_chat_completion(
        self, credential: str, payload: dict[str, Any]
    ) -> tuple[int, str, Any]:
        http_client = httpx.AsyncClient(transport=self._transport, timeout=self._timeout)
        async with AsyncOpenAI(
            api_key=credential,
            base_url=self._base_url,
            max_retries=0,
            timeout=self._timeout,
            http_client=http_client,
        ) as client:
            try:
                raw = await client.chat.completions.with_raw_response.create(**payload)
            except APIStatusError as exc:
                return exc.status_code, exc.response.reason_phrase, json_body(exc.response)
            response = raw.http_response
            return response.status_code, response.reason_phrase, json_body(response)
