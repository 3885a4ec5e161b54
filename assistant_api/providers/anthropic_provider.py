"""Anthropic Messages API provider implementation."""

import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx
from langsmith import traceable

from assistant_api.constants import (
    ANTHROPIC_BASE_URL,
    ANTHROPIC_VERSION,
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    ModelIdentifier,
)
from assistant_api.message_mappers import to_anthropic_request
from assistant_api.normalizers import normalize_anthropic_response
from assistant_api.results import NormalizedResult
from assistant_api.schemas import Message

from .base import json_body, log_provider_result, redact_trace_inputs

logger = logging.getLogger(__name__)


class AnthropicChatProvider:
    name = "anthropic"

    def __init__(
        self,
        base_url: str = ANTHROPIC_BASE_URL,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url
        self._timeout = timeout
        self._transport = transport

    async def send(
        self,
        identifier: ModelIdentifier,
        credential: str,
        conversation: Sequence[Message],
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> NormalizedResult:
        request = to_anthropic_request(identifier, conversation, max_tokens=max_tokens)

        start = time.time()
        status_code, status_text, body = await self._create_message(credential, request.payload)
        duration_ms = int((time.time() - start) * 1000)

        result = normalize_anthropic_response(status_code, status_text, body)
        log_provider_result(logger, self.name, request.model, duration_ms, status_code, result)
        return result

    @traceable(
        run_type="llm", name="anthropic.messages.create", process_inputs=redact_trace_inputs
    )
    async def _create_message(
        self, credential: str, payload: dict[str, Any]
    ) -> tuple[int, str, Any]:
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.post(
                "/v1/messages",
                headers={"x-api-key": credential, "anthropic-version": ANTHROPIC_VERSION},
                json=payload,
            )
        return response.status_code, response.reason_phrase, json_body(response)
