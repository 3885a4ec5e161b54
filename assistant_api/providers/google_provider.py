"""Google Gemini generateContent provider implementation."""

import logging
import time
from collections.abc import Sequence
from typing import Any

import httpx
from langsmith import traceable

from assistant_api.constants import (
    DEFAULT_MAX_TOKENS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    GOOGLE_BASE_URL,
    ModelIdentifier,
)
from assistant_api.message_mappers import to_google_request
from assistant_api.normalizers import normalize_google_response
from assistant_api.results import NormalizedResult
from assistant_api.schemas import Message

from .base import json_body, log_provider_result, redact_trace_inputs

logger = logging.getLogger(__name__)


class GoogleChatProvider:
    name = "google"

    def __init__(
        self,
        base_url: str = GOOGLE_BASE_URL,
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
        request = to_google_request(identifier, conversation, max_tokens=max_tokens)

        start = time.time()
        status_code, status_text, body = await self._generate_content(
            credential, request.model, request.payload
        )
        duration_ms = int((time.time() - start) * 1000)

        result = normalize_google_response(status_code, status_text, body)
        log_provider_result(logger, self.name, request.model, duration_ms, status_code, result)
        return result

    @traceable(
        run_type="llm", name="google.models.generate_content", process_inputs=redact_trace_inputs
    )
    async def _generate_content(
        self, credential: str, model: str, payload: dict[str, Any]
    ) -> tuple[int, str, Any]:
        # The key travels as a query parameter and the model in the path.
        async with httpx.AsyncClient(
            base_url=self._base_url, timeout=self._timeout, transport=self._transport
        ) as client:
            response = await client.post(
                f"/v1beta/models/{model}:generateContent",
                params={"key": credential},
                json=payload,
            )
        return response.status_code, response.reason_phrase, json_body(response)
