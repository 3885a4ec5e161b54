"""Provider interfaces and helpers shared by the vendor clients."""

import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol

import httpx

from assistant_api.constants import DEFAULT_MAX_TOKENS, ModelIdentifier
from assistant_api.message_mappers import VendorRequest
from assistant_api.results import Failure, NormalizedResult
from assistant_api.schemas import Message

Translator = Callable[..., VendorRequest]


class ChatProvider(Protocol):
    async def send(
        self,
        identifier: ModelIdentifier,
        credential: str,
        conversation: Sequence[Message],
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> NormalizedResult:
        """Make exactly one authenticated call and return the normalized result."""
        ...


def json_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


def redact_trace_inputs(inputs: dict[str, Any]) -> dict[str, Any]:
    """Keep credentials and the client instance out of LangSmith traces."""
    return {key: value for key, value in inputs.items() if key not in {"self", "credential"}}


def log_provider_result(
    logger: logging.Logger,
    provider: str,
    model: str,
    duration_ms: int,
    status_code: int,
    result: NormalizedResult,
) -> None:
    if isinstance(result, Failure):
        logger.warning(
            "Provider call failed",
            extra={
                "provider": provider,
                "model": model,
                "duration_ms": duration_ms,
                "status_code": status_code,
                "error_kind": result.kind.value,
            },
        )
        return

    logger.info(
        "Chat response generated",
        extra={
            "provider": provider,
            "model": model,
            "duration_ms": duration_ms,
            "status_code": status_code,
            "usage_prompt_tokens": result.usage.input_tokens if result.usage else None,
            "usage_completion_tokens": result.usage.output_tokens if result.usage else None,
            "response_length": len(result.text),
        },
    )
