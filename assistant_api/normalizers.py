"""Mapping of vendor wire responses onto the uniform result shape."""

from collections.abc import Callable
from typing import Any

from .constants import NO_RESPONSE_CONTENT
from .errors import ErrorKind
from .results import Failure, NormalizedResult, Success, TokenUsage


def _first(items: Any) -> Any:
    if isinstance(items, list) and items:
        return items[0]
    return None


def _field(container: Any, key: str) -> Any:
    if isinstance(container, dict):
        return container.get(key)
    return None


def _vendor_error_message(body: Any) -> str | None:
    # OpenAI, Anthropic and Google all nest the message under "error".
    message = _field(_field(body, "error"), "message")
    if isinstance(message, str) and message:
        return message
    return None


def _is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


def _normalize(
    status_code: int,
    status_text: str,
    body: Any,
    extract_text: Callable[[Any], Any],
    extract_usage: Callable[[Any], TokenUsage | None],
) -> NormalizedResult:
    if not _is_success(status_code):
        message = _vendor_error_message(body) or status_text
        return Failure(ErrorKind.API_ERROR, f"status={status_code} message={message}")

    text = extract_text(body)
    if not isinstance(text, str):
        return Failure(ErrorKind.EMPTY_RESPONSE, NO_RESPONSE_CONTENT)
    return Success(text=text, usage=extract_usage(body))


def _usage(block: Any, input_key: str, output_key: str) -> TokenUsage | None:
    if not isinstance(block, dict):
        return None
    return TokenUsage(input_tokens=block.get(input_key), output_tokens=block.get(output_key))


def normalize_openai_response(status_code: int, status_text: str, body: Any) -> NormalizedResult:
    """Read ``choices[0].message.content``; also used for OpenRouter and free models."""
    return _normalize(
        status_code,
        status_text,
        body,
        lambda b: _field(_field(_first(_field(b, "choices")), "message"), "content"),
        lambda b: _usage(_field(b, "usage"), "prompt_tokens", "completion_tokens"),
    )


def normalize_anthropic_response(
    status_code: int, status_text: str, body: Any
) -> NormalizedResult:
    """Read ``content[0].text``."""
    return _normalize(
        status_code,
        status_text,
        body,
        lambda b: _field(_first(_field(b, "content")), "text"),
        lambda b: _usage(_field(b, "usage"), "input_tokens", "output_tokens"),
    )


def normalize_google_response(status_code: int, status_text: str, body: Any) -> NormalizedResult:
    """Read ``candidates[0].content.parts[0].text``."""
    return _normalize(
        status_code,
        status_text,
        body,
        lambda b: _field(
            _first(_field(_field(_first(_field(b, "candidates")), "content"), "parts")), "text"
        ),
        lambda b: _usage(_field(b, "usageMetadata"), "promptTokenCount", "candidatesTokenCount"),
    )
