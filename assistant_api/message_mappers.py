"""Conversion helpers between conversation messages and provider-specific requests."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, ModelIdentifier
from .model_registry import vendor_model_name
from .schemas import Message


@dataclass(frozen=True)
class VendorRequest:
    model: str
    payload: dict[str, Any]


def _role_content_pairs(messages: Sequence[Message]) -> list[dict[str, str]]:
    return [{"role": message.role, "content": message.content} for message in messages]


def to_openai_request(
    model: ModelIdentifier,
    conversation: Sequence[Message],
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> VendorRequest:
    """Build a Chat Completions body, passing every message through unmodified."""
    model_name = vendor_model_name(model)
    return VendorRequest(
        model=model_name,
        payload={
            "model": model_name,
            "messages": _role_content_pairs(conversation),
            "max_tokens": max_tokens,
            "temperature": temperature,
            "stream": False,
        },
    )


def to_openrouter_request(
    model: ModelIdentifier,
    conversation: Sequence[Message],
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> VendorRequest:
    return to_openai_request(model, conversation, max_tokens, temperature)


def to_anthropic_request(
    model: ModelIdentifier,
    conversation: Sequence[Message],
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> VendorRequest:
    """Build a Messages API body.

    System turns are dropped: the messages array may only hold user and
    assistant turns, and the separate system parameter is not populated.
    """
    model_name = vendor_model_name(model)
    turns = [message for message in conversation if message.role != "system"]
    return VendorRequest(
        model=model_name,
        payload={
            "model": model_name,
            "max_tokens": max_tokens,
            "messages": _role_content_pairs(turns),
            "temperature": temperature,
        },
    )


def to_google_request(
    model: ModelIdentifier,
    conversation: Sequence[Message],
    max_tokens: int = DEFAULT_MAX_TOKENS,
    temperature: float = DEFAULT_TEMPERATURE,
) -> VendorRequest:
    """Flatten the conversation into a single generateContent text part."""
    transcript = "\n".join(f"{message.role}: {message.content}" for message in conversation)
    return VendorRequest(
        model=vendor_model_name(model),
        payload={
            "contents": [{"parts": [{"text": transcript}]}],
            "generationConfig": {
                "temperature": temperature,
                "maxOutputTokens": max_tokens,
            },
        },
    )
