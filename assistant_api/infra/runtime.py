"""Runtime infrastructure helpers for settings, stored credentials, tracing, and wiring."""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

import boto3
from langsmith.run_trees import get_cached_client

from assistant_api.constants import (
    ANTHROPIC_BASE_URL,
    AWS_REGION,
    CREDENTIAL_PARAMETER_TEMPLATE,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    GOOGLE_BASE_URL,
    LANGSMITH_API_KEY_PARAMETER_NAME,
    LANGSMITH_PROJECT,
    OPENAI_BASE_URL,
    OPENROUTER_BASE_URL,
    ProviderFamily,
)
from assistant_api.message_mappers import to_openai_request, to_openrouter_request
from assistant_api.providers.anthropic_provider import AnthropicChatProvider
from assistant_api.providers.google_provider import GoogleChatProvider
from assistant_api.providers.openai_provider import OpenAICompatibleChatProvider
from assistant_api.services.chat_dispatcher import ChatDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RuntimeSettings:
    aws_region: str
    request_timeout_seconds: float
    openai_base_url: str
    anthropic_base_url: str
    google_base_url: str
    openrouter_base_url: str


@lru_cache(maxsize=1)
def get_settings() -> RuntimeSettings:
    return RuntimeSettings(
        aws_region=os.environ.get("AWS_REGION", AWS_REGION),
        request_timeout_seconds=float(
            os.environ.get("ASSISTANT_REQUEST_TIMEOUT_SECONDS", DEFAULT_REQUEST_TIMEOUT_SECONDS)
        ),
        openai_base_url=os.environ.get("ASSISTANT_OPENAI_BASE_URL", OPENAI_BASE_URL),
        anthropic_base_url=os.environ.get("ASSISTANT_ANTHROPIC_BASE_URL", ANTHROPIC_BASE_URL),
        google_base_url=os.environ.get("ASSISTANT_GOOGLE_BASE_URL", GOOGLE_BASE_URL),
        openrouter_base_url=os.environ.get("ASSISTANT_OPENROUTER_BASE_URL", OPENROUTER_BASE_URL),
    )


@lru_cache(maxsize=1)
def get_ssm_client() -> Any:
    return boto3.client("ssm", region_name=get_settings().aws_region)


def _get_secure_parameter(ssm_client: Any, parameter_name: str) -> str:
    result = ssm_client.get_parameter(Name=parameter_name, WithDecryption=True)
    value = result["Parameter"].get("Value")
    if not value:
        raise RuntimeError(f"SSM parameter {parameter_name} has no value")
    return value


def _get_optional_secure_parameter(ssm_client: Any, parameter_name: str) -> str | None:
    try:
        return _get_secure_parameter(ssm_client, parameter_name)
    except Exception:
        logger.warning(
            "Optional SSM parameter is unavailable; disabling dependent feature",
            extra={"parameter_name": parameter_name},
            exc_info=True,
        )
        return None


@lru_cache(maxsize=None)
def get_stored_credential(family: ProviderFamily) -> str | None:
    """Look up the server-side API key for a transport family, if one is stored."""
    parameter_name = CREDENTIAL_PARAMETER_TEMPLATE.format(family=family.value)
    return _get_optional_secure_parameter(get_ssm_client(), parameter_name)


def _configure_langsmith(langsmith_api_key: str | None) -> None:
    if not langsmith_api_key:
        os.environ.pop("LANGSMITH_TRACING", None)
        os.environ.pop("LANGSMITH_API_KEY", None)
        logger.info("LangSmith tracing disabled because API key is unavailable")
        return

    os.environ["LANGSMITH_TRACING"] = "true"
    os.environ["LANGSMITH_API_KEY"] = langsmith_api_key
    os.environ.setdefault("LANGSMITH_PROJECT", LANGSMITH_PROJECT)


@lru_cache(maxsize=1)
def ensure_langsmith_configured() -> None:
    """Configure LangSmith environment variables (called once via lru_cache)."""
    langsmith_api_key = os.environ.get("LANGSMITH_API_KEY") or _get_optional_secure_parameter(
        get_ssm_client(), LANGSMITH_API_KEY_PARAMETER_NAME
    )
    _configure_langsmith(langsmith_api_key)


def flush_langsmith_traces() -> None:
    if os.environ.get("LANGSMITH_TRACING", "").lower() != "true":
        return
    if not os.environ.get("LANGSMITH_API_KEY"):
        return
    try:
        get_cached_client().flush()
    except Exception:
        logger.warning("Failed to flush LangSmith traces", exc_info=True)


@lru_cache(maxsize=1)
def get_chat_dispatcher() -> ChatDispatcher:
    settings = get_settings()
    timeout = settings.request_timeout_seconds
    return ChatDispatcher(
        providers={
            ProviderFamily.OPENAI: OpenAICompatibleChatProvider(
                name="openai",
                base_url=settings.openai_base_url,
                translate=to_openai_request,
                timeout=timeout,
            ),
            ProviderFamily.OPENROUTER: OpenAICompatibleChatProvider(
                name="openrouter",
                base_url=settings.openrouter_base_url,
                translate=to_openrouter_request,
                timeout=timeout,
            ),
            ProviderFamily.ANTHROPIC: AnthropicChatProvider(
                base_url=settings.anthropic_base_url, timeout=timeout
            ),
            ProviderFamily.GOOGLE: GoogleChatProvider(
                base_url=settings.google_base_url, timeout=timeout
            ),
        }
    )
