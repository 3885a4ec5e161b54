"""Pydantic schemas for the assistant API."""

import time
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import ProviderFamily
from .model_registry import ModelDescriptor


def _now_millis() -> int:
    return int(time.time() * 1000)


class Message(BaseModel):
    role: Literal["user", "assistant", "system"]
    content: str
    timestamp: int = Field(default_factory=_now_millis)


class ModelMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    display_name: str = Field(alias="displayName")
    description: str
    requires_api_key: bool = Field(alias="requiresApiKey")
    base_url: str | None = Field(default=None, alias="baseUrl")
    max_tokens: int = Field(alias="maxTokens")
    provider_family: ProviderFamily = Field(alias="providerFamily")
    supports_coding: bool = Field(default=True, alias="supportsCoding")

    @classmethod
    def from_descriptor(cls, descriptor: ModelDescriptor) -> "ModelMetadata":
        return cls(
            id=descriptor.identifier.value,
            display_name=descriptor.display_name,
            description=descriptor.description,
            requires_api_key=descriptor.requires_credential,
            base_url=descriptor.base_url,
            max_tokens=descriptor.max_tokens,
            provider_family=descriptor.provider_family,
            supports_coding=descriptor.supports_coding,
        )


class ChatRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    model: str
    messages: list[Message] = Field(min_length=1)
    api_key: str | None = Field(default=None, alias="apiKey")


class ChatResponse(BaseModel):
    message: str
    model: str
    input_tokens: int | None = Field(default=None, serialization_alias="inputTokens")
    output_tokens: int | None = Field(default=None, serialization_alias="outputTokens")
    duration_seconds: float = Field(serialization_alias="durationSeconds")
