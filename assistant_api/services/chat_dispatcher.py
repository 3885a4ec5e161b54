"""Entry point that routes a conversation to the right provider client."""

import logging
from collections.abc import Mapping, Sequence

from assistant_api.constants import MODEL_NOT_IMPLEMENTED, ModelIdentifier, ProviderFamily
from assistant_api.errors import ErrorKind
from assistant_api.model_registry import ModelDescriptor, describe, list_all
from assistant_api.providers.base import ChatProvider
from assistant_api.results import Failure, NormalizedResult
from assistant_api.schemas import Message

logger = logging.getLogger(__name__)


def resolve_transport_family(family: ProviderFamily) -> ProviderFamily | None:
    """Return the family whose client and credential serve ``family``.

    Free OpenAI-compatible models have no dedicated endpoints yet and share
    the OpenAI transport and credential. ``None`` means nothing can serve it.
    """
    match family:
        case ProviderFamily.OPENAI | ProviderFamily.OPENAI_COMPATIBLE_FREE:
            return ProviderFamily.OPENAI
        case ProviderFamily.ANTHROPIC | ProviderFamily.GOOGLE | ProviderFamily.OPENROUTER:
            return family
        case ProviderFamily.UNWIRED:
            return None


def parse_model_identifier(model: ModelIdentifier | str) -> ModelIdentifier | None:
    try:
        return ModelIdentifier(model)
    except ValueError:
        return None


class ChatDispatcher:
    def __init__(self, providers: Mapping[ProviderFamily, ChatProvider]) -> None:
        self._providers = providers

    def list_available_models(self) -> tuple[ModelDescriptor, ...]:
        return list_all()

    async def send(
        self,
        model: ModelIdentifier | str,
        credential: str,
        conversation: Sequence[Message],
    ) -> NormalizedResult:
        """Send ``conversation`` to ``model`` and return a normalized result.

        Never raises: unknown models yield a ``NotImplemented`` failure without
        any network call, and anything raised along the way becomes an
        ``Unknown`` failure.
        """
        identifier = parse_model_identifier(model)
        if identifier is None:
            logger.warning("Chat request for unknown model", extra={"model": str(model)})
            return Failure(ErrorKind.NOT_IMPLEMENTED, MODEL_NOT_IMPLEMENTED)

        descriptor = describe(identifier)
        transport_family = resolve_transport_family(descriptor.provider_family)
        provider = self._providers.get(transport_family) if transport_family is not None else None
        if provider is None:
            logger.warning(
                "Chat request for model without transport",
                extra={"model": identifier.value, "family": descriptor.provider_family.value},
            )
            return Failure(ErrorKind.NOT_IMPLEMENTED, MODEL_NOT_IMPLEMENTED)

        if descriptor.provider_family is ProviderFamily.OPENAI_COMPATIBLE_FREE:
            logger.warning(
                "Routing free model through the OpenAI transport",
                extra={"model": identifier.value},
            )

        logger.info(
            "Chat request received",
            extra={
                "model": identifier.value,
                "family": descriptor.provider_family.value,
                "message_count": len(conversation),
            },
        )
        try:
            return await provider.send(
                identifier, credential, conversation, max_tokens=descriptor.max_tokens
            )
        except Exception as exc:
            logger.exception("Provider call raised", extra={"model": identifier.value})
            return Failure(ErrorKind.UNKNOWN, str(exc) or type(exc).__name__)
