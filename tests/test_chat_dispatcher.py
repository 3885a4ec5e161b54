import json
import unittest
from collections.abc import Sequence

import httpx

from assistant_api.constants import DEFAULT_MAX_TOKENS, ModelIdentifier, ProviderFamily
from assistant_api.errors import ErrorKind
from assistant_api.message_mappers import to_openai_request
from assistant_api.model_registry import list_all
from assistant_api.providers.openai_provider import OpenAICompatibleChatProvider
from assistant_api.results import Failure, NormalizedResult, Success
from assistant_api.schemas import Message
from assistant_api.services.chat_dispatcher import ChatDispatcher, resolve_transport_family


class StubProvider:
    def __init__(
        self, result: NormalizedResult | None = None, error: Exception | None = None
    ) -> None:
        self._result = result or Success("ok")
        self._error = error
        self.calls: list[tuple[ModelIdentifier, str, Sequence[Message], int]] = []

    async def send(
        self,
        identifier: ModelIdentifier,
        credential: str,
        conversation: Sequence[Message],
        max_tokens: int = DEFAULT_MAX_TOKENS,
    ) -> NormalizedResult:
        self.calls.append((identifier, credential, conversation, max_tokens))
        if self._error is not None:
            raise self._error
        return self._result


class ChatDispatcherTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self) -> None:
        self.conversation = [Message(role="user", content="2+2?")]
        self.providers = {
            ProviderFamily.OPENAI: StubProvider(Success("from openai")),
            ProviderFamily.ANTHROPIC: StubProvider(Success("from anthropic")),
            ProviderFamily.GOOGLE: StubProvider(Success("from google")),
            ProviderFamily.OPENROUTER: StubProvider(Success("from openrouter")),
        }
        self.dispatcher = ChatDispatcher(providers=self.providers)

    def _total_calls(self) -> int:
        return sum(len(provider.calls) for provider in self.providers.values())

    async def test_routes_each_family_to_its_provider(self) -> None:
        cases = {
            ModelIdentifier.OPENAI_GPT4: "from openai",
            ModelIdentifier.CLAUDE_3_OPUS: "from anthropic",
            ModelIdentifier.GEMINI_PRO: "from google",
            ModelIdentifier.OPENROUTER_AUTO: "from openrouter",
        }
        for identifier, expected in cases.items():
            with self.subTest(identifier=identifier):
                result = await self.dispatcher.send(identifier, "key", self.conversation)
                self.assertEqual(result, Success(expected))

    async def test_passes_identifier_credential_and_conversation(self) -> None:
        await self.dispatcher.send(ModelIdentifier.CLAUDE_3_HAIKU, "ant-key", self.conversation)

        identifier, credential, conversation, max_tokens = self.providers[
            ProviderFamily.ANTHROPIC
        ].calls[0]
        self.assertIs(identifier, ModelIdentifier.CLAUDE_3_HAIKU)
        self.assertEqual(credential, "ant-key")
        self.assertIs(conversation, self.conversation)
        self.assertEqual(max_tokens, 4096)

    async def test_accepts_identifier_strings(self) -> None:
        result = await self.dispatcher.send("gemini-flash", "g-key", self.conversation)

        self.assertEqual(result, Success("from google"))

    async def test_free_models_use_openai_provider(self) -> None:
        for identifier in (ModelIdentifier.QWEN, ModelIdentifier.KIMI, ModelIdentifier.Z_MODEL):
            with self.subTest(identifier=identifier):
                result = await self.dispatcher.send(identifier, "sk-test", self.conversation)
                self.assertEqual(result, Success("from openai"))

        called = [call[0] for call in self.providers[ProviderFamily.OPENAI].calls]
        self.assertEqual(
            called, [ModelIdentifier.QWEN, ModelIdentifier.KIMI, ModelIdentifier.Z_MODEL]
        )

    async def test_unknown_identifier_is_not_implemented_without_calls(self) -> None:
        result = await self.dispatcher.send("gpt-99-ultra", "key", self.conversation)

        self.assertEqual(result, Failure(ErrorKind.NOT_IMPLEMENTED, "Model not yet implemented"))
        self.assertEqual(self._total_calls(), 0)

    async def test_unwired_identifier_is_not_implemented_without_calls(self) -> None:
        result = await self.dispatcher.send(
            ModelIdentifier.MISTRAL_LARGE, "key", self.conversation
        )

        self.assertEqual(result, Failure(ErrorKind.NOT_IMPLEMENTED, "Model not yet implemented"))
        self.assertEqual(self._total_calls(), 0)

    async def test_missing_provider_is_not_implemented(self) -> None:
        dispatcher = ChatDispatcher(providers={})

        result = await dispatcher.send(ModelIdentifier.OPENAI_GPT4, "key", self.conversation)

        self.assertEqual(result.kind, ErrorKind.NOT_IMPLEMENTED)

    async def test_provider_exception_becomes_unknown_failure(self) -> None:
        providers = {ProviderFamily.GOOGLE: StubProvider(error=RuntimeError("boom"))}
        dispatcher = ChatDispatcher(providers=providers)

        result = await dispatcher.send(ModelIdentifier.GEMINI_PRO, "key", self.conversation)

        self.assertEqual(result, Failure(ErrorKind.UNKNOWN, "boom"))

    async def test_provider_failure_result_is_returned_unchanged(self) -> None:
        failure = Failure(ErrorKind.API_ERROR, "status=401 message=Unauthorized")
        dispatcher = ChatDispatcher(providers={ProviderFamily.OPENAI: StubProvider(failure)})

        result = await dispatcher.send(ModelIdentifier.OPENAI_GPT35, "key", self.conversation)

        self.assertIs(result, failure)

    def test_list_available_models_matches_catalog(self) -> None:
        self.assertEqual(self.dispatcher.list_available_models(), list_all())
        self.assertEqual(
            self.dispatcher.list_available_models(), self.dispatcher.list_available_models()
        )


class ChatDispatcherTransportTests(unittest.IsolatedAsyncioTestCase):
    """End-to-end through the real OpenAI-compatible client with a stubbed transport."""

    def setUp(self) -> None:
        self.requests: list[httpx.Request] = []

    def _dispatcher(self, handler) -> ChatDispatcher:
        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        provider = OpenAICompatibleChatProvider(
            name="openai",
            base_url="https://api.openai.com/v1",
            translate=to_openai_request,
            transport=httpx.MockTransport(record),
        )
        return ChatDispatcher(providers={ProviderFamily.OPENAI: provider})

    async def test_openai_gpt4_success(self) -> None:
        dispatcher = self._dispatcher(
            lambda request: httpx.Response(200, json={"choices": [{"message": {"content": "4"}}]})
        )

        result = await dispatcher.send(
            ModelIdentifier.OPENAI_GPT4, "sk-test", [Message(role="user", content="2+2?")]
        )

        self.assertEqual(result, Success("4"))
        self.assertEqual(len(self.requests), 1)

    async def test_free_model_hits_openai_endpoint_with_vendor_model(self) -> None:
        body = {"choices": [{"message": {"content": "ni hao"}}]}
        dispatcher = self._dispatcher(lambda request: httpx.Response(200, json=body))

        result = await dispatcher.send(
            ModelIdentifier.DEEPSEEK, "sk-test", [Message(role="user", content="hello")]
        )

        self.assertEqual(result, Success("ni hao"))
        request = self.requests[0]
        self.assertEqual(request.url.host, "api.openai.com")
        self.assertEqual(request.headers["authorization"], "Bearer sk-test")
        self.assertEqual(json.loads(request.content)["model"], "deepseek")

    async def test_unknown_model_performs_no_network_call(self) -> None:
        dispatcher = self._dispatcher(lambda request: httpx.Response(200, json={}))

        result = await dispatcher.send("not-a-model", "sk-test", [])

        self.assertEqual(result.kind, ErrorKind.NOT_IMPLEMENTED)
        self.assertEqual(len(self.requests), 0)

    async def test_transport_failure_becomes_unknown_failure(self) -> None:
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        dispatcher = self._dispatcher(refuse)

        result = await dispatcher.send(
            ModelIdentifier.OPENAI_GPT4, "sk-test", [Message(role="user", content="hi")]
        )

        self.assertIsInstance(result, Failure)
        self.assertEqual(result.kind, ErrorKind.UNKNOWN)
        self.assertEqual(len(self.requests), 1)


class ResolveTransportFamilyTests(unittest.TestCase):
    def test_every_family_resolves(self) -> None:
        self.assertEqual(
            resolve_transport_family(ProviderFamily.OPENAI_COMPATIBLE_FREE), ProviderFamily.OPENAI
        )
        self.assertEqual(
            resolve_transport_family(ProviderFamily.OPENROUTER), ProviderFamily.OPENROUTER
        )
        self.assertIsNone(resolve_transport_family(ProviderFamily.UNWIRED))
        for family in ProviderFamily:
            with self.subTest(family=family):
                resolved = resolve_transport_family(family)
                self.assertTrue(resolved is None or isinstance(resolved, ProviderFamily))


if __name__ == "__main__":
    unittest.main()
