"""Shared constants and enumerated tags for the assistant API."""

from enum import StrEnum

AWS_REGION = "ap-northeast-1"
LANGSMITH_API_KEY_PARAMETER_NAME = "/chat-app/langsmith-api-key"
LANGSMITH_PROJECT = "code-assistant"
CREDENTIAL_PARAMETER_TEMPLATE = "/chat-app/{family}-api-key"

OPENAI_BASE_URL = "https://api.openai.com/v1"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
ANTHROPIC_BASE_URL = "https://api.anthropic.com"
GOOGLE_BASE_URL = "https://generativelanguage.googleapis.com"
ANTHROPIC_VERSION = "2023-06-01"

DEFAULT_MAX_TOKENS = 4096
DEFAULT_TEMPERATURE = 0.7
DEFAULT_REQUEST_TIMEOUT_SECONDS = 60.0
NO_RESPONSE_CONTENT = "No response content"
MODEL_NOT_IMPLEMENTED = "Model not yet implemented"


class ProviderFamily(StrEnum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    OPENROUTER = "openrouter"
    # Listed OpenAI-compatible vendors without dedicated endpoints yet.
    OPENAI_COMPATIBLE_FREE = "openai_compatible_free"
    # Catalog entries with no transport at all.
    UNWIRED = "unwired"


class ModelIdentifier(StrEnum):
    OPENAI_GPT4 = "openai-gpt4"
    OPENAI_GPT35 = "openai-gpt35"
    CLAUDE_3_OPUS = "claude-3-opus"
    CLAUDE_3_SONNET = "claude-3-sonnet"
    CLAUDE_3_HAIKU = "claude-3-haiku"
    GEMINI_PRO = "gemini-pro"
    GEMINI_FLASH = "gemini-flash"
    COHERE_COMMAND = "cohere-command"
    MISTRAL_LARGE = "mistral-large"
    MISTRAL_MEDIUM = "mistral-medium"
    LLAMA_70B = "llama-70b"
    CODELLAMA_34B = "codellama-34b"
    OPENROUTER_AUTO = "openrouter-auto"
    LINGMA = "lingma"
    QWEN = "qwen"
    LONGCAT_AI = "longcat-ai"
    DEEPSEEK = "deepseek"
    Z_MODEL = "z-model"
    KIMI = "kimi"
