"""Static model catalog and vendor model-name mapping."""

from dataclasses import dataclass

from .constants import DEFAULT_MAX_TOKENS, ModelIdentifier, ProviderFamily


@dataclass(frozen=True)
class ModelDescriptor:
    identifier: ModelIdentifier
    display_name: str
    description: str
    requires_credential: bool
    provider_family: ProviderFamily
    base_url: str | None = None
    max_tokens: int = DEFAULT_MAX_TOKENS
    supports_coding: bool = True


MODEL_CATALOG: tuple[ModelDescriptor, ...] = (
    # --- OpenAI models ---
    ModelDescriptor(
        ModelIdentifier.OPENAI_GPT4,
        "GPT-4",
        "OpenAI's most capable model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI,
    ),
    ModelDescriptor(
        ModelIdentifier.OPENAI_GPT35,
        "GPT-3.5 Turbo",
        "Fast and efficient OpenAI model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI,
    ),
    # --- Anthropic models ---
    ModelDescriptor(
        ModelIdentifier.CLAUDE_3_OPUS,
        "Claude 3 Opus",
        "Anthropic's most powerful model",
        requires_credential=True,
        provider_family=ProviderFamily.ANTHROPIC,
    ),
    ModelDescriptor(
        ModelIdentifier.CLAUDE_3_SONNET,
        "Claude 3 Sonnet",
        "Balanced performance and speed",
        requires_credential=True,
        provider_family=ProviderFamily.ANTHROPIC,
    ),
    ModelDescriptor(
        ModelIdentifier.CLAUDE_3_HAIKU,
        "Claude 3 Haiku",
        "Fast and lightweight",
        requires_credential=True,
        provider_family=ProviderFamily.ANTHROPIC,
    ),
    # --- Google models ---
    ModelDescriptor(
        ModelIdentifier.GEMINI_PRO,
        "Gemini Pro",
        "Google's advanced AI model",
        requires_credential=True,
        provider_family=ProviderFamily.GOOGLE,
    ),
    ModelDescriptor(
        ModelIdentifier.GEMINI_FLASH,
        "Gemini 1.5 Flash",
        "Fast and efficient Gemini model",
        requires_credential=True,
        provider_family=ProviderFamily.GOOGLE,
    ),
    # --- Listed, no transport yet ---
    ModelDescriptor(
        ModelIdentifier.COHERE_COMMAND,
        "Command",
        "Cohere's command model",
        requires_credential=True,
        provider_family=ProviderFamily.UNWIRED,
    ),
    ModelDescriptor(
        ModelIdentifier.MISTRAL_LARGE,
        "Mistral Large",
        "Mistral's largest model",
        requires_credential=True,
        provider_family=ProviderFamily.UNWIRED,
    ),
    ModelDescriptor(
        ModelIdentifier.MISTRAL_MEDIUM,
        "Mistral Medium",
        "Balanced Mistral model",
        requires_credential=True,
        provider_family=ProviderFamily.UNWIRED,
    ),
    ModelDescriptor(
        ModelIdentifier.LLAMA_70B,
        "Llama 2 70B",
        "Meta's large language model",
        requires_credential=True,
        provider_family=ProviderFamily.UNWIRED,
    ),
    ModelDescriptor(
        ModelIdentifier.CODELLAMA_34B,
        "Code Llama 34B",
        "Specialized for code generation",
        requires_credential=True,
        provider_family=ProviderFamily.UNWIRED,
    ),
    # --- OpenRouter ---
    ModelDescriptor(
        ModelIdentifier.OPENROUTER_AUTO,
        "OpenRouter Auto",
        "Automatically select the best model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENROUTER,
        base_url="https://openrouter.ai",
    ),
    # --- Free OpenAI-compatible models ---
    ModelDescriptor(
        ModelIdentifier.LINGMA,
        "Lingma",
        "Chinese AI model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI_COMPATIBLE_FREE,
    ),
    ModelDescriptor(
        ModelIdentifier.QWEN,
        "Qwen",
        "Alibaba's Qwen model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI_COMPATIBLE_FREE,
    ),
    ModelDescriptor(
        ModelIdentifier.LONGCAT_AI,
        "Longcat AI",
        "Longcat AI model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI_COMPATIBLE_FREE,
    ),
    ModelDescriptor(
        ModelIdentifier.DEEPSEEK,
        "DeepSeek",
        "DeepSeek AI model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI_COMPATIBLE_FREE,
    ),
    ModelDescriptor(
        ModelIdentifier.Z_MODEL,
        "Z Model",
        "Z AI model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI_COMPATIBLE_FREE,
    ),
    ModelDescriptor(
        ModelIdentifier.KIMI,
        "Kimi",
        "Moonshot AI's Kimi model",
        requires_credential=True,
        provider_family=ProviderFamily.OPENAI_COMPATIBLE_FREE,
    ),
)
MODEL_DESCRIPTORS: dict[ModelIdentifier, ModelDescriptor] = {
    descriptor.identifier: descriptor for descriptor in MODEL_CATALOG
}

VENDOR_MODEL_NAMES: dict[ModelIdentifier, str] = {
    ModelIdentifier.OPENAI_GPT4: "gpt-4",
    ModelIdentifier.OPENAI_GPT35: "gpt-3.5-turbo",
    ModelIdentifier.CLAUDE_3_OPUS: "claude-3-opus-20240229",
    ModelIdentifier.CLAUDE_3_SONNET: "claude-3-sonnet-20240229",
    ModelIdentifier.CLAUDE_3_HAIKU: "claude-3-haiku-20240307",
    ModelIdentifier.GEMINI_PRO: "gemini-pro",
    ModelIdentifier.GEMINI_FLASH: "gemini-1.5-flash",
    ModelIdentifier.OPENROUTER_AUTO: "openrouter/auto",
    ModelIdentifier.LINGMA: "lingma",
    ModelIdentifier.QWEN: "qwen",
    ModelIdentifier.LONGCAT_AI: "longcat-ai",
    ModelIdentifier.DEEPSEEK: "deepseek",
    ModelIdentifier.Z_MODEL: "z",
    ModelIdentifier.KIMI: "kimi",
}
FAMILY_DEFAULT_MODEL_NAMES: dict[ProviderFamily, str] = {
    ProviderFamily.OPENAI: "gpt-3.5-turbo",
    ProviderFamily.ANTHROPIC: "claude-3-sonnet-20240229",
    ProviderFamily.GOOGLE: "gemini-pro",
    ProviderFamily.OPENROUTER: "openrouter/auto",
    ProviderFamily.OPENAI_COMPATIBLE_FREE: "unknown",
    ProviderFamily.UNWIRED: "unknown",
}


def describe(identifier: ModelIdentifier) -> ModelDescriptor:
    return MODEL_DESCRIPTORS[identifier]


def list_all() -> tuple[ModelDescriptor, ...]:
    """Return every descriptor in catalog-declaration order."""
    return MODEL_CATALOG


def vendor_model_name(identifier: ModelIdentifier) -> str:
    """Map an identifier to its vendor model string.

    Identifiers missing from the table fall back to their family's default
    model string instead of failing.
    """
    name = VENDOR_MODEL_NAMES.get(identifier)
    if name is not None:
        return name
    return FAMILY_DEFAULT_MODEL_NAMES[describe(identifier).provider_family]
