from enum import Enum

from voice_expense.core.masking import AIProviderConfig
from voice_expense.services.ai.base import VoiceExpenseProvider
from voice_expense.services.ai.errors import (
    ConfigurationError,
    ProviderNotImplementedError,
    UnsupportedProviderError,
)
from voice_expense.services.ai.gemini_provider import GeminiVoiceExpenseProvider


class ProviderType(str, Enum):
    GEMINI = "gemini"
    ANTHROPIC = "anthropic"
    OPENAI = "openai"


def _provider_type_for(provider: str) -> ProviderType:
    try:
        return ProviderType((provider or "").strip().lower())
    except ValueError as exc:
        raise UnsupportedProviderError(f"unsupported provider: {provider}") from exc


def get_voice_expense_provider(
    provider: str,
    api_key: str,
    model: str,
) -> VoiceExpenseProvider:
    provider_type = _provider_type_for(provider)
    if provider_type == ProviderType.GEMINI:
        return GeminiVoiceExpenseProvider(api_key=api_key, model=model)
    raise ProviderNotImplementedError(
        f"{provider_type.value} provider not yet implemented"
    )


def get_configured_voice_expense_provider(config: AIProviderConfig) -> VoiceExpenseProvider:
    if not config.enabled:
        raise ConfigurationError(
            "AI features are not enabled. Please configure AI settings first."
        )
    if not config.provider.strip():
        raise ConfigurationError("AI provider is not configured")
    api_key = config.api_key.get_secret_value()
    if not api_key.strip():
        raise ConfigurationError("AI API key not configured")
    return get_voice_expense_provider(config.provider, api_key, config.model)
