from pydantic import SecretStr

from voice_expense.core.config import get_settings
from voice_expense.core.masking import AIProviderConfig

settings = get_settings()


class ExpenseContext:
    def __init__(self, categories: list[str], currency: str, timezone: str):
        self.categories = categories
        self.currency = currency
        self.timezone = timezone


def _default_model_for(provider: str) -> str:
    if provider == "gemini":
        return settings.gemini_model
    if provider == "openai":
        return settings.openai_model
    if provider == "anthropic":
        return settings.anthropic_model
    return ""


def _default_api_key_for(provider: str) -> SecretStr | None:
    if provider == "gemini":
        return settings.gemini_api_key
    if provider == "openai":
        return settings.openai_api_key
    if provider == "anthropic":
        return settings.anthropic_api_key
    return None


def get_env_runtime_config() -> AIProviderConfig:
    provider = settings.ai_provider.lower().strip()
    api_key = _default_api_key_for(provider)
    return AIProviderConfig(
        enabled=settings.ai_enabled,
        provider=provider,
        api_key=SecretStr(api_key.get_secret_value().strip() if api_key else ""),
        model=_default_model_for(provider).strip(),
    )


def get_expense_context() -> ExpenseContext:
    return ExpenseContext(
        categories=settings.expense_category_list,
        currency=settings.default_currency.strip().upper() or "USD",
        timezone=settings.timezone.strip() or "UTC",
    )
