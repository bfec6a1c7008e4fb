from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Voice Expense API"
    app_env: str = "dev"
    log_level: str = "INFO"
    cors_allow_origins: str = "http://localhost:5173"
    ai_enabled: bool = False
    ai_provider: str = "gemini"
    ai_request_timeout_seconds: float = 60.0
    gemini_api_key: SecretStr | None = None
    gemini_model: str = "gemini-2.0-flash"
    openai_api_key: SecretStr | None = None
    openai_model: str = "gpt-4o-mini"
    anthropic_api_key: SecretStr | None = None
    anthropic_model: str = "claude-3-5-haiku-latest"
    expense_categories: str = (
        "Food,Groceries,Travel,Rent,Utilities,Entertainment,Healthcare,Shopping,Miscellaneous"
    )
    default_currency: str = "USD"
    timezone: str = "UTC"
    voice_max_upload_mb: int = 10

    @property
    def cors_origins(self) -> list[str]:
        return [x.strip() for x in self.cors_allow_origins.split(",") if x.strip()]

    @property
    def expense_category_list(self) -> list[str]:
        return [x.strip() for x in self.expense_categories.split(",") if x.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
