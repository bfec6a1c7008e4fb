from pydantic import BaseModel, ConfigDict, SecretStr

MASKED_PLACEHOLDER = "***"


def mask_secret(value: str | None) -> str:
    """Show only the first and last four characters of a secret."""
    if not value or len(value) <= 8:
        return MASKED_PLACEHOLDER
    return f"{value[:4]}...{value[-4:]}"


class AIConfigPublic(BaseModel):
    enabled: bool
    provider: str
    api_key: str
    model: str
    has_api_key: bool


class AIProviderConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    provider: str = ""
    api_key: SecretStr = SecretStr("")
    model: str = ""

    def masked(self) -> AIConfigPublic:
        raw_key = self.api_key.get_secret_value()
        return AIConfigPublic(
            enabled=self.enabled,
            provider=self.provider,
            api_key=mask_secret(raw_key),
            model=self.model,
            has_api_key=bool(raw_key),
        )
