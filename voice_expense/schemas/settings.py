from pydantic import BaseModel, Field


class AISettingsResponse(BaseModel):
    enabled: bool
    provider: str
    api_key: str
    model: str
    has_api_key: bool
    categories: list[str]
    currency: str


class AISettingsValidateRequest(BaseModel):
    provider: str = Field(min_length=1, max_length=32)
    api_key: str = Field(min_length=1, max_length=512, repr=False)
    model: str = Field(default="", max_length=120)


class AISettingsTestResponse(BaseModel):
    success: bool
    provider: str
    model: str
    message: str
