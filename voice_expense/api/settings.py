from fastapi import APIRouter, Depends, HTTPException, status

from voice_expense.api.deps import get_ai_config, get_voice_expense_context
from voice_expense.core.masking import AIProviderConfig
from voice_expense.schemas.settings import (
    AISettingsResponse,
    AISettingsTestResponse,
    AISettingsValidateRequest,
)
from voice_expense.services.ai.errors import (
    ConfigurationError,
    InvocationError,
    ProviderNotImplementedError,
    UnsupportedProviderError,
)
from voice_expense.services.ai.settings_service import ExpenseContext
from voice_expense.services.ai.voice_service import validate_provider_config

router = APIRouter(prefix="/settings", tags=["settings"])


async def _validate_or_raise(provider: str, api_key: str, model: str) -> AISettingsTestResponse:
    try:
        await validate_provider_config(provider, api_key, model)
    except (ConfigurationError, UnsupportedProviderError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ProviderNotImplementedError as exc:
        raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=str(exc)) from exc
    except InvocationError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Connection test failed: {exc}",
        ) from exc
    return AISettingsTestResponse(
        success=True,
        provider=provider,
        model=model,
        message="Connection successful",
    )


@router.get("/ai", response_model=AISettingsResponse)
async def get_ai_settings(
    config: AIProviderConfig = Depends(get_ai_config),
    context: ExpenseContext = Depends(get_voice_expense_context),
) -> AISettingsResponse:
    public = config.masked()
    return AISettingsResponse(
        **public.model_dump(),
        categories=context.categories,
        currency=context.currency,
    )


@router.put("/ai", response_model=AISettingsResponse)
async def update_ai_settings() -> AISettingsResponse:
    raise HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=(
            "AI settings are managed by server environment variables. "
            "Update the .env values and restart the API."
        ),
    )


@router.post("/ai/test", response_model=AISettingsTestResponse)
async def test_ai_settings(
    config: AIProviderConfig = Depends(get_ai_config),
) -> AISettingsTestResponse:
    api_key = config.api_key.get_secret_value()
    if not api_key:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="API key not configured",
        )
    return await _validate_or_raise(config.provider, api_key, config.model)


@router.post("/ai/validate", response_model=AISettingsTestResponse)
async def validate_ai_settings(payload: AISettingsValidateRequest) -> AISettingsTestResponse:
    return await _validate_or_raise(payload.provider, payload.api_key, payload.model)
