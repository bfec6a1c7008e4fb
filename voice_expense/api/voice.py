import logging
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status

from voice_expense.api.deps import get_ai_config, get_today, get_voice_expense_context
from voice_expense.core.config import get_settings
from voice_expense.core.masking import AIProviderConfig
from voice_expense.schemas.voice import VoiceParseHttpRequest, VoiceParseHttpResponse
from voice_expense.services.ai.errors import (
    AudioDecodeError,
    ConfigurationError,
    DecodeError,
    InvocationError,
    ProviderNotImplementedError,
    UnsupportedProviderError,
)
from voice_expense.services.ai.settings_service import ExpenseContext
from voice_expense.services.ai.voice_service import parse_voice_expense
from voice_expense.services.audio.decoding import decode_base64_audio

router = APIRouter(prefix="/voice", tags=["voice"])
settings = get_settings()
logger = logging.getLogger(__name__)


@router.post("/parse", response_model=VoiceParseHttpResponse)
async def parse_voice(
    payload: VoiceParseHttpRequest,
    config: AIProviderConfig = Depends(get_ai_config),
    context: ExpenseContext = Depends(get_voice_expense_context),
    today: date = Depends(get_today),
) -> VoiceParseHttpResponse:
    try:
        audio_bytes = decode_base64_audio(payload.audio_data)
    except AudioDecodeError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    if not audio_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Audio data is required",
        )

    max_upload_bytes = max(0, settings.voice_max_upload_mb) * 1024 * 1024
    if len(audio_bytes) > max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_413_CONTENT_TOO_LARGE,
            detail=f"Audio is too large. Limit is {settings.voice_max_upload_mb} MB.",
        )

    try:
        result = await parse_voice_expense(
            config,
            audio_data=audio_bytes,
            categories=context.categories,
            currency=context.currency,
            today=today,
        )
    except (ConfigurationError, UnsupportedProviderError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except ProviderNotImplementedError as exc:
        raise HTTPException(status_code=status.HTTP_501_NOT_IMPLEMENTED, detail=str(exc)) from exc
    except (InvocationError, DecodeError) as exc:
        logger.error("Failed to parse voice input: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to parse voice: {exc}",
        ) from exc

    return VoiceParseHttpResponse(
        expenses=result.expenses,
        transcript=result.transcript,
        needs_review=result.needs_review,
    )
