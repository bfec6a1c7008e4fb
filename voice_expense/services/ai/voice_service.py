import logging
from datetime import date

from voice_expense.core.masking import AIProviderConfig
from voice_expense.services.ai.provider_factory import (
    get_configured_voice_expense_provider,
    get_voice_expense_provider,
)
from voice_expense.services.ai.types import VoiceParseRequest, VoiceParseResponse

logger = logging.getLogger(__name__)


async def parse_voice_expense(
    config: AIProviderConfig,
    audio_data: bytes,
    categories: list[str],
    currency: str,
    today: date,
) -> VoiceParseResponse:
    """
    Turn one voice recording into expense candidates.

    Selects the configured provider, then runs prompt -> model -> normalization
    as a single call. Errors from any stage propagate unchanged.
    """
    provider = get_configured_voice_expense_provider(config)
    request = VoiceParseRequest(
        audio_data=audio_data,
        categories=categories,
        currency=currency,
        reference_date=today,
    )
    response = await provider.parse_voice_expense(request)
    logger.info(
        "Parsed %d expense(s) from voice input via %s (needs_review=%s)",
        len(response.expenses),
        provider.name(),
        response.needs_review,
    )
    return response


async def validate_provider_config(provider: str, api_key: str, model: str) -> None:
    parser = get_voice_expense_provider(provider, api_key, model)
    await parser.validate_config(api_key, model)
    logger.info("Validated %s configuration for model %s", parser.name(), model or "default")
