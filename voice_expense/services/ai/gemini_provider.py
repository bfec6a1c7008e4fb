import base64
import logging

import httpx

from voice_expense.core.config import get_settings
from voice_expense.services.ai.base import VoiceExpenseProvider
from voice_expense.services.ai.errors import ConfigurationError, InvocationError
from voice_expense.services.ai.parser_utils import parse_voice_reply
from voice_expense.services.ai.prompts import build_voice_prompt
from voice_expense.services.ai.types import VoiceParseRequest, VoiceParseResponse

logger = logging.getLogger(__name__)

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
# MediaRecorder in browsers produces webm/opus
AUDIO_MIME_TYPE = "audio/webm"
PARSE_TEMPERATURE = 0.2


def _upstream_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return ""
    if not isinstance(payload, dict):
        return ""
    error = payload.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str):
            return message.strip()
    return ""


def _first_text_part(data: object) -> str:
    if not isinstance(data, dict):
        raise InvocationError("unexpected response format from gemini")

    candidates = data.get("candidates")
    if not isinstance(candidates, list) or not candidates:
        message = "no response from gemini"
        feedback = data.get("promptFeedback")
        if isinstance(feedback, dict) and feedback.get("blockReason"):
            message += f" (blocked: {feedback['blockReason']})"
        raise InvocationError(message)

    first = candidates[0] if isinstance(candidates[0], dict) else {}
    content = first.get("content")
    parts = content.get("parts") if isinstance(content, dict) else None
    if not isinstance(parts, list) or not parts:
        raise InvocationError("no response from gemini")

    text = parts[0].get("text") if isinstance(parts[0], dict) else None
    if not isinstance(text, str):
        raise InvocationError("unexpected response format")
    return text


class GeminiVoiceExpenseProvider(VoiceExpenseProvider):
    def __init__(self, api_key: str, model: str):
        if not api_key or not api_key.strip():
            raise ConfigurationError("gemini API key is required")
        self.api_key = api_key.strip()
        self.model = model.strip() if model and model.strip() else DEFAULT_GEMINI_MODEL

    def name(self) -> str:
        return "gemini"

    def _timeout(self) -> httpx.Timeout:
        return httpx.Timeout(get_settings().ai_request_timeout_seconds, connect=10.0)

    async def parse_voice_expense(self, request: VoiceParseRequest) -> VoiceParseResponse:
        prompt = build_voice_prompt(
            categories=request.categories,
            currency=request.currency,
            reference_date=request.reference_date,
        )
        payload = {
            "contents": [
                {
                    "role": "user",
                    "parts": [
                        {"text": prompt},
                        {
                            "inline_data": {
                                "mime_type": AUDIO_MIME_TYPE,
                                "data": base64.b64encode(request.audio_data).decode("ascii"),
                            }
                        },
                    ],
                }
            ],
            "generationConfig": {
                "temperature": PARSE_TEMPERATURE,
                "responseMimeType": "application/json",
            },
        }
        endpoint = f"{GEMINI_API_BASE_URL}/models/{self.model}:generateContent"
        headers = {"x-goog-api-key": self.api_key}

        try:
            async with httpx.AsyncClient(timeout=self._timeout()) as client:
                response = await client.post(endpoint, json=payload, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = f"gemini request failed with status {exc.response.status_code}."
            detail = _upstream_detail(exc.response)
            if detail:
                message += f" {detail}"
            logger.warning(
                "Gemini generateContent failed: model=%s status=%s",
                self.model,
                exc.response.status_code,
            )
            raise InvocationError(message) from exc
        except httpx.HTTPError as exc:
            logger.warning(
                "Gemini generateContent unreachable: model=%s error=%s",
                self.model,
                type(exc).__name__,
            )
            raise InvocationError(f"could not reach gemini: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise InvocationError("gemini returned an invalid response.") from exc

        return parse_voice_reply(_first_text_part(data), request.reference_date)

    async def validate_config(self, api_key: str, model: str) -> None:
        if not api_key or not api_key.strip():
            raise ConfigurationError("API key is required")
        model_name = model.strip() if model and model.strip() else self.model
        endpoint = f"{GEMINI_API_BASE_URL}/models/{model_name}"
        headers = {"x-goog-api-key": api_key.strip()}

        try:
            async with httpx.AsyncClient(timeout=httpx.Timeout(15.0, connect=10.0)) as client:
                response = await client.get(endpoint, headers=headers)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            detail = _upstream_detail(exc.response) or f"status {status_code}"
            if status_code in (400, 401, 403):
                raise ConfigurationError(f"invalid API key: {detail}") from exc
            if status_code == 404:
                raise ConfigurationError(f"unknown gemini model '{model_name}': {detail}") from exc
            raise InvocationError(f"gemini validation failed: {detail}") from exc
        except httpx.HTTPError as exc:
            raise InvocationError(f"could not reach gemini: {exc}") from exc
