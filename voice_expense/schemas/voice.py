from pydantic import BaseModel, Field

from voice_expense.services.ai.types import ExpenseCandidate


class VoiceParseHttpRequest(BaseModel):
    audio_data: str = Field(min_length=1, description="Base64 audio, optionally as a data URL")


class VoiceParseHttpResponse(BaseModel):
    expenses: list[ExpenseCandidate]
    transcript: str
    needs_review: bool
