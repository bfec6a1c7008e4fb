from datetime import date

from pydantic import BaseModel, ConfigDict, Field, computed_field

REVIEW_CONFIDENCE_THRESHOLD = 0.7
FALLBACK_CATEGORY = "Miscellaneous"


class VoiceParseRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    audio_data: bytes = Field(repr=False)
    categories: list[str] = Field(default_factory=list)
    currency: str
    reference_date: date


class ExpenseCandidate(BaseModel):
    name: str
    amount: float
    category: str
    tags: list[str] | None = None
    date: date
    confidence: float = Field(ge=0.0, le=1.0)
    ambiguous: bool = False

    @computed_field
    @property
    def needs_review(self) -> bool:
        return self.confidence < REVIEW_CONFIDENCE_THRESHOLD or self.ambiguous


class VoiceParseResponse(BaseModel):
    expenses: list[ExpenseCandidate] = Field(default_factory=list)
    transcript: str = ""
    needs_review: bool = False


class VoiceReplyExpense(BaseModel):
    """One item of the model's structured reply, before date resolution."""

    model_config = ConfigDict(strict=True, populate_by_name=True)

    name: str
    amount: float
    category: str
    tags: list[str] | None = None
    date_offset: int = Field(alias="dateOffset")
    confidence: float = Field(ge=0.0, le=1.0)
    ambiguous: bool


class VoiceReply(BaseModel):
    model_config = ConfigDict(strict=True)

    transcript: str = ""
    expenses: list[VoiceReplyExpense]
