from datetime import date, timedelta

from pydantic import ValidationError

from voice_expense.services.ai.errors import DecodeError
from voice_expense.services.ai.types import (
    ExpenseCandidate,
    VoiceParseResponse,
    VoiceReply,
)


def _extract_first_json_block(text: str) -> str:
    text = text.strip()
    if text.startswith("{") and text.endswith("}"):
        return text
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return text
    return text[start : end + 1]


def _resolve_date(reference_date: date, offset: int) -> date:
    try:
        return reference_date + timedelta(days=offset)
    except OverflowError as exc:
        raise DecodeError(
            f"dateOffset {offset} is out of range for reference date {reference_date}"
        ) from exc


def parse_voice_reply(text: str, reference_date: date) -> VoiceParseResponse:
    """Decode the model's JSON reply and resolve day offsets against reference_date."""
    candidate = _extract_first_json_block(text)
    try:
        reply = VoiceReply.model_validate_json(candidate)
    except ValidationError as exc:
        raise DecodeError(f"failed to parse model response: {exc}") from exc

    expenses: list[ExpenseCandidate] = []
    for item in reply.expenses:
        expenses.append(
            ExpenseCandidate(
                name=item.name,
                amount=item.amount,
                category=item.category,
                tags=item.tags,
                date=_resolve_date(reference_date, item.date_offset),
                confidence=item.confidence,
                ambiguous=item.ambiguous,
            )
        )

    return VoiceParseResponse(
        expenses=expenses,
        transcript=reply.transcript,
        needs_review=any(expense.needs_review for expense in expenses),
    )
