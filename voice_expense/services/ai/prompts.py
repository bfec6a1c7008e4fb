import json
from datetime import date

from voice_expense.services.ai.types import FALLBACK_CATEGORY, REVIEW_CONFIDENCE_THRESHOLD

VOICE_EXPENSE_PROMPT = f"""
You are the voice parser for a personal expense tracker.
Listen to the attached audio, transcribe it, and extract ALL expenses and income mentioned.
Return valid JSON only with this exact root object:
{{
  "transcript": string,
  "expenses": [
    {{
      "name": string,
      "amount": number,
      "category": string,
      "tags": [string],
      "dateOffset": integer,
      "confidence": number,
      "ambiguous": boolean
    }}
  ]
}}

Field rules:
- transcript: the full transcription of what was said.
- name: brief description of the item (e.g. "Coffee", "Lunch", "Gas").
- amount: NEGATIVE for expenses (e.g. -20.50), POSITIVE for income.
- category: MUST be one of known_categories. If none fits, use "{FALLBACK_CATEGORY}".
- tags: optional list of short relevant tags.
- dateOffset: whole days relative to reference_date. 0 = reference_date, negative = days before.
  "yesterday" -> -1, "two days ago" -> -2, "last week" -> -7.
  If no time is mentioned, use 0.
- confidence: 0.0 to 1.0, how certain you are about this item.
- ambiguous: true if the item is unclear and needs user review.

Rules:
- Extract EVERY expense mentioned, including several in one sentence.
- Split compound statements, never merge them: "fifty on coffee and groceries" is TWO expenses.
- Interpret amounts in the given currency.
- If an amount is vague or approximate (e.g. "about fifty"), set ambiguous=true and confidence below {REVIEW_CONFIDENCE_THRESHOLD}.
- If nothing was spent or earned, return an empty expenses list.
"""


def build_voice_prompt(
    categories: list[str],
    currency: str,
    reference_date: date,
) -> str:
    context = (
        f"known_categories: {json.dumps(list(categories))}\n"
        f"currency: {currency}\n"
        f"reference_date: {reference_date.strftime('%Y-%m-%d')}"
    )
    return f"{VOICE_EXPENSE_PROMPT.strip()}\n\n{context}"
