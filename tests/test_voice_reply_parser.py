from datetime import date
import json

import pytest

from voice_expense.services.ai.errors import DecodeError
from voice_expense.services.ai.parser_utils import parse_voice_reply

REFERENCE_DATE = date(2024, 6, 15)


def _item(**overrides: object) -> dict[str, object]:
    item: dict[str, object] = {
        "name": "Coffee",
        "amount": -5.5,
        "category": "Food",
        "tags": ["morning"],
        "dateOffset": 0,
        "confidence": 0.95,
        "ambiguous": False,
    }
    item.update(overrides)
    return item


def _reply(*items: dict[str, object], transcript: str = "coffee for five fifty") -> str:
    return json.dumps({"transcript": transcript, "expenses": list(items)})


@pytest.mark.parametrize(
    ("reference", "offset", "expected"),
    [
        (date(2024, 6, 15), -7, date(2024, 6, 8)),
        (date(2024, 6, 15), 0, date(2024, 6, 15)),
        (date(2024, 6, 15), -1, date(2024, 6, 14)),
        (date(2024, 1, 2), -5, date(2023, 12, 28)),
        (date(2024, 3, 1), -1, date(2024, 2, 29)),
    ],
)
def test_date_offset_resolution(reference: date, offset: int, expected: date) -> None:
    result = parse_voice_reply(_reply(_item(dateOffset=offset)), reference)
    assert result.expenses[0].date == expected


def test_items_preserved_in_order_with_sign_and_category() -> None:
    items = [
        _item(name="Coffee", amount=-50, category="Food"),
        _item(name="Groceries", amount=-50, category="Groceries"),
        _item(name="Salary", amount=2500.0, category="Income", tags=None),
    ]
    result = parse_voice_reply(_reply(*items), REFERENCE_DATE)

    assert [e.name for e in result.expenses] == ["Coffee", "Groceries", "Salary"]
    assert [e.amount for e in result.expenses] == [-50.0, -50.0, 2500.0]
    assert [e.category for e in result.expenses] == ["Food", "Groceries", "Income"]
    assert result.expenses[2].tags is None
    assert result.transcript == "coffee for five fifty"


def test_unknown_category_is_left_as_decoded() -> None:
    result = parse_voice_reply(_reply(_item(category="Spaceships")), REFERENCE_DATE)
    assert result.expenses[0].category == "Spaceships"


def test_needs_review_false_when_all_items_confident() -> None:
    result = parse_voice_reply(
        _reply(_item(confidence=0.7), _item(confidence=0.99)),
        REFERENCE_DATE,
    )
    assert result.needs_review is False
    assert all(not e.needs_review for e in result.expenses)


def test_needs_review_set_by_single_low_confidence_item() -> None:
    result = parse_voice_reply(
        _reply(_item(confidence=0.9), _item(confidence=0.69)),
        REFERENCE_DATE,
    )
    assert result.needs_review is True
    assert [e.needs_review for e in result.expenses] == [False, True]


def test_needs_review_set_by_ambiguous_item() -> None:
    result = parse_voice_reply(_reply(_item(ambiguous=True, confidence=0.95)), REFERENCE_DATE)
    assert result.needs_review is True


def test_empty_expense_list_does_not_need_review() -> None:
    result = parse_voice_reply(_reply(transcript="hello there"), REFERENCE_DATE)
    assert result.expenses == []
    assert result.needs_review is False


def test_amount_as_string_is_rejected() -> None:
    with pytest.raises(DecodeError):
        parse_voice_reply(_reply(_item(), _item(amount="-5.50")), REFERENCE_DATE)


@pytest.mark.parametrize(
    "bad_item",
    [
        _item(dateOffset=1.5),
        _item(ambiguous="yes"),
        _item(confidence=1.4),
        {k: v for k, v in _item().items() if k != "amount"},
    ],
)
def test_schema_violations_raise_decode_error(bad_item: dict[str, object]) -> None:
    with pytest.raises(DecodeError):
        parse_voice_reply(_reply(bad_item), REFERENCE_DATE)


def test_malformed_json_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        parse_voice_reply('{"transcript": "x", "expenses": [', REFERENCE_DATE)


def test_fenced_reply_is_accepted() -> None:
    text = "```json\n" + _reply(_item()) + "\n```"
    result = parse_voice_reply(text, REFERENCE_DATE)
    assert len(result.expenses) == 1


def test_out_of_range_offset_raises_decode_error() -> None:
    with pytest.raises(DecodeError):
        parse_voice_reply(_reply(_item(dateOffset=-10_000_000)), date(2024, 6, 15))
