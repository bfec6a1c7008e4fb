from datetime import date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import Depends

from voice_expense.core.masking import AIProviderConfig
from voice_expense.services.ai.settings_service import (
    ExpenseContext,
    get_env_runtime_config,
    get_expense_context,
)


def _today_for_timezone(timezone_name: str) -> date:
    try:
        return datetime.now(ZoneInfo(timezone_name)).date()
    except (ZoneInfoNotFoundError, ValueError):
        return date.today()


async def get_ai_config() -> AIProviderConfig:
    return get_env_runtime_config()


async def get_voice_expense_context() -> ExpenseContext:
    return get_expense_context()


async def get_today(
    context: ExpenseContext = Depends(get_voice_expense_context),
) -> date:
    return _today_for_timezone(context.timezone)
