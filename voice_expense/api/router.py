from fastapi import APIRouter

from voice_expense.api.settings import router as settings_router
from voice_expense.api.voice import router as voice_router

api_router = APIRouter()
api_router.include_router(settings_router)
api_router.include_router(voice_router)
