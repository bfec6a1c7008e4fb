from abc import ABC, abstractmethod

from voice_expense.services.ai.types import VoiceParseRequest, VoiceParseResponse


class VoiceExpenseProvider(ABC):
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError

    @abstractmethod
    async def parse_voice_expense(self, request: VoiceParseRequest) -> VoiceParseResponse:
        raise NotImplementedError

    @abstractmethod
    async def validate_config(self, api_key: str, model: str) -> None:
        """Check credentials and connectivity without generating content."""
        raise NotImplementedError
