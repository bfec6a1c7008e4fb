class VoiceParseError(RuntimeError):
    """Base class for failures of the voice-to-expense pipeline."""


class ConfigurationError(VoiceParseError):
    """Raised when AI is disabled or credentials/provider config are missing or invalid."""


class UnsupportedProviderError(VoiceParseError):
    """Raised for a provider identifier that is not known at all."""


class ProviderNotImplementedError(VoiceParseError, NotImplementedError):
    """Raised for a known provider that has no working implementation yet."""


class InvocationError(VoiceParseError):
    """Raised when the remote model call fails or returns an unusable envelope."""


class DecodeError(VoiceParseError):
    """Raised when the model's structured reply does not match the expected schema."""


class AudioDecodeError(VoiceParseError):
    """Raised when inbound audio is not valid base64."""
