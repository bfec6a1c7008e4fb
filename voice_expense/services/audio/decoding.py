import base64
import binascii

from voice_expense.services.ai.errors import AudioDecodeError


def decode_base64_audio(value: str) -> bytes:
    """Decode base64 audio, accepting an optional data-URL prefix ("data:...;base64,")."""
    if "," in value:
        value = value.split(",", 1)[1]
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise AudioDecodeError(f"failed to decode audio: {exc}") from exc
