"""ASR provider implementations."""

from .base import AsrProvider
from .elevenlabs import ElevenLabsAsrProvider
from .mock import MockAsrProvider

__all__ = [
    "AsrProvider",
    "ElevenLabsAsrProvider",
    "MockAsrProvider",
]
