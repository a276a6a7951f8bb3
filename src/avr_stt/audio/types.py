from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

DEFAULT_AUDIO_FORMAT = "audio/x-signed-linear"


@dataclass(slots=True)
class AudioRequest:
    """Raw slin audio supplied by the telephony platform."""

    pcm: bytes
    sample_rate: int
    audio_format: str = DEFAULT_AUDIO_FORMAT

    @property
    def size_kb(self) -> float:
        return len(self.pcm) / 1024


class HeaderStatus(str, Enum):
    ABSENT = "absent"
    INVALID = "invalid"
    VALID = "valid"


@dataclass(slots=True, frozen=True)
class SampleRateHeader:
    status: HeaderStatus
    raw: Optional[str] = None
    value: Optional[int] = None


@dataclass(slots=True, frozen=True)
class IngestRejection:
    """Client input that cannot be processed."""

    status_code: int
    message: str
