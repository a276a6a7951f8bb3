from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(slots=True)
class AsrOptions:
    sample_rate: Optional[int] = None
    content_type: str = "audio/wav"
    filename: str = "audio.wav"


@dataclass(slots=True)
class AsrResult:
    text: str
    provider: Optional[str] = None
    wav_bytes: Optional[int] = None


class FailureKind(str, Enum):
    ENCODING = "encoding"
    PROVIDER = "provider"


@dataclass(slots=True)
class AsrFailure:
    kind: FailureKind
    message: str


AsrOutcome = Union[AsrResult, AsrFailure]
