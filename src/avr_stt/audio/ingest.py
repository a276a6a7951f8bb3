from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional, Union

from .types import (
    DEFAULT_AUDIO_FORMAT,
    AudioRequest,
    HeaderStatus,
    IngestRejection,
    SampleRateHeader,
)

RAW_CONTENT_TYPE = "application/octet-stream"

EMPTY_AUDIO_MESSAGE = "Empty audio data received."
INVALID_SAMPLE_RATE_MESSAGE = "Missing or invalid X-Sample-Rate header."
PAYLOAD_TOO_LARGE_MESSAGE = "Audio payload too large."

# libsndfile stores the rate as a signed 32-bit int
MAX_SAMPLE_RATE = 2**31 - 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(slots=True)
class IngestLimits:
    max_bytes: int


def parse_sample_rate(raw: Optional[str]) -> SampleRateHeader:
    """Parse an X-Sample-Rate header value without raising.

    Reads the leading integer the way ``parseInt(value, 10)`` does:
    leading whitespace and an optional sign, then ASCII digits. Anything after
    the digits is ignored. The value must be positive and fit a 32-bit int.
    """

    if raw is None or not raw.strip():
        return SampleRateHeader(status=HeaderStatus.ABSENT, raw=raw)
    match = _LEADING_INT.match(raw)
    if match is None:
        return SampleRateHeader(status=HeaderStatus.INVALID, raw=raw)
    value = int(match.group(1))
    if value <= 0 or value > MAX_SAMPLE_RATE:
        return SampleRateHeader(status=HeaderStatus.INVALID, raw=raw)
    return SampleRateHeader(status=HeaderStatus.VALID, raw=raw, value=value)


def is_raw_audio(content_type: Optional[str]) -> bool:
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == RAW_CONTENT_TYPE


class AudioIngestor:
    """Turns inbound /transcribe requests into AudioRequest objects."""

    def __init__(self, *, limits: IngestLimits) -> None:
        self._limits = limits

    @property
    def limits(self) -> IngestLimits:
        return self._limits

    def exceeds_limit(self, size: int) -> bool:
        return size > self._limits.max_bytes

    async def from_bytes(
        self,
        *,
        data: bytes,
        content_type: Optional[str],
        sample_rate: Optional[str],
        audio_format: Optional[str] = None,
    ) -> Union[AudioRequest, IngestRejection]:
        if self.exceeds_limit(len(data)):
            return IngestRejection(status_code=413, message=PAYLOAD_TOO_LARGE_MESSAGE)

        # Bodies of any other media type are never read as audio.
        if not is_raw_audio(content_type):
            data = b""
        if not data:
            return IngestRejection(status_code=400, message=EMPTY_AUDIO_MESSAGE)

        header = parse_sample_rate(sample_rate)
        if header.status is not HeaderStatus.VALID or header.value is None:
            return IngestRejection(status_code=400, message=INVALID_SAMPLE_RATE_MESSAGE)

        return AudioRequest(
            pcm=data,
            sample_rate=header.value,
            audio_format=audio_format or DEFAULT_AUDIO_FORMAT,
        )
