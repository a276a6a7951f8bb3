from __future__ import annotations

from ..types import AsrOptions, AsrResult
from .base import AsrProvider


class MockAsrProvider(AsrProvider):
    name = "mock"

    def __init__(self, text: str = "mock transcription") -> None:
        self._text = text

    async def transcribe(self, *, audio: bytes, options: AsrOptions) -> AsrResult:
        return AsrResult(text=self._text, provider=self.name, wav_bytes=len(audio))
