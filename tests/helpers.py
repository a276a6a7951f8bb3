"""Builders and stubs shared by the unit tests."""

from __future__ import annotations

import struct
from typing import Optional

from avr_stt.asr.providers.base import AsrProvider
from avr_stt.asr.types import AsrOptions, AsrResult
from avr_stt.settings import AsrSettings, ElevenLabsSettings, ServerSettings, Settings


def make_settings(
    *,
    provider: str = "elevenlabs",
    api_key: Optional[str] = "test-key",
    max_body_bytes: int = 50 * 1024 * 1024,
) -> Settings:
    return Settings(
        server=ServerSettings(host="127.0.0.1", port=6022, max_body_bytes=max_body_bytes, log_level="INFO"),
        asr=AsrSettings(
            provider=provider,
            elevenlabs=ElevenLabsSettings(api_key=api_key, model_id="scribe_v1", language_code="en"),
        ),
    )


def pcm16(samples) -> bytes:
    return struct.pack(f"<{len(samples)}h", *samples)


class StubAsrProvider(AsrProvider):
    name = "stub"

    def __init__(self, text: Optional[str] = "hello world", error: Optional[Exception] = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[tuple[bytes, AsrOptions]] = []

    async def transcribe(self, *, audio: bytes, options: AsrOptions) -> AsrResult:
        self.calls.append((audio, options))
        if self.error is not None:
            raise self.error
        return AsrResult(text=self.text, provider=self.name, wav_bytes=len(audio))
