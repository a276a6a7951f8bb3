from __future__ import annotations

from typing import Any, Optional

from elevenlabs.client import AsyncElevenLabs

from ...settings import ElevenLabsSettings
from ..types import AsrOptions, AsrResult
from .base import AsrProvider


class ElevenLabsAsrProvider(AsrProvider):
    """ASR provider backed by the ElevenLabs speech-to-text API."""

    name = "elevenlabs"

    def __init__(self, *, settings: ElevenLabsSettings, client: Optional[Any] = None) -> None:
        if not settings.api_key and client is None:
            raise RuntimeError("ELEVENLABS_API_KEY must be set to use ElevenLabsAsrProvider")
        self._settings = settings
        self._client = client or AsyncElevenLabs(api_key=settings.api_key)

    @property
    def settings(self) -> ElevenLabsSettings:
        return self._settings

    async def transcribe(self, *, audio: bytes, options: AsrOptions) -> AsrResult:
        cfg = self._settings
        response = await self._client.speech_to_text.convert(
            file=(options.filename, audio, options.content_type),
            model_id=cfg.model_id,
            language_code=cfg.language_code,
            num_speakers=cfg.num_speakers,
            tag_audio_events=cfg.tag_audio_events,
            timestamps_granularity=cfg.timestamps_granularity,
        )
        text = getattr(response, "text", None) or ""
        return AsrResult(text=text, provider=self.name, wav_bytes=len(audio))
