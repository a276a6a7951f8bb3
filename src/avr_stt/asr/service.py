from __future__ import annotations

import logging
from typing import Optional

from ..audio import AudioRequest, encode_pcm16_wav
from ..settings import AsrSettings
from .providers.base import AsrProvider
from .providers.elevenlabs import ElevenLabsAsrProvider
from .providers.mock import MockAsrProvider
from .types import AsrFailure, AsrOptions, AsrOutcome, FailureKind

logger = logging.getLogger(__name__)


class AsrService:
    """Runs the encode then transcribe pipeline for a single request."""

    def __init__(self, *, provider: Optional[AsrProvider] = None) -> None:
        self._provider = provider or MockAsrProvider()

    @classmethod
    def from_settings(cls, cfg: AsrSettings) -> "AsrService":
        provider_name = (cfg.provider or "elevenlabs").strip().lower()
        provider: AsrProvider
        if provider_name in {"mock", "fake"}:
            provider = MockAsrProvider()
        elif provider_name == "elevenlabs":
            provider = ElevenLabsAsrProvider(settings=cfg.elevenlabs)
        else:
            raise RuntimeError(f"unsupported ASR provider: {cfg.provider}")
        return cls(provider=provider)

    async def transcribe_request(self, request: AudioRequest) -> AsrOutcome:
        logger.info("transcribe.converting PCM to WAV format")
        try:
            wav = encode_pcm16_wav(request.pcm, request.sample_rate)
        except Exception as exc:
            logger.exception("transcribe.encode_failed")
            return AsrFailure(kind=FailureKind.ENCODING, message=str(exc))
        logger.info("transcribe.converted wav_kb=%.2f", len(wav) / 1024)

        options = AsrOptions(sample_rate=request.sample_rate)
        try:
            return await self._provider.transcribe(audio=wav, options=options)
        except Exception as exc:
            logger.exception("transcribe.provider_failed provider=%s", self._provider.name)
            return AsrFailure(kind=FailureKind.PROVIDER, message=str(exc))

    @property
    def provider(self) -> AsrProvider:
        return self._provider
