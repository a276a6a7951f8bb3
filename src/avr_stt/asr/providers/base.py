from __future__ import annotations

import abc

from ..types import AsrOptions, AsrResult


class AsrProvider(abc.ABC):
    """Interface for ASR providers."""

    name: str

    @abc.abstractmethod
    async def transcribe(self, *, audio: bytes, options: AsrOptions) -> AsrResult:
        """Transcribe a complete WAV payload, raising on failure."""
        raise NotImplementedError
