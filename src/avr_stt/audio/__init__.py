"""Audio ingestion and WAV encoding."""

from .encoder import encode_pcm16_wav, pcm16_to_float
from .ingest import AudioIngestor, IngestLimits, parse_sample_rate
from .types import (
    DEFAULT_AUDIO_FORMAT,
    AudioRequest,
    HeaderStatus,
    IngestRejection,
    SampleRateHeader,
)

__all__ = [
    "AudioIngestor",
    "IngestLimits",
    "parse_sample_rate",
    "encode_pcm16_wav",
    "pcm16_to_float",
    "AudioRequest",
    "HeaderStatus",
    "IngestRejection",
    "SampleRateHeader",
    "DEFAULT_AUDIO_FORMAT",
]
