from __future__ import annotations

"""Runtime configuration helpers for the speech-to-text adapter."""

import os
from dataclasses import dataclass

DEFAULT_MAX_BODY_BYTES = 50 * 1024 * 1024


def _env_str(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(frozen=True)
class ElevenLabsSettings:
    api_key: str | None
    model_id: str
    language_code: str
    num_speakers: int = 1
    tag_audio_events: bool = False
    timestamps_granularity: str = "none"


@dataclass(frozen=True)
class AsrSettings:
    provider: str
    elevenlabs: ElevenLabsSettings


@dataclass(frozen=True)
class ServerSettings:
    host: str
    port: int
    max_body_bytes: int
    log_level: str


@dataclass(frozen=True)
class Settings:
    server: ServerSettings
    asr: AsrSettings


def load_settings() -> Settings:
    """Load settings from environment variables with sensible defaults."""

    elevenlabs_settings = ElevenLabsSettings(
        api_key=os.getenv("ELEVENLABS_API_KEY") or None,
        model_id=_env_str("ELEVENLABS_MODEL_ID", "scribe_v1"),
        language_code=_env_str("ELEVENLABS_LANGUAGE_CODE", "en"),
    )

    asr_settings = AsrSettings(
        provider=_env_str("STT_PROVIDER", "elevenlabs"),
        elevenlabs=elevenlabs_settings,
    )

    server_settings = ServerSettings(
        host=_env_str("HOST", "0.0.0.0"),
        port=_env_int("PORT", 6022),
        max_body_bytes=_env_int("STT_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )

    return Settings(server=server_settings, asr=asr_settings)


__all__ = [
    "Settings",
    "ServerSettings",
    "AsrSettings",
    "ElevenLabsSettings",
    "DEFAULT_MAX_BODY_BYTES",
    "load_settings",
]
