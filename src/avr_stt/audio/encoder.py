from __future__ import annotations

import io

import numpy as np
import soundfile as sf

SAMPLE_WIDTH = 2
WAV_CHANNELS = 1


def pcm16_to_float(pcm_bytes: bytes) -> "np.ndarray":
    """Decode signed 16-bit little-endian PCM into floats in [-1, 1).

    A trailing unpaired byte is dropped.
    """

    usable = len(pcm_bytes) - (len(pcm_bytes) % SAMPLE_WIDTH)
    if usable <= 0:
        return np.zeros(0, dtype=np.float32)
    pcm_array = np.frombuffer(pcm_bytes[:usable], dtype="<i2").astype(np.float32)
    # Normalize 16-bit PCM to [-1, 1]
    pcm_array /= 32768.0
    return pcm_array


def encode_pcm16_wav(pcm_bytes: bytes, sample_rate: int) -> bytes:
    """Wrap raw slin audio in a mono 16-bit PCM WAV container."""

    if sample_rate <= 0:
        raise ValueError(f"sample rate must be positive, got {sample_rate}")

    samples = pcm16_to_float(pcm_bytes)
    pcm_int16 = np.ascontiguousarray((samples * 32768.0).clip(-32768, 32767).astype("<i2"))

    buffer = io.BytesIO()
    sf.write(buffer, pcm_int16, sample_rate, subtype="PCM_16", format="WAV")
    return buffer.getvalue()
