"""ElevenLabs speech-to-text adapter for Agent Voice Response."""

__version__ = "1.0.0"
