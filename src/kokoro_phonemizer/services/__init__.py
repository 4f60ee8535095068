"""Application services."""

from kokoro_phonemizer.services.audio_session import AudioSessionBackend, AudioSessionManager

__all__ = ["AudioSessionBackend", "AudioSessionManager"]
