"""API route modules."""

from kokoro_phonemizer.api.routes import health, phonemize

__all__ = ["health", "phonemize"]
