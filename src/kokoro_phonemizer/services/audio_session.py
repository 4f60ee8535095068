"""Audio session lifecycle around playback.

Owns no audio itself; it drives a platform backend (category and
activation) and fans out low-memory notifications. Construct one per
application and pass it to whatever plays audio. Backend failures are
logged and do not interrupt playback setup.

The manager does not watch memory itself: the platform integration that
owns the backend calls notify_memory_warning() when the OS reports
pressure.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

import structlog

logger = structlog.get_logger()


class AudioSessionBackend(Protocol):
    """Platform audio session controls."""

    def set_category(self, category: str) -> None: ...

    def set_active(self, active: bool) -> None: ...


class AudioSessionManager:
    """Explicit-lifecycle audio session service."""

    def __init__(
        self,
        backend: AudioSessionBackend | None = None,
        enabled: bool = False,
        category: str = "playback",
    ) -> None:
        """Initialize the manager.

        Args:
            backend: Platform session controls, None for no-op
            enabled: When False every lifecycle call does nothing
            category: Session category applied on setup and reset
        """
        self._backend = backend
        self.enabled = enabled and backend is not None
        self.category = category
        self._active = False
        self._memory_warning_callbacks: list[Callable[[], None]] = []

    @property
    def active(self) -> bool:
        """Whether the session is currently active."""
        return self._active

    def setup(self) -> None:
        """Apply the session category and activate it."""
        if not self.enabled:
            return
        try:
            self._backend.set_category(self.category)
            self._backend.set_active(True)
            self._active = True
            logger.info("Audio session active", category=self.category)
        except Exception as e:
            logger.error("Audio session setup failed", error=str(e))

    def reset(self) -> None:
        """Deactivate, reactivate and reapply the category."""
        if not self.enabled:
            return
        try:
            self._backend.set_active(False)
            self._backend.set_active(True)
            self._backend.set_category(self.category)
            self._active = True
            logger.info("Audio session reset")
        except Exception as e:
            self._active = False
            logger.error("Failed to reset audio session", error=str(e))

    def deactivate(self) -> None:
        """Deactivate the session."""
        if not self.enabled:
            return
        try:
            self._backend.set_active(False)
            self._active = False
            logger.info("Audio session deactivated")
        except Exception as e:
            logger.error("Failed to deactivate audio session", error=str(e))

    def register_memory_warning(self, callback: Callable[[], None]) -> None:
        """Call callback when the platform reports memory pressure."""
        if not self.enabled:
            return
        self._memory_warning_callbacks.append(callback)

    def unregister_memory_warning(self, callback: Callable[[], None]) -> None:
        """Stop calling callback on memory pressure. Unknown callbacks are ignored."""
        if callback in self._memory_warning_callbacks:
            self._memory_warning_callbacks.remove(callback)

    def notify_memory_warning(self) -> None:
        """Deliver a memory warning to registered callbacks.

        Called by the platform integration; callbacks run in registration order.
        """
        logger.warning(
            "Memory warning received",
            callbacks=len(self._memory_warning_callbacks),
        )
        for callback in list(self._memory_warning_callbacks):
            callback()
