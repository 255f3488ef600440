"""One-shot "Enter city name" hint shown shortly after the widget mounts."""

import asyncio
import logging
from typing import Any, Callable, List, Optional, Protocol

logger = logging.getLogger(__name__)


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class TimerScheduler(Protocol):
    """Anything with asyncio's ``call_later`` shape; the event loop itself qualifies."""

    def call_later(self, delay: float, callback: Callable[..., Any], *args: Any) -> TimerHandle: ...


class OnboardingHintScheduler:
    """
    Show the hint at +show_after_ms and hide it at +hide_after_ms, both measured
    from activate(). deactivate() cancels whatever has not fired yet.
    """

    def __init__(
        self,
        timers: Optional[TimerScheduler] = None,
        show_after_ms: int = 1000,
        hide_after_ms: int = 4000,
        on_change: Optional[Callable[[bool], None]] = None,
    ):
        self._timers = timers
        self.show_after_ms = show_after_ms
        self.hide_after_ms = hide_after_ms
        self.on_change = on_change
        self._visible = False
        self._active = False
        self._handles: List[TimerHandle] = []

    @classmethod
    def from_settings(cls, settings, timers: Optional[TimerScheduler] = None) -> "OnboardingHintScheduler":
        return cls(
            timers=timers,
            show_after_ms=settings.hint_show_after_ms,
            hide_after_ms=settings.hint_hide_after_ms,
        )

    @property
    def visible(self) -> bool:
        return self._visible

    @property
    def active(self) -> bool:
        return self._active

    def activate(self) -> None:
        if self._active:
            return
        timers = self._timers or asyncio.get_running_loop()
        self._active = True
        self._handles = [
            timers.call_later(self.show_after_ms / 1000, self._set_visible, True),
            timers.call_later(self.hide_after_ms / 1000, self._set_visible, False),
        ]
        logger.debug("Onboarding hint armed (%dms/%dms)", self.show_after_ms, self.hide_after_ms)

    def deactivate(self) -> None:
        for handle in self._handles:
            handle.cancel()
        self._handles = []
        self._active = False

    def _set_visible(self, visible: bool) -> None:
        if not self._active or self._visible == visible:
            return
        self._visible = visible
        if self.on_change:
            self.on_change(visible)
