# src/pauliscope/notifications.py
"""
Non-blocking user notifications.

Only one notification is visible at a time: a new one replaces the
previous. A notification disappears on its own once its duration has
elapsed, measured with an injectable clock.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

ERROR = "error"
SUCCESS = "success"


@dataclass(frozen=True)
class Notification:
    """A message shown to the user for ``duration`` seconds."""
    message: str
    level: str = ERROR
    created_at: float = 0.0
    duration: float = 3.0

    def expired(self, now: float) -> bool:
        return now - self.created_at >= self.duration


class NotificationCenter:
    """
    Holds the visible notification and a log of all notifications.

    Parameters
    ----------
    duration : float
        Default lifetime in seconds.
    clock : Callable[[], float]
        Time source; ``time.monotonic`` by default.
    """

    def __init__(self, duration: float = 3.0, clock: Callable[[], float] = time.monotonic):
        self.duration = duration
        self.clock = clock
        self.log: List[Notification] = []
        self._visible: Optional[Notification] = None
        self._listeners: List[Callable[[Notification], None]] = []

    def subscribe(self, listener: Callable[[Notification], None]) -> None:
        self._listeners.append(listener)

    def notify(self, message: str, level: str = ERROR, duration: Optional[float] = None) -> Notification:
        note = Notification(
            message=message,
            level=level,
            created_at=self.clock(),
            duration=self.duration if duration is None else duration,
        )
        self._visible = note
        self.log.append(note)
        if level == ERROR:
            logger.warning("%s", message)
        else:
            logger.info("%s", message)
        for listener in self._listeners:
            listener(note)
        return note

    @property
    def current(self) -> Optional[Notification]:
        """The visible notification, or None once it has expired."""
        if self._visible is not None and self._visible.expired(self.clock()):
            self._visible = None
        return self._visible

    def dismiss(self) -> None:
        self._visible = None
