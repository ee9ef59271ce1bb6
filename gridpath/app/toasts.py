"""
Toast notifications for the viewer: short-lived messages in the right panel.
"""

import time
from dataclasses import dataclass
from typing import Callable, List

from loguru import logger

MAX_VISIBLE = 3


@dataclass(frozen=True)
class Toast:
    kind: str          # "error" | "success"
    message: str
    expires_at: float


class ToastNotifier:
    def __init__(self, duration_s: float = 2.5, clock: Callable[[], float] = time.monotonic):
        self.duration_s = duration_s
        self._clock = clock
        self._toasts: List[Toast] = []

    def report_error(self, message: str) -> None:
        logger.error(message)
        self._push("error", message)

    def report_success(self, message: str) -> None:
        logger.success(message)
        self._push("success", message)

    def _push(self, kind: str, message: str) -> None:
        self._toasts.append(Toast(kind, message, self._clock() + self.duration_s))
        del self._toasts[:-MAX_VISIBLE]

    def active(self) -> List[Toast]:
        now = self._clock()
        self._toasts = [t for t in self._toasts if t.expires_at > now]
        return list(self._toasts)
