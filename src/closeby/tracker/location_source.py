# location_source.py
# Observer-style feed of position samples.
# Wrap a real GPS driver by calling publish() from its callback.

import logging
import threading
from typing import Callable, List, Optional

from .models import PositionSample

logger = logging.getLogger(__name__)

PositionCallback = Callable[[PositionSample], None]


class LocationSource:
    """
    Fans position samples out to subscribers.

    Duplicates are delivered as-is; the latest sample always wins
    for last_sample.
    """

    def __init__(self) -> None:
        self._subscribers: List[PositionCallback] = []
        self._last: Optional[PositionSample] = None
        self._lock = threading.Lock()

    def subscribe(self, callback: PositionCallback) -> Callable[[], None]:
        """Register a callback; returns a function that removes it again."""
        with self._lock:
            self._subscribers.append(callback)

        def unsubscribe() -> None:
            with self._lock:
                if callback in self._subscribers:
                    self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, sample: PositionSample) -> None:
        with self._lock:
            self._last = sample
            subscribers = list(self._subscribers)

        for callback in subscribers:
            try:
                callback(sample)
            except Exception:
                logger.exception(f"Position subscriber {callback!r} failed.")

    @property
    def last_sample(self) -> Optional[PositionSample]:
        return self._last

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)
