"""One-tick deferred callback queue for session replacement.

Closing a picker and opening its replacement must not overlap, so reopen
callbacks are queued here and run on the next tick of the owning loop.
"""

from __future__ import annotations

import threading
from collections import deque
from collections.abc import Callable


class DeferredScheduler:
    """FIFO of callbacks drained once per loop tick.

    Callbacks queued while a drain is running wait for the next drain.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._pending: deque[Callable[[], None]] = deque()

    def schedule(self, callback: Callable[[], None]) -> None:
        with self._lock:
            self._pending.append(callback)

    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def run_pending(self) -> int:
        """Run callbacks queued before this call and return how many ran.

        When a callback raises, the ones after it go back to the front of the
        queue for the next drain and the exception propagates.
        """
        with self._lock:
            batch = list(self._pending)
            self._pending.clear()
        for index, callback in enumerate(batch):
            try:
                callback()
            except BaseException:
                with self._lock:
                    self._pending.extendleft(reversed(batch[index + 1 :]))
                raise
        return len(batch)
