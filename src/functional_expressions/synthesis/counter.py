"""Process-wide counter used to give synthesized callables unique names."""

import itertools
import threading
import time
from typing import Callable, Iterator


class NamingCounter:
    """A monotonically increasing id source.

    The counter is seeded lazily, on the first call to :meth:`next_id`,
    from ``seed_fn`` (wall-clock nanoseconds by default). It is never
    reset.
    """

    def __init__(self, seed_fn: Callable[[], int] = time.time_ns) -> None:
        self._seed_fn = seed_fn
        self._ids: Iterator[int] | None = None
        self._lock = threading.Lock()

    @property
    def started(self) -> bool:
        """Whether the counter has been seeded."""
        return self._ids is not None

    def next_id(self) -> int:
        """Return a fresh id."""
        with self._lock:
            if self._ids is None:
                self._ids = itertools.count(int(self._seed_fn()))
            return next(self._ids)


GLOBAL_COUNTER = NamingCounter()
