"""A minimal thread base class and a millisecond sleep."""

import threading
import time
from abc import ABC, abstractmethod


class Thread(ABC):
    """Runs entry() on a background thread once run() is called."""

    def __init__(self) -> None:
        self._thread: threading.Thread | None = None

    def run(self) -> None:
        """Start entry() on a new thread."""
        if self._thread is not None:
            raise RuntimeError("thread already started")
        self._thread = threading.Thread(target=self.entry, daemon=True)
        self._thread.start()

    @abstractmethod
    def entry(self) -> None:
        """The work done by the thread."""

    def wait(self) -> None:
        """Block until the thread has finished."""
        if self._thread is None:
            raise RuntimeError("thread not started")
        self._thread.join()


def sleep(ms: int) -> None:
    """Sleep for the given number of milliseconds."""
    time.sleep(ms / 1000)