"""A fixed pool of worker threads that run submitted tasks."""

from __future__ import annotations

import logging
import queue
import sys
import threading
import time
from dataclasses import dataclass
from typing import Protocol

log = logging.getLogger(__name__)


class Worker(Protocol):
    def task(self) -> None: ...


_STOP = object()


class Pool:
    """Runs Worker tasks on a fixed number of threads.

    ``run`` blocks until one of the threads has taken the task.
    """

    def __init__(self, max_workers: int) -> None:
        if max_workers < 0:
            raise ValueError("max_workers must not be negative")
        self._queue: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._threads = [
            threading.Thread(target=self._loop, daemon=True)
            for _ in range(max_workers)
        ]
        for thread in self._threads:
            thread.start()

    def _loop(self) -> None:
        while True:
            item = self._queue.get()
            if item is _STOP:
                return
            worker, taken = item
            taken.set()
            worker.task()

    def run(self, worker: Worker) -> None:
        """Submit a task and wait until a thread has picked it up."""
        taken = threading.Event()
        with self._lock:
            if self._closed:
                raise RuntimeError("pool has been shut down")
            self._queue.put((worker, taken))
        taken.wait()

    def shutdown(self) -> None:
        """Stop accepting work and wait for every thread to finish."""
        with self._lock:
            if self._closed:
                raise RuntimeError("pool has been shut down")
            self._closed = True
            for _ in self._threads:
                self._queue.put(_STOP)
        for thread in self._threads:
            thread.join()

    def __enter__(self) -> Pool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()


@dataclass
class NamePrinter:
    """A task that logs a name and then pauses."""

    name: str
    delay: float = 1.0

    def task(self) -> None:
        log.info("%s", self.name)
        time.sleep(self.delay)


_NAMES = ["steve", "bob", "mary", "therese", "jason"]


def main(argv: list[str] | None = None) -> int:
    """Print each name a hundred times through a pool of two threads."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    pool = Pool(2)

    submitters = [
        threading.Thread(target=pool.run, args=(NamePrinter(name),))
        for _ in range(100)
        for name in _NAMES
    ]
    for thread in submitters:
        thread.start()
    for thread in submitters:
        thread.join()

    pool.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))