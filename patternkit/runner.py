"""Run a set of tasks within a time limit, stopping early on an interrupt."""

from __future__ import annotations

import logging
import signal
import sys
import threading
import time
from contextlib import contextmanager
from typing import Callable, Iterator

log = logging.getLogger(__name__)

Task = Callable[[int], object]


class RunnerTimeout(Exception):
    """Raised when the tasks do not finish before the deadline."""

    def __init__(self, message: str = "received timeout") -> None:
        super().__init__(message)


class RunnerInterrupt(Exception):
    """Raised when an interrupt arrives before all tasks have run."""

    def __init__(self, message: str = "received interrupt") -> None:
        super().__init__(message)


class Runner:
    """Runs tasks in order, each given its position as an id.

    The time limit counts from the moment the runner is created.
    """

    def __init__(self, timeout: float) -> None:
        self._deadline = time.monotonic() + timeout
        self._interrupted = threading.Event()
        self._tasks: list[Task] = []

    def add(self, *tasks: Task) -> None:
        """Attach tasks to be run after those already added."""
        self._tasks.extend(tasks)

    def interrupt(self) -> None:
        """Ask the runner to stop before the next task starts."""
        self._interrupted.set()

    def _run(self) -> None:
        for task_id, task in enumerate(self._tasks):
            if self._interrupted.is_set():
                raise RunnerInterrupt()
            task(task_id)

    @contextmanager
    def _watch_interrupts(self) -> Iterator[None]:
        if threading.current_thread() is not threading.main_thread():
            yield
            return

        previous = signal.getsignal(signal.SIGINT)
        if previous is None:
            previous = signal.default_int_handler

        def on_interrupt(signum: int, frame: object) -> None:
            # Only the first interrupt is caught; later ones behave as usual.
            signal.signal(signal.SIGINT, previous)
            self.interrupt()

        signal.signal(signal.SIGINT, on_interrupt)
        try:
            yield
        finally:
            signal.signal(signal.SIGINT, previous)

    def start(self) -> None:
        """Run every task, raising on timeout, interrupt or task failure."""
        outcome: list[Exception | None] = []
        done = threading.Event()

        def work() -> None:
            try:
                self._run()
            except Exception as exc:  # noqa: BLE001 - re-raised in start
                outcome.append(exc)
            else:
                outcome.append(None)
            finally:
                done.set()

        with self._watch_interrupts():
            threading.Thread(target=work, daemon=True).start()
            finished = done.wait(max(0.0, self._deadline - time.monotonic()))

        if not finished:
            raise RunnerTimeout()
        error = outcome[0]
        if error is not None:
            raise error


TIMEOUT = 3.0


def create_task() -> Task:
    """Return a task that sleeps for as many seconds as its id."""

    def task(task_id: int) -> None:
        log.info("Processor - Task #%d.", task_id)
        time.sleep(task_id)

    return task


def main(argv: list[str] | None = None) -> int:
    """Run three sample tasks under a three-second limit."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    log.info("Starting work.")

    runner = Runner(TIMEOUT)
    runner.add(create_task(), create_task(), create_task())

    try:
        runner.start()
    except RunnerTimeout:
        log.info("Terminating due to timeout.")
        return 1
    except RunnerInterrupt:
        log.info("Terminating due to interrupt.")
        return 2

    log.info("Process ended.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))