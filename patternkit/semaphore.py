"""Readers and a writer sharing a resource, guarded by a counting semaphore."""

from __future__ import annotations

import logging
import random
import sys
import threading
import time

log = logging.getLogger(__name__)


class Semaphore:
    """A counting semaphore of ``size`` slots, taken and returned one at a time."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("size must be at least 1")
        self._size = size
        self._held = 0
        self._cond = threading.Condition()

    @property
    def size(self) -> int:
        return self._size

    @property
    def held(self) -> int:
        """The number of slots currently taken."""
        with self._cond:
            return self._held

    def acquire(self, buffers: int) -> None:
        """Take ``buffers`` slots, waiting for each one to become free."""
        for _ in range(buffers):
            with self._cond:
                self._cond.wait_for(lambda: self._held < self._size)
                self._held += 1
                self._cond.notify_all()

    def release(self, buffers: int) -> None:
        """Return ``buffers`` slots, waiting while none are taken."""
        for _ in range(buffers):
            with self._cond:
                self._cond.wait_for(lambda: self._held > 0)
                self._held -= 1
                self._cond.notify_all()


class _WaitGroup:
    def __init__(self) -> None:
        self._count = 0
        self._cond = threading.Condition()

    def add(self, delta: int = 1) -> None:
        with self._cond:
            if self._count + delta < 0:
                raise ValueError("negative wait group counter")
            self._count += delta
            if self._count == 0:
                self._cond.notify_all()

    def done(self) -> None:
        self.add(-1)

    def wait(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._count == 0)


class ReaderWriter:
    """Many reader threads and one writer thread sharing a simulated resource.

    At most ``max_reads`` reads run at once; a write runs alone.
    """

    def __init__(self, name: str, max_reads: int, max_readers: int) -> None:
        if max_readers < 0:
            raise ValueError("max_readers must not be negative")
        self.name = name
        self.max_reads = max_reads
        self.max_readers = max_readers
        self.reader_control = Semaphore(max_reads)
        self.max_pause = 1.0
        self.rng = random.Random()
        self.peak_reads = 0
        self.writes = 0
        self.overlaps = 0
        self._write = _WaitGroup()
        self._shutdown = threading.Event()
        self._count_lock = threading.Lock()
        self._current_reads = 0
        self._threads: list[threading.Thread] = []
        self._launched = False

    @property
    def current_reads(self) -> int:
        with self._count_lock:
            return self._current_reads

    @property
    def running(self) -> bool:
        return any(t.is_alive() for t in self._threads)

    def _pause(self) -> None:
        time.sleep(self.rng.random() * self.max_pause)

    def read_lock(self, reader: int) -> None:
        """Wait for any write to finish, then take one read slot."""
        self._write.wait()
        self.reader_control.acquire(1)

    def read_unlock(self, reader: int) -> None:
        """Give back the read slot."""
        self.reader_control.release(1)

    def write_lock(self) -> None:
        """Hold back new readers and take every read slot."""
        self._write.add(1)
        self.reader_control.acquire(self.max_reads)

    def write_unlock(self) -> None:
        """Return every read slot and let readers in again."""
        self.reader_control.release(self.max_reads)
        self._write.done()

    def _perform_read(self, reader: int) -> None:
        self.read_lock(reader)
        with self._count_lock:
            self._current_reads += 1
            count = self._current_reads
            self.peak_reads = max(self.peak_reads, count)
        log.info("%s\t: [%d] Start\t- [%d] Reads", self.name, reader, count)
        self._pause()
        with self._count_lock:
            self._current_reads -= 1
            count = self._current_reads
        log.info("%s\t: [%d] Finish\t- [%d] Reads", self.name, reader, count)
        self.read_unlock(reader)

    def _perform_write(self) -> None:
        self._pause()
        log.info("%s\t: *****> Writing Pending", self.name)
        self.write_lock()
        with self._count_lock:
            if self._current_reads:
                self.overlaps += 1
        log.info("%s\t: *****> Writing Start", self.name)
        self._pause()
        log.info("%s\t: *****> Writing Finish", self.name)
        with self._count_lock:
            self.writes += 1
        self.write_unlock()

    def _reader(self, reader: int) -> None:
        while not self._shutdown.is_set():
            self._perform_read(reader)
        log.info("%s\t: #> Reader Shutdown", self.name)

    def _writer(self) -> None:
        while not self._shutdown.is_set():
            self._perform_write()
        log.info("%s\t: #> Writer Shutdown", self.name)

    def launch(self) -> None:
        """Start the reader threads and the writer thread."""
        if self._launched:
            raise RuntimeError(f"{self.name} already launched")
        self._launched = True
        self._threads = [
            threading.Thread(target=self._reader, args=(reader,), daemon=True)
            for reader in range(self.max_readers)
        ]
        self._threads.append(threading.Thread(target=self._writer, daemon=True))
        for thread in self._threads:
            thread.start()

    def stop(self) -> None:
        """Signal every thread to stop and wait until they have."""
        if self._shutdown.is_set():
            raise RuntimeError(f"{self.name} already stopped")
        log.info("%s\t: #####> Stop", self.name)
        self._shutdown.set()
        for thread in self._threads:
            thread.join()
        log.info("%s\t: #####> Stopped", self.name)


def start(name: str, max_reads: int, max_readers: int) -> ReaderWriter:
    """Create a ReaderWriter and launch its threads."""
    rw = ReaderWriter(name, max_reads, max_readers)
    rw.launch()
    return rw


def shutdown(*reader_writers: ReaderWriter) -> None:
    """Stop every given ReaderWriter concurrently."""
    stoppers = [threading.Thread(target=rw.stop) for rw in reader_writers]
    for thread in stoppers:
        thread.start()
    for thread in stoppers:
        thread.join()


def main(argv: list[str] | None = None) -> int:
    """Run two reader/writer groups for two seconds, then shut them down."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    log.info("Starting Process")

    first = start("First", 3, 6)
    second = start("Second", 2, 2)

    time.sleep(2)
    shutdown(first, second)

    log.info("Process Ended")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))