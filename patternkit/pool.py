"""A pool of shared, closable resources."""

from __future__ import annotations

import itertools
import logging
import random
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Protocol

log = logging.getLogger(__name__)


class Closer(Protocol):
    def close(self) -> object: ...


class PoolClosedError(Exception):
    """Raised when a resource is acquired from a closed pool."""

    def __init__(self, message: str = "Pool has been closed.") -> None:
        super().__init__(message)


class Pool:
    """Manages a bounded set of resources shared between threads."""

    def __init__(self, factory: Callable[[], Closer], size: int) -> None:
        if size <= 0:
            raise ValueError("Size value too small.")
        self._factory = factory
        self._size = size
        self._resources: deque[Closer] = deque()
        self._lock = threading.Lock()
        self._closed = False

    def acquire(self) -> Closer:
        """Return a pooled resource, or a new one if none is free."""
        with self._lock:
            if self._resources:
                log.info("Acquire: Shared Resource")
                return self._resources.popleft()
            if self._closed:
                log.info("Acquire: Shared Resource")
                raise PoolClosedError()
        log.info("Acquire: New Resource")
        return self._factory()

    def release(self, resource: Closer) -> None:
        """Put a resource back in the pool, closing it if there is no room."""
        with self._lock:
            if self._closed:
                resource.close()
                return
            if len(self._resources) < self._size:
                self._resources.append(resource)
                log.info("Release: In Queue")
                return
            log.info("Release: Closing")
            resource.close()

    def close(self) -> None:
        """Shut the pool down and close every resource it holds."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            while self._resources:
                self._resources.popleft().close()

    def __enter__(self) -> Pool:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass
class DbConnection:
    """A simulated database connection."""

    id: int
    closed: bool = field(default=False, compare=False)

    def close(self) -> None:
        """Mark the connection closed."""
        self.closed = True
        log.info("Close: Connection %d", self.id)


_ids = itertools.count(1)
_ids_lock = threading.Lock()


def create_connection() -> DbConnection:
    """Create a connection with a fresh, unique id."""
    with _ids_lock:
        conn_id = next(_ids)
    log.info("Create: New Connection %d", conn_id)
    return DbConnection(conn_id)


_MAX_QUERIES = 25
_POOLED_RESOURCES = 2


def _perform_query(query: int, pool: Pool) -> None:
    try:
        conn = pool.acquire()
    except PoolClosedError as err:
        log.info("%s", err)
        return
    try:
        time.sleep(random.randrange(1000) / 1000)
        log.info("Query: QID[%d] CID[%d]", query, conn.id)
    finally:
        pool.release(conn)


def main(argv: list[str] | None = None) -> int:
    """Run concurrent simulated queries over a small connection pool."""
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    pool = Pool(create_connection, _POOLED_RESOURCES)

    threads = [
        threading.Thread(target=_perform_query, args=(query, pool))
        for query in range(_MAX_QUERIES)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    log.info("Shutdown Program.")
    pool.close()
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))