import logging
import threading

import pytest

from patternkit.pool import DbConnection, Pool, PoolClosedError, create_connection


class Resource:
    def __init__(self, ident):
        self.ident = ident
        self.closed = False

    def close(self):
        self.closed = True


class Factory:
    def __init__(self):
        self.created = []

    def __call__(self):
        res = Resource(len(self.created))
        self.created.append(res)
        return res


@pytest.mark.parametrize("size", [0, -1])
def test_size_too_small(size):
    with pytest.raises(ValueError, match="Size value too small."):
        Pool(Factory(), size)


def test_acquire_creates_when_empty():
    factory = Factory()
    pool = Pool(factory, 2)
    first = pool.acquire()
    second = pool.acquire()
    assert factory.created == [first, second]


def test_released_resource_is_reused():
    factory = Factory()
    pool = Pool(factory, 2)
    res = pool.acquire()
    pool.release(res)
    assert pool.acquire() is res
    assert len(factory.created) == 1
    assert not res.closed


def test_release_over_capacity_closes():
    factory = Factory()
    pool = Pool(factory, 1)
    a, b = pool.acquire(), pool.acquire()
    pool.release(a)
    pool.release(b)
    assert not a.closed
    assert b.closed


def test_close_closes_queued_resources():
    factory = Factory()
    pool = Pool(factory, 2)
    a, b = pool.acquire(), pool.acquire()
    pool.release(a)
    pool.release(b)
    pool.close()
    assert a.closed and b.closed


def test_acquire_after_close_raises():
    pool = Pool(Factory(), 2)
    pool.close()
    with pytest.raises(PoolClosedError, match="Pool has been closed."):
        pool.acquire()


def test_release_after_close_closes_resource():
    pool = Pool(Factory(), 2)
    res = pool.acquire()
    pool.close()
    pool.release(res)
    assert res.closed


def test_close_is_idempotent_and_context_manager():
    factory = Factory()
    with Pool(factory, 1) as pool:
        res = pool.acquire()
        pool.release(res)
    pool.close()
    assert res.closed
    with pytest.raises(PoolClosedError):
        pool.acquire()


def test_concurrent_use_bounds_pool():
    factory = Factory()
    pool = Pool(factory, 2)

    def worker():
        for _ in range(20):
            pool.release(pool.acquire())

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    pool.close()
    assert all(res.closed for res in factory.created)


def test_create_connection_ids_are_unique_and_increasing():
    first = create_connection()
    second = create_connection()
    assert second.id > first.id


def test_db_connection_close_logs(caplog):
    with caplog.at_level(logging.INFO, logger="patternkit.pool"):
        DbConnection(7).close()
    assert "Close: Connection 7" in caplog.text