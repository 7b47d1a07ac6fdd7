import threading

import pytest

from xlbase.thread_pool import ThreadPool


def test_posted_tasks_all_run_before_stop_returns():
    pool = ThreadPool()
    results = []
    lock = threading.Lock()

    def add():
        with lock:
            results.append(1 + 2)

    pool.start(2)
    assert pool.running is True
    for _ in range(10):
        pool.post(add)
    pool.stop()
    assert pool.running is False
    assert results == [3] * 10


def test_start_twice_raises():
    pool = ThreadPool("twice")
    pool.start(1)
    try:
        with pytest.raises(RuntimeError):
            pool.start(1)
    finally:
        pool.stop()
    assert pool.running is False


def test_stop_without_start_is_noop():
    pool = ThreadPool()
    pool.stop()
    assert pool.running is False


def test_context_manager_stops_pool():
    names = []
    with ThreadPool("ctx") as pool:
        pool.start(2)
        pool.post(lambda: names.append(threading.current_thread().name))
    assert pool.running is False
    assert len(names) == 1
    assert names[0].startswith("ctx-")


def test_failing_task_does_not_kill_worker():
    done = []

    def boom():
        raise ValueError("bad task")

    pool = ThreadPool()
    pool.start(1)
    pool.post(boom)
    pool.post(None)
    pool.post(lambda: done.append("after"))
    pool.stop()
    assert done == ["after"]


def test_single_worker_runs_tasks_in_order():
    order = []
    pool = ThreadPool()
    pool.start(1)
    for value in range(5):
        pool.post(lambda v=value: order.append(v))
    pool.stop()
    assert order == [0, 1, 2, 3, 4]


def test_pool_can_restart_after_stop():
    ran = []
    pool = ThreadPool()
    pool.start(1)
    pool.stop()
    pool.start(1)
    pool.post(lambda: ran.append(True))
    pool.stop()
    assert ran == [True]