"""Mutex, semaphore, recursive, shared and timed lock demos."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from contextlib import contextmanager
from typing import Iterator, TextIO


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


class SharedLock:
    """A readers-writer lock: many shared holders or one exclusive holder."""

    def __init__(self) -> None:
        self._cond = threading.Condition()
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_shared(self) -> None:
        with self._cond:
            self._cond.wait_for(lambda: not self._writer and not self._writers_waiting)
            self._readers += 1

    def release_shared(self) -> None:
        with self._cond:
            if not self._readers:
                raise RuntimeError("shared lock released without being held")
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire(self) -> None:
        with self._cond:
            self._writers_waiting += 1
            try:
                self._cond.wait_for(lambda: not self._writer and not self._readers)
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("exclusive lock released without being held")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def shared(self) -> Iterator[SharedLock]:
        self.acquire_shared()
        try:
            yield self
        finally:
            self.release_shared()

    @contextmanager
    def exclusive(self) -> Iterator[SharedLock]:
        self.acquire()
        try:
            yield self
        finally:
            self.release()


def _join_all(workers: list[threading.Thread]) -> None:
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def locked_counter(threads: int = 2, iterations: int = 10000) -> int:
    """Increment a shared counter from several threads under a mutex."""
    lock = threading.Lock()
    state = {"counter": 0}

    def increment() -> None:
        for _ in range(iterations):
            with lock:
                state["counter"] += 1

    _join_all([threading.Thread(target=increment) for _ in range(threads)])
    return state["counter"]


def access_resource(
    semaphore: threading.Semaphore,
    worker_id: int,
    work: float = 1.0,
    out: TextIO | None = None,
) -> None:
    """Enter a section admitted by ``semaphore`` and simulate work."""
    stream = _stream(out)
    with semaphore:
        stream.write(f"Thread {worker_id} entering critical section\n")
        time.sleep(work)
        stream.write(f"Thread {worker_id} leaving critical section\n")


class _LineLog:
    """Thread-safe writer that keeps the lines it forwards."""

    def __init__(self, out: TextIO) -> None:
        self._out = out
        self._guard = threading.Lock()
        self.lines: list[str] = []

    def write(self, text: str) -> int:
        with self._guard:
            self.lines.extend(text.splitlines())
            return self._out.write(text)


def run_semaphore_demo(
    threads: int = 10,
    permits: int = 3,
    work: float = 1.0,
    out: TextIO | None = None,
) -> int:
    """Run ``threads`` workers through a semaphore of ``permits``.

    Returns the largest number of workers seen inside at once.
    """
    log = _LineLog(_stream(out))
    semaphore = threading.BoundedSemaphore(permits)
    _join_all(
        [
            threading.Thread(target=access_resource, args=(semaphore, worker_id, work, log))
            for worker_id in range(threads)
        ]
    )
    inside = peak = 0
    for line in log.lines:
        if line.endswith("entering critical section"):
            inside += 1
            peak = max(peak, inside)
        elif line.endswith("leaving critical section"):
            inside -= 1
    return peak


def print_safe(lock: threading.Lock, message: str, out: TextIO | None = None) -> None:
    """Write ``message`` as one line while holding ``lock``."""
    with lock:
        _stream(out).write(f"{message}\n")


def recursive_function(lock: threading.RLock, count: int, out: TextIO | None = None) -> None:
    """Re-enter ``lock`` once per level, reporting each level."""
    if count <= 0:
        return
    with lock:
        _stream(out).write(f"Lock level: {count}\n")
        recursive_function(lock, count - 1, out)


def reader(lock: SharedLock, reader_id: int, hold: float = 0.2, out: TextIO | None = None) -> None:
    with lock.shared():
        _stream(out).write(f"Reader {reader_id} reading...\n")
        time.sleep(hold)


def writer(lock: SharedLock, writer_id: int, hold: float = 0.5, out: TextIO | None = None) -> None:
    with lock.exclusive():
        _stream(out).write(f"Writer {writer_id} writing...\n")
        time.sleep(hold)


def timed_task(
    lock: threading.Lock,
    idx: int,
    timeout: float = 0.1,
    hold: float = 1.0,
    out: TextIO | None = None,
) -> bool:
    """Try to take ``lock`` within ``timeout``; return whether it was taken."""
    stream = _stream(out)
    if not lock.acquire(timeout=timeout):
        stream.write(f"idx = {idx}, Failed to get lock (timeout)\n")
        return False
    stream.write(f"idx = {idx}, Got lock!\n")
    time.sleep(hold)
    lock.release()
    stream.write(f"idx = {idx}, get unlocked\n")
    return True


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Lock and semaphore demos.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("counter", "semaphore", "print", "recursive", "shared", "timed"),
        default="counter",
    )
    args = parser.parse_args(argv)
    out = sys.stdout
    if args.demo == "counter":
        out.write(f"Counter: {locked_counter()}\n")
    elif args.demo == "semaphore":
        run_semaphore_demo(out=out)
    elif args.demo == "print":
        lock = threading.Lock()
        _join_all(
            [
                threading.Thread(target=print_safe, args=(lock, f"Hello from {name}", out))
                for name in ("t1", "t2")
            ]
        )
    elif args.demo == "recursive":
        recursive_function(threading.RLock(), 3, out)
    elif args.demo == "shared":
        shared = SharedLock()
        _join_all(
            [
                threading.Thread(target=reader, args=(shared, 1, 0.2, out)),
                threading.Thread(target=reader, args=(shared, 2, 0.2, out)),
                threading.Thread(target=writer, args=(shared, 1, 0.5, out)),
            ]
        )
    else:
        lock = threading.Lock()
        _join_all(
            [threading.Thread(target=timed_task, args=(lock, idx, 0.1, 1.0, out)) for idx in (0, 1)]
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())