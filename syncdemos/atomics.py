"""Compare-and-swap counters and test-and-set spin locks."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import TextIO


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


class AtomicInt:
    """An integer whose load, store and compare-exchange are indivisible."""

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._guard = threading.Lock()

    def load(self) -> int:
        with self._guard:
            return self._value

    def store(self, value: int) -> None:
        with self._guard:
            self._value = value

    def compare_exchange(self, expected: int, desired: int) -> bool:
        """Set the value to ``desired`` only if it still equals ``expected``."""
        with self._guard:
            if self._value != expected:
                return False
            self._value = desired
            return True

    def __repr__(self) -> str:
        return f"AtomicInt({self.load()})"


class AtomicFlag:
    """A boolean flag supporting test-and-set."""

    def __init__(self) -> None:
        self._set = False
        self._guard = threading.Lock()

    def test_and_set(self) -> bool:
        """Set the flag and return its previous value."""
        with self._guard:
            previous = self._set
            self._set = True
            return previous

    def clear(self) -> None:
        with self._guard:
            self._set = False


class SpinLock:
    """A lock that busy-waits on a test-and-set flag."""

    def __init__(self) -> None:
        self._flag = AtomicFlag()

    def acquire(self) -> bool:
        while self._flag.test_and_set():
            time.sleep(0)
        return True

    def release(self) -> None:
        self._flag.clear()

    def __enter__(self) -> SpinLock:
        self.acquire()
        return self

    def __exit__(self, *args: object) -> None:
        self.release()


def cas_increment(
    counter: AtomicInt,
    worker_id: int,
    times: int = 5,
    delay: float = 0.05,
    out: TextIO | None = None,
) -> list[int]:
    """Increment ``counter`` ``times`` times with a CAS retry loop.

    Returns the values this worker wrote, in order.
    """
    stream = _stream(out)
    written = []
    for _ in range(times):
        while True:
            expected = counter.load()
            desired = expected + 1
            if counter.compare_exchange(expected, desired):
                break
        stream.write(f"[CAS] Thread {worker_id} incremented counter to {desired}\n")
        written.append(desired)
        if delay:
            time.sleep(delay)
    return written


def tas_critical_section(
    lock: SpinLock,
    worker_id: int,
    hold: float = 0.1,
    out: TextIO | None = None,
) -> None:
    """Enter a critical section guarded by a spin lock and hold it for a while."""
    stream = _stream(out)
    with lock:
        stream.write(f"[TAS] Thread {worker_id} entered critical section.\n")
        time.sleep(hold)
        stream.write(f"[TAS] Thread {worker_id} leaving critical section.\n")


def _join_all(workers: list[threading.Thread]) -> None:
    for worker in workers:
        worker.start()
    for worker in workers:
        worker.join()


def run_cas_demo(
    threads: int = 2,
    increments: int = 5,
    delay: float = 0.05,
    out: TextIO | None = None,
) -> int:
    """Run several CAS incrementers concurrently and return the final count."""
    stream = _stream(out)
    counter = AtomicInt(0)
    _join_all(
        [
            threading.Thread(
                target=cas_increment, args=(counter, worker_id, increments, delay, stream)
            )
            for worker_id in range(1, threads + 1)
        ]
    )
    final = counter.load()
    stream.write(f"Final counter: {final}\n")
    return final


def run_tas_demo(threads: int = 2, hold: float = 0.1, out: TextIO | None = None) -> None:
    """Run several threads contending for one spin lock."""
    stream = _stream(out)
    lock = SpinLock()
    _join_all(
        [
            threading.Thread(target=tas_critical_section, args=(lock, worker_id, hold, stream))
            for worker_id in range(1, threads + 1)
        ]
    )


def run_combined_demo(
    hold: float = 0.1, increments: int = 3, out: TextIO | None = None
) -> int:
    """Run the spin-lock demo, then the CAS counter demo, with two threads each."""
    run_tas_demo(2, hold, out)
    return run_cas_demo(2, increments, 0, out)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Test-and-set and compare-and-swap demos.")
    parser.add_argument(
        "demo", nargs="?", choices=("cas", "tas", "combined"), default="combined"
    )
    args = parser.parse_args(argv)
    if args.demo == "cas":
        run_cas_demo()
    elif args.demo == "tas":
        run_tas_demo()
    else:
        run_combined_demo()
    return 0


if __name__ == "__main__":
    sys.exit(main())