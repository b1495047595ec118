"""A bounded buffer shared by producer and consumer threads."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections import deque
from typing import TextIO

MAX_BUFFER_SIZE = 10


class ProducerConsumer:
    """Producers fill a bounded buffer that consumers drain until stopped.

    Producers quit as soon as the run is stopped; consumers keep taking
    items until the buffer is empty and only then quit.
    """

    def __init__(self, capacity: int = MAX_BUFFER_SIZE, out: TextIO | None = None) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._out = sys.stdout if out is None else out
        self._lock = threading.Lock()
        self._not_full = threading.Condition(self._lock)
        self._not_empty = threading.Condition(self._lock)
        self._buffer: deque[int] = deque()
        self._stopped = False
        self._item_id = 0
        self._produced: list[int] = []
        self._consumed: list[int] = []
        self._peak = 0

    @property
    def produced(self) -> list[int]:
        """Items produced so far, in production order."""
        with self._lock:
            return list(self._produced)

    @property
    def consumed(self) -> list[int]:
        """Items consumed so far, in consumption order."""
        with self._lock:
            return list(self._consumed)

    @property
    def peak(self) -> int:
        """Largest number of items held in the buffer at once."""
        with self._lock:
            return self._peak

    @property
    def stopped(self) -> bool:
        with self._lock:
            return self._stopped

    def producer(self, worker_id: int, delay: float = 0.1) -> None:
        """Produce numbered items until the run is stopped."""
        while True:
            with self._lock:
                if self._stopped:
                    break
                self._not_full.wait_for(
                    lambda: len(self._buffer) < self.capacity or self._stopped
                )
                if self._stopped:
                    break
                self._item_id += 1
                item = self._item_id
                self._buffer.append(item)
                self._produced.append(item)
                self._peak = max(self._peak, len(self._buffer))
                self._out.write(f"[Producer {worker_id}] produced: {item}\n")
                self._not_empty.notify()
            if delay:
                time.sleep(delay)
        with self._lock:
            self._out.write(f"[Producer {worker_id}] exiting\n")

    def consumer(self, worker_id: int, delay: float = 0.15) -> None:
        """Consume items until the run is stopped and the buffer is empty."""
        while True:
            with self._lock:
                self._not_empty.wait_for(lambda: bool(self._buffer) or self._stopped)
                if not self._buffer and self._stopped:
                    break
                item = self._buffer.popleft()
                self._consumed.append(item)
                self._out.write(f"    [Consumer {worker_id}] consumed: {item}\n")
                self._not_full.notify()
            if delay:
                time.sleep(delay)
        with self._lock:
            self._out.write(f"    [Consumer {worker_id}] exiting\n")

    def stop(self) -> None:
        """Ask every producer and consumer to finish and wake them all."""
        with self._lock:
            self._stopped = True
            self._not_full.notify_all()
            self._not_empty.notify_all()

    def run(
        self,
        producers: int = 3,
        consumers: int = 3,
        duration: float = 5.0,
        produce_delay: float = 0.1,
        consume_delay: float = 0.15,
    ) -> list[int]:
        """Run the workers for ``duration`` seconds, stop them and return consumed items."""
        if self.stopped:
            raise RuntimeError("this buffer has already been stopped")
        workers = [
            threading.Thread(target=self.producer, args=(i, produce_delay))
            for i in range(producers)
        ] + [
            threading.Thread(target=self.consumer, args=(i, consume_delay))
            for i in range(consumers)
        ]
        for worker in workers:
            worker.start()
        time.sleep(duration)
        self.stop()
        for worker in workers:
            worker.join()
        with self._lock:
            self._out.write("All threads exited.\n")
        return self.consumed


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Bounded-buffer producer/consumer demo.")
    parser.add_argument("--producers", type=int, default=3)
    parser.add_argument("--consumers", type=int, default=3)
    parser.add_argument("--capacity", type=int, default=MAX_BUFFER_SIZE)
    parser.add_argument("--duration", type=float, default=5.0)
    args = parser.parse_args(argv)
    try:
        demo = ProducerConsumer(args.capacity)
    except ValueError as exc:
        parser.error(str(exc))
    demo.run(args.producers, args.consumers, args.duration)
    return 0


if __name__ == "__main__":
    sys.exit(main())