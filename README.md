# syncdemos

Small, self-contained demonstrations of how threads coordinate, plus a
tiny nested-list tensor helper. Each demo writes what its threads are
doing, line by line, so you can watch the interleaving happen. No
third-party packages are needed.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Command-line demos

Each command runs one demo and prints its trace to standard output.

### `syncdemos-atomics [cas|tas|combined]`

- `cas`: two threads each increment a shared counter five times through
  a compare-and-swap retry loop, pausing 50 ms after each increment,
  then the final count (10) is printed.
- `tas`: two threads take turns in a critical section guarded by a
  test-and-set spin lock, each holding it for 100 ms.
- `combined` (the default): the spin-lock demo, then two threads each
  incrementing the counter three times without pausing.

### `syncdemos-locks [counter|semaphore|print|recursive|shared|timed]`

- `counter` (the default): two threads increment a counter 10,000 times
  each under a mutex and `Counter: 20000` is printed.
- `semaphore`: ten threads pass through a semaphore of three permits,
  each working for one second inside.
- `print`: two threads each print one greeting while holding a lock.
- `recursive`: a function re-enters a re-entrant lock three levels deep.
- `shared`: two readers hold a reader/writer lock together; a writer
  holds it alone.
- `timed`: two threads try to take a lock within 100 ms; the one that
  gets it holds it for a second, so the other reports a timeout.

### `syncdemos-tensor [--shape N N N]`

Builds a tensor of the given shape (default `2 3 4`) filled with
0, 1, 2, … and prints it before and after swapping its last two
dimensions.

### `syncdemos-producer-consumer`

Options: `--producers` (default 3), `--consumers` (default 3),
`--capacity` of the buffer (default 10, must be positive) and
`--duration` in seconds (default 5). Producers push numbered items into
the bounded buffer, consumers take them out; after the duration the run
is stopped, producers quit at once and consumers drain what is left
before exiting.

## Library use

Every function that writes a trace takes an `out` stream; when it is
omitted, standard output is used.

### Atomics (`syncdemos.atomics`)

- `AtomicInt(value=0)` — `load()`, `store(value)` and
  `compare_exchange(expected, desired)`, which sets the value only if it
  still equals `expected` and returns whether it did.
- `AtomicFlag()` — `test_and_set()` sets the flag and returns its
  previous state; `clear()` resets it.
- `SpinLock()` — busy-waits on an `AtomicFlag`; `acquire()`, `release()`,
  and usable as a context manager.
- `cas_increment(counter, worker_id, times=5, delay=0.05, out=None)`
  returns the values this worker wrote.
- `tas_critical_section(lock, worker_id, hold=0.1, out=None)`.
- `run_cas_demo(threads=2, increments=5, delay=0.05, out=None)` returns
  the final count; `run_tas_demo(threads=2, hold=0.1, out=None)`;
  `run_combined_demo(hold=0.1, increments=3, out=None)` returns the final
  count of its counter stage.

```python
import io
from syncdemos.atomics import run_cas_demo

out = io.StringIO()
total = run_cas_demo(threads=2, increments=5, delay=0.0, out=out)  # 10
```

### Locks (`syncdemos.locks`)

- `locked_counter(threads=2, iterations=10000)` returns the final count.
- `access_resource(semaphore, worker_id, work=1.0, out=None)` and
  `run_semaphore_demo(threads=10, permits=3, work=1.0, out=None)`, which
  returns the largest number of workers seen inside at once.
- `SharedLock()` — a reader/writer lock: `acquire_shared()` /
  `release_shared()`, `acquire()` / `release()`, and the `shared()` and
  `exclusive()` context managers. New readers wait while a writer is
  waiting; releasing a lock that is not held raises `RuntimeError`.
- `print_safe(lock, message, out=None)`,
  `recursive_function(lock, count, out=None)` (expects a
  `threading.RLock`), `reader(lock, reader_id, hold=0.2, out=None)`,
  `writer(lock, writer_id, hold=0.5, out=None)` and
  `timed_task(lock, idx, timeout=0.1, hold=1.0, out=None)`, which returns
  whether the lock was taken.

```python
from syncdemos.locks import SharedLock, locked_counter

total = locked_counter(threads=2, iterations=10000)  # 20000

lock = SharedLock()
with lock.shared():
    ...  # many readers may be here at once
with lock.exclusive():
    ...  # only one writer, and no readers
```

### Producer/consumer (`syncdemos.producer_consumer`)

`ProducerConsumer(capacity=10, out=None)` owns a bounded buffer.
`run(producers=3, consumers=3, duration=5.0, produce_delay=0.1,
consume_delay=0.15)` starts the workers, lets them run for `duration`
seconds, calls `stop()`, joins them and returns the consumed items in
order. An instance runs once; calling `run` after it has stopped raises
`RuntimeError`. The `producer(worker_id, delay)` and
`consumer(worker_id, delay)` loops can also be started on your own
threads. The `produced`, `consumed`, `peak` (most items held at once)
and `stopped` properties report on the run.

### Tensors (`syncdemos.tensor`)

Tensors here are plain nested lists.

- `arange_tensor(shape)` — filled with 0, 1, 2, … in row-major order.
- `swap_last_two(tensor)` — a new tensor with the last two dimensions
  exchanged; needs at least two dimensions.
- `format_tensor(tensor)` — a text rendering: one block of aligned rows
  per `(i,.,.)` slice, then a line such as `[ CPULongType{2,4,3} ]`.

```python
from syncdemos.tensor import arange_tensor, swap_last_two, format_tensor

t = arange_tensor((2, 3, 4))
print(format_tensor(swap_last_two(t)))
```

## What it does not do

The tensor helpers only build, transpose and print nested lists; there
is no arithmetic, broadcasting or other tensor operation. The atomics
are built on ordinary locks, so they show the algorithms rather than
lock-free performance.