import io
import threading

from syncdemos.atomics import (
    AtomicFlag,
    AtomicInt,
    SpinLock,
    cas_increment,
    main,
    run_cas_demo,
    run_combined_demo,
    run_tas_demo,
    tas_critical_section,
)


def test_atomic_int_load_store():
    value = AtomicInt(7)
    assert value.load() == 7
    value.store(11)
    assert value.load() == 11


def test_compare_exchange_success():
    value = AtomicInt(4)
    assert value.compare_exchange(4, 5) is True
    assert value.load() == 5


def test_compare_exchange_failure_leaves_value():
    value = AtomicInt(4)
    assert value.compare_exchange(3, 9) is False
    assert value.load() == 4


def test_atomic_flag_test_and_set_and_clear():
    flag = AtomicFlag()
    assert flag.test_and_set() is False
    assert flag.test_and_set() is True
    flag.clear()
    assert flag.test_and_set() is False


def test_spinlock_mutual_exclusion():
    lock = SpinLock()
    total = {"n": 0}
    acquired = []
    threads, iterations = 4, 2000

    def work():
        results = []
        for _ in range(iterations):
            results.append(lock.acquire())
            try:
                current = total["n"]
                total["n"] = current + 1
            finally:
                lock.release()
        acquired.extend(results)

    workers = [threading.Thread(target=work) for _ in range(threads)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    final_acquire = lock.acquire()
    lock.release()

    assert final_acquire is True
    assert acquired.count(True) == threads * iterations
    assert len(acquired) == threads * iterations
    assert total["n"] == threads * iterations


def test_spinlock_release_allows_reacquire():
    lock = SpinLock()
    assert lock.acquire() is True
    lock.release()
    assert lock.acquire() is True
    lock.release()


def test_cas_increment_returns_written_values():
    counter = AtomicInt(10)
    out = io.StringIO()
    written = cas_increment(counter, 3, times=4, delay=0, out=out)
    assert written == [11, 12, 13, 14]
    assert counter.load() == 14
    lines = out.getvalue().splitlines()
    assert lines[0] == "[CAS] Thread 3 incremented counter to 11"
    assert len(lines) == 4


def test_cas_demo_final_count():
    out = io.StringIO()
    final = run_cas_demo(threads=3, increments=50, delay=0, out=out)
    assert final == 150
    lines = out.getvalue().splitlines()
    assert lines[-1] == f"Final counter: {final}"
    reported = sorted(int(line.rsplit(" ", 1)[1]) for line in lines[:-1])
    assert reported == list(range(1, 151))


def test_tas_critical_section_output():
    out = io.StringIO()
    tas_critical_section(SpinLock(), 5, hold=0, out=out)
    assert out.getvalue().splitlines() == [
        "[TAS] Thread 5 entered critical section.",
        "[TAS] Thread 5 leaving critical section.",
    ]


def test_tas_demo_sections_do_not_interleave():
    out = io.StringIO()
    run_tas_demo(threads=3, hold=0.01, out=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 6
    seen = set()
    for entered, leaving in zip(lines[::2], lines[1::2]):
        worker = entered.split()[2]
        assert entered.endswith("entered critical section.")
        assert leaving == f"[TAS] Thread {worker} leaving critical section."
        seen.add(worker)
    assert seen == {"1", "2", "3"}


def test_combined_demo():
    out = io.StringIO()
    assert run_combined_demo(hold=0.01, increments=3, out=out) == 6
    assert out.getvalue().splitlines()[-1] == "Final counter: 6"


def test_main_combined(capsys):
    assert main(["combined"]) == 0
    assert "Final counter: 6" in capsys.readouterr().out