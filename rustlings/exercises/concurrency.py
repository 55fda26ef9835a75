"""Concurrency exercises: sharing read-only data and a counter between threads."""

from __future__ import annotations

import threading
import time
from collections.abc import Iterable, Sequence
from concurrent.futures import ThreadPoolExecutor


class JobStatus:
    """A count of completed jobs that several threads may update safely."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._completed = 0

    def complete_one(self) -> None:
        """Record one more completed job."""
        with self._lock:
            self._completed += 1

    def jobs_completed(self) -> int:
        """Return how many jobs have been completed so far."""
        with self._lock:
            return self._completed


def offset_sums(
    numbers: Sequence[int] = tuple(range(100)),
    offsets: Iterable[int] = range(8),
    step: int = 5,
) -> dict[int, int]:
    """Sum every ``step``-th number from each offset, one thread per offset.

    All threads read the same sequence; none of them copies it.
    """
    if step <= 0:
        raise ValueError("step must be positive")
    offsets = list(offsets)
    if any(offset < 0 for offset in offsets):
        raise ValueError("offsets must not be negative")
    shared = numbers

    def sum_from(offset: int) -> int:
        return sum(shared[offset::step])

    if not offsets:
        return {}
    with ThreadPoolExecutor(max_workers=len(offsets)) as pool:
        sums = list(pool.map(sum_from, offsets))
    return dict(zip(offsets, sums))


def run_jobs(
    job_count: int = 10, job_delay: float = 0.25, poll_interval: float = 0.5
) -> list[str]:
    """Complete jobs in a worker thread while polling until all are done.

    Returns the "waiting..." line printed for each poll that found work left.
    """
    if job_count < 0:
        raise ValueError("job_count must not be negative")
    status = JobStatus()

    def worker() -> None:
        for _ in range(job_count):
            time.sleep(job_delay)
            status.complete_one()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    waits: list[str] = []
    while status.jobs_completed() < job_count:
        line = "waiting... "
        print(line)
        waits.append(line)
        time.sleep(poll_interval)
    thread.join()
    return waits