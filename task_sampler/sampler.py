"""
Fan out a fixed number of workers that each sleep a random delay, then
fan back in once every one of them has finished.

Workers report on a shared channel. A supervisor thread waits for all
workers and closes the channel; the caller drains the channel until it
is closed, so returning implies every worker is done.
"""
from __future__ import annotations

import queue
import random
import threading
import time
from typing import Callable, Optional, TextIO

DEFAULT_UNITS = 5
DEFAULT_MAX_DELAY = 3.0

# Put on the channel once, after the last worker has signalled.
_CLOSED = object()


def _random_delay(max_delay: float) -> Callable[[int], float]:
    def delay(unit_id: int) -> float:
        return random.random() * max_delay

    return delay


def _emit(out: Optional[TextIO], line: str) -> None:
    print(line, file=out, flush=True)


def _worker(
    unit_id: int,
    delay_fn: Callable[[int], float],
    channel: queue.Queue,
    out: Optional[TextIO],
) -> None:
    _emit(out, f"Worker {unit_id} starting")
    time.sleep(delay_fn(unit_id))
    _emit(out, f"Worker {unit_id} done")
    channel.put(unit_id)


def _supervise(workers: list[threading.Thread], channel: queue.Queue) -> None:
    for worker in workers:
        worker.join()
    channel.put(_CLOSED)


def run_sampler(
    units: int = DEFAULT_UNITS,
    max_delay: float = DEFAULT_MAX_DELAY,
    delay_fn: Optional[Callable[[int], float]] = None,
    out: Optional[TextIO] = None,
) -> list[int]:
    """
    Run ``units`` workers (ids 1..units) concurrently and wait for all of them.

    ``delay_fn`` maps a worker id to its sleep in seconds; by default each
    worker draws uniformly from [0, max_delay). Lines go to ``out``
    (stdout when None).

    Returns the worker ids in the order they finished.
    """
    delay_fn = delay_fn or _random_delay(max_delay)
    channel: queue.Queue = queue.Queue()

    workers = [
        threading.Thread(
            target=_worker,
            args=(unit_id, delay_fn, channel, out),
            name=f"worker-{unit_id}",
        )
        for unit_id in range(1, units + 1)
    ]
    for worker in workers:
        worker.start()

    supervisor = threading.Thread(
        target=_supervise, args=(workers, channel), name="supervisor"
    )
    supervisor.start()

    finished: list[int] = []
    while True:
        item = channel.get()
        if item is _CLOSED:
            break
        finished.append(item)
    supervisor.join()

    _emit(out, "All workers completed")
    return finished
