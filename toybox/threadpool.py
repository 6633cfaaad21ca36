"""A fixed-size pool of worker threads fed from a shared job queue."""

from __future__ import annotations

import queue
import sys
import threading
import traceback
from typing import Callable, TextIO

Job = Callable[[], object]

_STOP = object()


class ThreadPool:
    """Run submitted callables on a fixed number of worker threads.

    Jobs already queued when the pool shuts down still run before the
    workers stop.
    """

    def __init__(self, size: int, output: TextIO | None = None) -> None:
        if size <= 0:
            raise ValueError("thread pool size must be positive")
        self._jobs: queue.SimpleQueue[object] = queue.SimpleQueue()
        self._output = output
        self._lock = threading.Lock()
        self._closed = False
        self._workers: list[tuple[int, threading.Thread]] = []
        for worker_id in range(size):
            thread = threading.Thread(
                target=self._work,
                args=(worker_id,),
                name=f"pool-worker-{worker_id}",
                daemon=True,
            )
            thread.start()
            self._workers.append((worker_id, thread))

    @property
    def size(self) -> int:
        """Number of worker threads."""
        return len(self._workers)

    def _say(self, text: str) -> None:
        print(text, file=self._output if self._output is not None else sys.stdout)

    def _work(self, worker_id: int) -> None:
        while True:
            job = self._jobs.get()
            if job is _STOP:
                self._say(f"Worker {worker_id} disconnected; shutting down.")
                return
            self._say(f"Worker {worker_id} got a job; executing.")
            try:
                job()  # type: ignore[operator]
            except Exception:
                traceback.print_exc()

    def execute(self, job: Job) -> None:
        """Queue ``job`` to run on the next free worker."""
        with self._lock:
            if self._closed:
                raise RuntimeError("cannot execute jobs on a pool that was shut down")
            self._jobs.put(job)

    def shutdown(self) -> None:
        """Stop accepting jobs, let queued ones finish and join every worker."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            for _ in self._workers:
                self._jobs.put(_STOP)
        for worker_id, thread in self._workers:
            self._say(f"Shutting down worker {worker_id}")
            thread.join()

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.shutdown()