"""A small thread pool that splits index ranges, and one-shot background tasks."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections import deque
from functools import partial
from typing import Callable, Deque, List, Optional, Sized

Task = Callable[[], None]


class TaskQueue:
    """A FIFO of callables that counts the tasks not yet finished."""

    def __init__(self) -> None:
        self._tasks: Deque[Task] = deque()
        self._condition = threading.Condition()
        self._remaining = 0

    @property
    def remaining(self) -> int:
        """Tasks added and not yet reported done."""
        with self._condition:
            return self._remaining

    def add_task(self, callback: Task) -> None:
        with self._condition:
            self._tasks.append(callback)
            self._remaining += 1
            self._condition.notify_all()

    def get_task(self) -> Optional[Task]:
        """Pop the oldest task; None if the queue is empty."""
        with self._condition:
            return self._tasks.popleft() if self._tasks else None

    def _next_task(self, timeout: float) -> Optional[Task]:
        """Pop the oldest task, waiting up to timeout seconds for one to arrive."""
        with self._condition:
            if not self._tasks:
                self._condition.wait_for(lambda: bool(self._tasks), timeout)
            return self._tasks.popleft() if self._tasks else None

    def wait_for_completion(self) -> None:
        """Block until every added task has been reported done."""
        with self._condition:
            self._condition.wait_for(lambda: self._remaining <= 0)

    def work_done(self) -> None:
        with self._condition:
            self._remaining -= 1
            self._condition.notify_all()


class ThreadPool:
    """Worker threads that run queued tasks; usable as a context manager."""

    def __init__(self, thread_count: int) -> None:
        if thread_count < 1:
            raise ValueError(f"thread count must be at least 1, got {thread_count}")
        self.thread_count = thread_count
        self._queue = TaskQueue()
        self._running = True
        self._errors: List[Exception] = []
        self._errors_lock = threading.Lock()
        self._workers = [
            threading.Thread(target=self._work, name=f"pool-worker-{i}", daemon=True)
            for i in range(thread_count)
        ]
        for worker in self._workers:
            worker.start()

    def _work(self) -> None:
        while self._running:
            task = self._queue._next_task(0.05)
            if task is None:
                continue
            try:
                task()
            except Exception as exc:
                with self._errors_lock:
                    self._errors.append(exc)
            finally:
                self._queue.work_done()

    def add_task(self, callback: Task) -> None:
        if not self._running:
            raise RuntimeError("thread pool has been stopped")
        self._queue.add_task(callback)

    def wait_for_completion(self) -> None:
        """Wait for all queued tasks; re-raise the first error a task raised."""
        self._queue.wait_for_completion()
        with self._errors_lock:
            errors, self._errors = self._errors, []
        if errors:
            raise errors[0]

    def dispatch(self, element_count: int, callback: Callable[[int, int], None]) -> None:
        """Split 0..element_count into one batch per thread and run callback(start, end) on each.

        Elements left over by the integer division run on the calling thread.
        """
        batch_size = element_count // self.thread_count
        for i in range(self.thread_count):
            start = batch_size * i
            self.add_task(partial(callback, start, start + batch_size))
        covered = batch_size * self.thread_count
        try:
            if covered < element_count:
                callback(covered, element_count)
        finally:
            self.wait_for_completion()

    def map(self, container: Sized, callback: Callable[[int], None]) -> None:
        """Call callback(i) for every index of container, in parallel."""

        def run_range(start: int, end: int) -> None:
            for i in range(start, end):
                callback(i)

        self.dispatch(len(container), run_range)

    def stop(self) -> None:
        """Stop the workers and wait for them to exit."""
        self._running = False
        for worker in self._workers:
            worker.join()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()


class AsyncTask(ABC):
    """Work run on a background thread, at most one run at a time."""

    def __init__(self) -> None:
        self._thread: Optional[threading.Thread] = None
        self._updated = True
        self._running = False
        self._lock = threading.Lock()

    @property
    def running(self) -> bool:
        return self._running

    def is_updated(self) -> bool:
        """True once a run has started and its result has not been consumed."""
        return self._thread is not None and self._updated

    def set_consumed(self) -> None:
        self._updated = False

    def run_task(self) -> None:
        """Start task() in the background unless a run is in progress."""
        with self._lock:
            if self._running:
                return
            self._running = True
            self._updated = True
            self._thread = threading.Thread(target=self._run, daemon=True)
            self._thread.start()

    def _run(self) -> None:
        try:
            self.task()
        finally:
            self._running = False

    def wait_for_completion(self) -> None:
        """Block until the current run, if any, is over."""
        thread = self._thread
        if thread is not None:
            thread.join()

    @abstractmethod
    def task(self) -> None:
        """The work to run in the background."""