"""Engine runtime deferred-call scheduler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

TaskCallback = Callable[[], None]


@dataclass(slots=True)
class _Task:
    task_id: int
    due_seconds: float
    callback: TaskCallback


class Scheduler:
    """Manually clocked one-shot scheduler.

    The host loop owns time: it calls `advance` with elapsed seconds (or
    `run_due` with an absolute clock) and due callbacks run synchronously on
    the caller's thread, in due order. Ties run in scheduling order.
    """

    def __init__(self) -> None:
        self._now_seconds = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_seconds(self) -> float:
        return self._now_seconds

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        return len(self._tasks)

    def call_later(self, delay_seconds: float, callback: TaskCallback) -> int:
        """Schedule a one-shot callback after delay."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_seconds = self._now_seconds + delay_seconds
        self._tasks[task_id] = _Task(task_id=task_id, due_seconds=due_seconds, callback=callback)
        heappush(self._queue, (due_seconds, task_id))
        return task_id

    def is_pending(self, task_id: int) -> bool:
        """Return whether the task is still queued."""
        return task_id in self._tasks

    def cancel(self, task_id: int) -> None:
        """Cancel a scheduled task if it exists."""
        self._tasks.pop(task_id, None)

    def advance(self, delta_seconds: float) -> int:
        """Advance scheduler clock and run due callbacks."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float) -> int:
        """Run callbacks due at or before `now_seconds`."""
        if now_seconds < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = now_seconds
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id, None)
            if task is None:
                continue
            task.callback()
            executed += 1
        return executed

    def flush(self) -> int:
        """Run every pending callback now, regardless of due time."""
        if not self._queue:
            return 0
        latest = max(due for due, _ in self._queue)
        return self.run_due(max(latest, self._now_seconds))
