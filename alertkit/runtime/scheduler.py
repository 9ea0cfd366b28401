"""Deferred callback scheduler for host-side transitions."""

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
    """Clock-driven one-shot scheduler; time only moves when advanced."""

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

    def advance(self, delta_seconds: float) -> int:
        """Advance clock and run due callbacks."""
        if delta_seconds < 0.0:
            raise ValueError("delta_seconds must be >= 0")
        return self.run_due(self._now_seconds + delta_seconds)

    def run_due(self, now_seconds: float | None = None) -> int:
        """Run callbacks due at or before `now_seconds`, including ones they schedule."""
        target = self._now_seconds if now_seconds is None else now_seconds
        if target < self._now_seconds:
            raise ValueError("now_seconds cannot move backwards")
        self._now_seconds = target
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_seconds:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id)
            task.callback()
            executed += 1
        return executed

    def drain(self) -> int:
        """Advance until no tasks remain and return executed count."""
        executed = 0
        while self._queue:
            executed += self.run_due(max(self._now_seconds, self._queue[0][0]))
        return executed
