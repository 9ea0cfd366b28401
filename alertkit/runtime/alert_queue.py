"""Pending alert queue."""

from __future__ import annotations

from alertkit.api.alerts import AlertRequest, QueueItem, alerts_equal


class AlertQueue:
    """Ordered, deduplicated queue of alerts waiting for presentation.

    Items are appended at the end and popped from the end, so the most
    recently deferred alert is shown first.
    """

    def __init__(self) -> None:
        self._items: list[QueueItem] = []

    def __len__(self) -> int:
        return len(self._items)

    def append(self, item: QueueItem) -> bool:
        """Append `item` unless an equal alert is already queued."""
        if self.contains(item.alert):
            return False
        self._items.append(item)
        return True

    def pop_last(self) -> QueueItem | None:
        """Remove and return the most recently appended item."""
        if not self._items:
            return None
        return self._items.pop()

    def remove_all(self) -> None:
        self._items.clear()

    def contains(self, alert: AlertRequest) -> bool:
        return any(alerts_equal(alert, item.alert) for item in self._items)

    def items(self) -> tuple[QueueItem, ...]:
        """Return oldest-first snapshot."""
        return tuple(self._items)
