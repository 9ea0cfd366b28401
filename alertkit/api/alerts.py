"""Public alert request contracts and structural identity."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

Completion = Callable[[], None]


class DisplayBehavior(Enum):
    """Conflict policy applied when showing or dismissing an alert.

    DEFAULT:
        show: present now, or re-queue the presented alert, dismiss it and present.
        dismiss: dismiss and present the most recently queued alert, if any.
    DISCARD_ALL:
        show: clear the queue, discard the presented alert and present.
        dismiss: clear the queue and dismiss without presenting another.
    PASSIVE:
        show: present now, or queue behind the presented alert.
        dismiss: queue the alert itself and dismiss without presenting another.
    """

    DEFAULT = "default"
    DISCARD_ALL = "discard_all"
    PASSIVE = "passive"


class ActionStyle(Enum):
    """Visual role hint for an alert action; rendering belongs to the host."""

    DEFAULT = "default"
    CANCEL = "cancel"
    DESTRUCTIVE = "destructive"


ActionHandler = Callable[["AlertAction"], None]


@dataclass(frozen=True, slots=True)
class AlertAction:
    """One labeled button on an alert."""

    title: str | None
    style: ActionStyle = ActionStyle.DEFAULT
    handler: ActionHandler | None = None


@dataclass(eq=False, slots=True)
class AlertRequest:
    """Presentable alert.

    Equality stays reference identity; use `alerts_equal` for the structural
    comparison the queue and presenter rely on.
    """

    title: str | None = None
    message: str | None = None
    actions: list[AlertAction] = field(default_factory=list)

    @property
    def action_count(self) -> int:
        return len(self.actions)

    def add_action(
        self,
        title: str | None,
        style: ActionStyle = ActionStyle.DEFAULT,
        handler: ActionHandler | None = None,
    ) -> AlertAction:
        """Append an action and return it."""
        action = AlertAction(title=title, style=style, handler=handler)
        self.actions.append(action)
        return action

    def add_cancel(self, title: str = "Cancel", handler: Completion | None = None) -> AlertAction:
        return self.add_action(title, ActionStyle.CANCEL, _ignore_action(handler))

    def add_retry(self, handler: Completion) -> AlertAction:
        return self.add_action("Retry", ActionStyle.DEFAULT, _ignore_action(handler))

    def add_settings(self, open_settings: Completion) -> AlertAction:
        """Add a "Settings" action; `open_settings` is the host's settings launcher."""
        return self.add_action("Settings", ActionStyle.DEFAULT, _ignore_action(open_settings))


@dataclass(frozen=True, slots=True)
class QueueItem:
    """Alert waiting for presentation."""

    alert: AlertRequest
    animated: bool = True
    completion: Completion | None = None


def make_alert(title: str | None = None, message: str | None = None) -> AlertRequest:
    """Create an alert request without actions."""
    return AlertRequest(title=title, message=message)


def alerts_equal(left: AlertRequest, right: AlertRequest) -> bool:
    """Return whether two requests describe the same alert."""
    return (
        left.title == right.title
        and left.message == right.message
        and left.action_count == right.action_count
    )


def _ignore_action(callback: Completion | None) -> ActionHandler | None:
    if callback is None:
        return None

    def _handler(_action: AlertAction) -> None:
        callback()

    return _handler
