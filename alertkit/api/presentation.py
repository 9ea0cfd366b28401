"""Public alert presentation API contracts."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from alertkit.api.alerts import AlertAction, AlertRequest, Completion, DisplayBehavior
from alertkit.api.surfaces import RootProvider, SurfaceFactory

if TYPE_CHECKING:
    from alertkit.runtime.alert_queue import AlertQueue
    from alertkit.runtime.config import AlertKitConfig


class AlertPresenter(Protocol):
    """Public alert presentation contract."""

    @property
    def queue(self) -> AlertQueue:
        """Return the owned pending-alert queue."""

    @property
    def has_presented_alert(self) -> bool:
        """Return whether the topmost surface is an alert."""

    def is_presented(self, request: AlertRequest) -> bool:
        """Return whether `request` (or an equal alert) is visible."""

    def is_queued(self, request: AlertRequest) -> bool:
        """Return whether an equal alert is waiting in the queue."""

    def show(
        self,
        request: AlertRequest,
        behavior: DisplayBehavior = DisplayBehavior.DEFAULT,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Show alert."""

    def dismiss(
        self,
        request: AlertRequest,
        behavior: DisplayBehavior = DisplayBehavior.DEFAULT,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Dismiss alert."""

    def dismiss_topmost(
        self,
        behavior: DisplayBehavior = DisplayBehavior.DEFAULT,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Dismiss the visible alert, if any."""

    def show_next(self, animated: bool | None = None, completion: Completion | None = None) -> None:
        """Advance to the next queued alert."""

    def postpone(
        self,
        request: AlertRequest,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Queue alert without presenting."""

    def perform_action(
        self,
        request: AlertRequest,
        action: AlertAction,
        completion: Completion | None = None,
    ) -> None:
        """Handle a user tap on an alert action."""


def create_alert_presenter(
    root_provider: RootProvider,
    *,
    surface_factory: SurfaceFactory | None = None,
    queue: AlertQueue | None = None,
    config: AlertKitConfig | None = None,
) -> AlertPresenter:
    """Create default alert presenter implementation."""
    from alertkit.runtime.presenter import RuntimeAlertPresenter

    return RuntimeAlertPresenter(
        root_provider,
        surface_factory=surface_factory,
        queue=queue,
        config=config,
    )
