"""Alert presentation state machine over a host surface tree."""

from __future__ import annotations

import logging

from alertkit.api.alerts import (
    AlertAction,
    AlertRequest,
    Completion,
    DisplayBehavior,
    QueueItem,
    alerts_equal,
)
from alertkit.api.logging import get_logger
from alertkit.api.surfaces import PresentationSurface, RootProvider, SurfaceFactory
from alertkit.runtime.alert_queue import AlertQueue
from alertkit.runtime.config import AlertKitConfig
from alertkit.runtime.errors import NoHostAvailable, log_recoverable
from alertkit.runtime.host_tree import HostPath, require_path
from alertkit.runtime.surfaces import AlertSurface

logger = get_logger(__name__)


class RuntimeAlertPresenter:
    """Shows at most one alert at a time and queues the rest.

    Every public operation invokes its `completion` exactly once, including
    no-op paths and the case where no host surface is available.
    """

    def __init__(
        self,
        root_provider: RootProvider,
        *,
        surface_factory: SurfaceFactory | None = None,
        queue: AlertQueue | None = None,
        config: AlertKitConfig | None = None,
    ) -> None:
        self._root_provider = root_provider
        self._surface_factory: SurfaceFactory = surface_factory or AlertSurface
        self._queue = queue if queue is not None else AlertQueue()
        self._config = config or AlertKitConfig()

    @property
    def queue(self) -> AlertQueue:
        return self._queue

    @property
    def has_presented_alert(self) -> bool:
        path = self._path()
        return path is not None and path.top.alert is not None

    def is_presented(self, request: AlertRequest) -> bool:
        path = self._path()
        return path is not None and _presented_surface(request, path) is not None

    def is_queued(self, request: AlertRequest) -> bool:
        return self._queue.contains(request)

    def show(
        self,
        request: AlertRequest,
        behavior: DisplayBehavior = DisplayBehavior.DEFAULT,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Present `request`, resolving conflicts with the visible alert per `behavior`."""
        animated = self._animated(animated)
        path = self._path()
        if path is None:
            _complete(completion)
            return
        if _presented_surface(request, path) is not None or self._queue.contains(request):
            self._trace("alert_show_skipped title=%s reason=duplicate", request.title)
            _complete(completion)
            return

        host = path.top
        presented = host.alert
        self._trace(
            "alert_show title=%s behavior=%s displacing=%s",
            request.title,
            behavior.value,
            None if presented is None else presented.title,
        )
        if behavior is DisplayBehavior.DEFAULT:
            if presented is not None:
                self._queue.append(QueueItem(alert=presented, animated=True))
                host.dismiss(
                    animated=False,
                    completion=lambda: self._present_on_top(request, animated, completion),
                )
                return
        elif behavior is DisplayBehavior.DISCARD_ALL:
            self._queue.remove_all()
            if presented is not None:
                host.dismiss(
                    animated=animated,
                    completion=lambda: self._present_on_top(request, animated, completion),
                )
                return
        elif behavior is DisplayBehavior.PASSIVE:
            if presented is not None:
                self._queue.append(QueueItem(alert=request, animated=animated))
                _complete(completion)
                return
        host.present(self._surface_factory(request), animated=animated, completion=completion)

    def dismiss(
        self,
        request: AlertRequest,
        behavior: DisplayBehavior = DisplayBehavior.DEFAULT,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Dismiss `request` if presented, then follow up per `behavior`."""
        animated = self._animated(animated)
        path = self._path()
        if path is None:
            _complete(completion)
            return
        if behavior is DisplayBehavior.DISCARD_ALL:
            self._queue.remove_all()
        elif behavior is DisplayBehavior.PASSIVE:
            self._queue.append(QueueItem(alert=request, animated=True))

        surface = _presented_surface(request, path)
        if surface is None:
            _complete(completion)
            return

        self._trace("alert_dismiss title=%s behavior=%s", request.title, behavior.value)
        if behavior is DisplayBehavior.PASSIVE:
            surface.dismiss(animated=animated, completion=completion)
            return
        item = self._queue.pop_last()
        if item is None:
            surface.dismiss(animated=animated, completion=completion)
            return
        surface.dismiss(animated=animated, completion=lambda: self._show_item(item, completion))

    def dismiss_topmost(
        self,
        behavior: DisplayBehavior = DisplayBehavior.DEFAULT,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        path = self._path()
        presented = None if path is None else path.top.alert
        if presented is None:
            _complete(completion)
            return
        self.dismiss(presented, behavior, animated, completion)

    def show_next(self, animated: bool | None = None, completion: Completion | None = None) -> None:
        """Replace the visible alert with the next queued one, or present the next one."""
        animated = self._animated(animated)
        path = self._path()
        if path is None:
            _complete(completion)
            return
        top = path.top
        if top.alert is not None:
            # Dismissal with DEFAULT behavior pops and shows the next item.
            self.dismiss(top.alert, DisplayBehavior.DEFAULT, animated=False, completion=completion)
            return
        item = self._queue.pop_last()
        if item is None:
            _complete(completion)
            return
        self._trace("alert_show_next title=%s", item.alert.title)
        top.present(
            self._surface_factory(item.alert),
            animated=animated,
            completion=_chain(item.completion, completion),
        )

    def postpone(
        self,
        request: AlertRequest,
        animated: bool | None = None,
        completion: Completion | None = None,
    ) -> None:
        """Queue `request` without presenting or dismissing anything.

        `completion` is kept on the queue item and runs once the alert is
        eventually presented. It runs immediately if nothing was queued.
        """
        animated = self._animated(animated)
        if self.is_presented(request):
            _complete(completion)
            return
        if not self._queue.append(QueueItem(alert=request, animated=animated, completion=completion)):
            _complete(completion)

    def perform_action(
        self,
        request: AlertRequest,
        action: AlertAction,
        completion: Completion | None = None,
    ) -> None:
        """Handle a tap on `action`: close the alert, run the handler, show the next one."""
        if not any(candidate is action for candidate in request.actions):
            raise ValueError(f"action {action.title!r} does not belong to alert {request.title!r}")

        def _after_close() -> None:
            if action.handler is not None:
                action.handler(action)
            item = self._queue.pop_last()
            if item is None:
                _complete(completion)
                return
            self._show_item(item, completion)

        path = self._path()
        self._trace("alert_action title=%s action=%s", request.title, action.title)
        if path is None:
            if action.handler is not None:
                action.handler(action)
            _complete(completion)
            return
        surface = _presented_surface(request, path)
        if surface is None:
            _after_close()
            return
        surface.dismiss(animated=self._config.default_animated, completion=_after_close)

    def _show_item(self, item: QueueItem, completion: Completion | None) -> None:
        self.show(
            item.alert,
            DisplayBehavior.DEFAULT,
            item.animated,
            completion=_chain(item.completion, completion),
        )

    def _present_on_top(
        self,
        request: AlertRequest,
        animated: bool,
        completion: Completion | None,
    ) -> None:
        path = self._path()
        if path is None:
            _complete(completion)
            return
        if path.top.alert is not None:
            # Another alert appeared while the dismissal was pending.
            self.show(request, DisplayBehavior.DEFAULT, animated, completion)
            return
        path.top.present(self._surface_factory(request), animated=animated, completion=completion)

    def _path(self) -> HostPath | None:
        try:
            return require_path(self._root_provider)
        except NoHostAvailable:
            log_recoverable(logger, "alert_host_unavailable", level=logging.WARNING)
            return None

    def _animated(self, animated: bool | None) -> bool:
        return self._config.default_animated if animated is None else animated

    def _trace(self, message: str, *args: object) -> None:
        if self._config.trace_enabled:
            logger.debug(message, *args)


def _presented_surface(request: AlertRequest, path: HostPath) -> PresentationSurface | None:
    for surface in path.surfaces:
        if surface.alert is request:
            return surface
    top = path.top
    if top.alert is not None and alerts_equal(top.alert, request):
        return top
    return None


def _complete(completion: Completion | None) -> None:
    if completion is not None:
        completion()


def _chain(first: Completion | None, second: Completion | None) -> Completion:
    def _run() -> None:
        _complete(first)
        _complete(second)

    return _run


AlertPresenter = RuntimeAlertPresenter
