from __future__ import annotations

from dataclasses import dataclass, field

import pytest

from alertkit.api.alerts import AlertRequest, make_alert
from alertkit.runtime.config import AlertKitConfig
from alertkit.runtime.presenter import RuntimeAlertPresenter
from alertkit.runtime.scheduler import Scheduler
from alertkit.runtime.surfaces import NavigationSurface, Surface, TabSurface


@dataclass(slots=True)
class CompletionLog:
    calls: list[str] = field(default_factory=list)

    def hook(self, label: str):
        return lambda: self.calls.append(label)

    def count(self, label: str) -> int:
        return self.calls.count(label)


@dataclass(slots=True)
class RootHolder:
    root: Surface | None

    def __call__(self) -> Surface | None:
        return self.root


def alert(message: str, *, title: str | None = "Hey", actions: int = 0) -> AlertRequest:
    request = make_alert(title=title, message=message)
    for index in range(actions):
        request.add_action(f"action-{index}")
    return request


@pytest.fixture
def completions() -> CompletionLog:
    return CompletionLog()


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def root() -> Surface:
    return Surface("root")


@pytest.fixture
def presenter(root: Surface) -> RuntimeAlertPresenter:
    return RuntimeAlertPresenter(RootHolder(root), config=AlertKitConfig(default_animated=False))


@pytest.fixture
def deferred_tree(scheduler: Scheduler) -> TabSurface:
    home = NavigationSurface(
        "home",
        (Surface("feed", scheduler=scheduler), Surface("detail", scheduler=scheduler)),
        scheduler=scheduler,
    )
    return TabSurface("tabs", (home, Surface("settings", scheduler=scheduler)), scheduler=scheduler)


@pytest.fixture
def deferred_presenter(deferred_tree: TabSurface) -> RuntimeAlertPresenter:
    return RuntimeAlertPresenter(
        RootHolder(deferred_tree),
        config=AlertKitConfig(default_animated=True, trace_enabled=True),
    )
