"""In-memory presentation surfaces implementing the host contract."""

from __future__ import annotations

from collections.abc import Sequence

from alertkit.api.alerts import AlertRequest, Completion
from alertkit.api.surfaces import PresentationSurface, SurfaceKind
from alertkit.runtime.scheduler import Scheduler

DEFAULT_TRANSITION_SECONDS = 0.3


class Surface:
    """Plain surface with generic children and at most one modal child.

    Tree state changes immediately on `present`/`dismiss`; completions run
    synchronously, or through `scheduler` after the transition delay when one
    is attached.
    """

    kind: SurfaceKind = "plain"

    def __init__(
        self,
        name: str,
        *,
        scheduler: Scheduler | None = None,
        transition_seconds: float = DEFAULT_TRANSITION_SECONDS,
    ) -> None:
        if transition_seconds < 0.0:
            raise ValueError("transition_seconds must be >= 0")
        self.name = name
        self._scheduler = scheduler
        self._transition_seconds = transition_seconds
        self._children: list[Surface] = []
        self._modal: Surface | None = None
        self._presenting: Surface | None = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"

    @property
    def alert(self) -> AlertRequest | None:
        return None

    @property
    def presenting_surface(self) -> Surface | None:
        return self._presenting

    def active_tab(self) -> PresentationSurface | None:
        return None

    def modal_child(self) -> PresentationSurface | None:
        return self._modal

    def navigation_entries(self) -> Sequence[PresentationSurface]:
        return ()

    def children(self) -> Sequence[PresentationSurface]:
        return tuple(self._children)

    def add_child(self, child: Surface) -> Surface:
        self._children.append(child)
        return child

    def present(
        self,
        child: PresentationSurface,
        *,
        animated: bool,
        completion: Completion | None = None,
    ) -> None:
        if not isinstance(child, Surface):
            raise TypeError(f"cannot present foreign surface: {child!r}")
        if self.alert is not None:
            raise RuntimeError(f"alert surface {self.name} cannot present {child.name}")
        if self._modal is not None:
            raise RuntimeError(f"{self.name} is already presenting {self._modal.name}")
        if child._presenting is not None:
            raise RuntimeError(f"{child.name} is already presented by {child._presenting.name}")
        if child._scheduler is None:
            child._scheduler = self._scheduler
            child._transition_seconds = self._transition_seconds
        self._modal = child
        child._presenting = self
        self._finish(animated, completion)

    def dismiss(self, *, animated: bool, completion: Completion | None = None) -> None:
        """Dismiss surfaces presented by this one, else this one from its presenter."""
        if self._modal is not None:
            self._detach_modal_chain()
        elif self._presenting is not None:
            self._presenting._detach_modal_chain()
        self._finish(animated, completion)

    def _detach_modal_chain(self) -> None:
        current = self
        while current._modal is not None:
            child = current._modal
            current._modal = None
            child._presenting = None
            current = child

    def _finish(self, animated: bool, completion: Completion | None) -> None:
        if completion is None:
            return
        if self._scheduler is None:
            completion()
            return
        delay = self._transition_seconds if animated else 0.0
        self._scheduler.call_later(delay, completion)


class TabSurface(Surface):
    """Tab container with exactly one selected tab."""

    kind: SurfaceKind = "tabs"

    def __init__(
        self,
        name: str,
        tabs: Sequence[Surface] = (),
        *,
        scheduler: Scheduler | None = None,
        transition_seconds: float = DEFAULT_TRANSITION_SECONDS,
    ) -> None:
        super().__init__(name, scheduler=scheduler, transition_seconds=transition_seconds)
        self._children.extend(tabs)
        self._selected_index: int | None = 0 if tabs else None

    @property
    def selected_index(self) -> int | None:
        return self._selected_index

    def select(self, index: int) -> Surface:
        if not 0 <= index < len(self._children):
            raise IndexError(f"tab index out of range: {index}")
        self._selected_index = index
        return self._children[index]

    def add_child(self, child: Surface) -> Surface:
        super().add_child(child)
        if self._selected_index is None:
            self._selected_index = 0
        return child

    def active_tab(self) -> PresentationSurface | None:
        if self._selected_index is None:
            return None
        return self._children[self._selected_index]


class NavigationSurface(Surface):
    """Navigation stack; the last pushed entry is on top."""

    kind: SurfaceKind = "navigation"

    def __init__(
        self,
        name: str,
        entries: Sequence[Surface] = (),
        *,
        scheduler: Scheduler | None = None,
        transition_seconds: float = DEFAULT_TRANSITION_SECONDS,
    ) -> None:
        super().__init__(name, scheduler=scheduler, transition_seconds=transition_seconds)
        self._entries: list[Surface] = list(entries)

    def navigation_entries(self) -> Sequence[PresentationSurface]:
        return tuple(self._entries)

    def push(self, entry: Surface) -> Surface:
        self._entries.append(entry)
        return entry

    def pop(self) -> Surface | None:
        if len(self._entries) <= 1:
            return None
        return self._entries.pop()


class AlertSurface(Surface):
    """Leaf surface displaying one alert request."""

    kind: SurfaceKind = "alert"

    def __init__(
        self,
        request: AlertRequest,
        *,
        scheduler: Scheduler | None = None,
        transition_seconds: float = DEFAULT_TRANSITION_SECONDS,
    ) -> None:
        name = f"alert:{request.title or ''}:{request.message or ''}"
        super().__init__(name, scheduler=scheduler, transition_seconds=transition_seconds)
        self._request = request

    @property
    def alert(self) -> AlertRequest | None:
        return self._request
