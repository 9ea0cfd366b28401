"""Public presentation-surface contracts consumed from the host."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Literal, Protocol, runtime_checkable

from alertkit.api.alerts import AlertRequest, Completion

SurfaceKind = Literal["plain", "tabs", "navigation", "alert"]


@runtime_checkable
class PresentationSurface(Protocol):
    """Node of the host presentation tree.

    `present` and `dismiss` must invoke their completion exactly once,
    possibly after returning.
    """

    @property
    def kind(self) -> SurfaceKind:
        """Return surface kind tag."""

    @property
    def alert(self) -> AlertRequest | None:
        """Return the alert shown by this surface, if it is an alert surface."""

    def active_tab(self) -> PresentationSurface | None:
        """Return selected tab child."""

    def modal_child(self) -> PresentationSurface | None:
        """Return surface presented modally over this one."""

    def navigation_entries(self) -> Sequence[PresentationSurface]:
        """Return navigation stack, bottom first."""

    def children(self) -> Sequence[PresentationSurface]:
        """Return generic contained children."""

    def present(
        self,
        child: PresentationSurface,
        *,
        animated: bool,
        completion: Completion | None = None,
    ) -> None:
        """Present `child` modally over this surface."""

    def dismiss(self, *, animated: bool, completion: Completion | None = None) -> None:
        """Dismiss this surface from its presenter."""


RootProvider = Callable[[], PresentationSurface | None]
SurfaceFactory = Callable[[AlertRequest], PresentationSurface]
