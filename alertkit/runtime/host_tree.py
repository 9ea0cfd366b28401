"""Topmost presentation-surface resolution."""

from __future__ import annotations

from dataclasses import dataclass

from alertkit.api.surfaces import PresentationSurface, RootProvider
from alertkit.runtime.errors import NoHostAvailable


@dataclass(frozen=True, slots=True)
class HostPath:
    """Root-first chain of surfaces walked to reach the topmost one."""

    surfaces: tuple[PresentationSurface, ...]
    navigation_depth: int = 0

    @property
    def top(self) -> PresentationSurface:
        return self.surfaces[-1]

    def contains(self, surface: PresentationSurface) -> bool:
        return any(item is surface for item in self.surfaces)


def resolve_path(root: PresentationSurface) -> HostPath:
    """Walk from `root` to the surface the user currently sees on top.

    Precedence at each step: alert surfaces are leaves, then the active tab,
    then a modal child, then the whole navigation stack, then all generic
    children. Each step extends the path and continues from its last entry.
    """
    path: list[PresentationSurface] = [root]
    navigation_depth = 0
    while True:
        top = path[-1]
        if top.alert is not None:
            break
        tab = top.active_tab()
        if tab is not None:
            path.append(tab)
            continue
        modal = top.modal_child()
        if modal is not None:
            path.append(modal)
            continue
        entries = top.navigation_entries()
        if entries:
            path.extend(entries)
            navigation_depth += max(len(entries), 1) - 1
            continue
        children = top.children()
        if children:
            path.extend(children)
            continue
        break
    return HostPath(surfaces=tuple(path), navigation_depth=navigation_depth)


def resolve_topmost(root: PresentationSurface) -> PresentationSurface:
    """Return the topmost surface under `root`."""
    return resolve_path(root).top


def require_path(root_provider: RootProvider) -> HostPath:
    """Resolve from the provider's current root or raise `NoHostAvailable`."""
    root = root_provider()
    if root is None:
        raise NoHostAvailable("no root surface to present alerts on")
    return resolve_path(root)


def require_topmost(root_provider: RootProvider) -> PresentationSurface:
    return require_path(root_provider).top
