"""Alert runtime modules."""

from alertkit.runtime.alert_queue import AlertQueue
from alertkit.runtime.config import AlertKitConfig, load_config, load_env_file
from alertkit.runtime.errors import NoHostAvailable
from alertkit.runtime.host_tree import HostPath, resolve_path, resolve_topmost
from alertkit.runtime.logging import setup_logging
from alertkit.runtime.presenter import AlertPresenter
from alertkit.runtime.scheduler import Scheduler
from alertkit.runtime.surfaces import AlertSurface, NavigationSurface, Surface, TabSurface

__all__ = [
    "AlertKitConfig",
    "AlertPresenter",
    "AlertQueue",
    "AlertSurface",
    "HostPath",
    "NavigationSurface",
    "NoHostAvailable",
    "Scheduler",
    "Surface",
    "TabSurface",
    "load_config",
    "load_env_file",
    "resolve_path",
    "resolve_topmost",
    "setup_logging",
]
