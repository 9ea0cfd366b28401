"""Public alertkit API contracts."""

from alertkit.api.alerts import (
    ActionStyle,
    AlertAction,
    AlertRequest,
    Completion,
    DisplayBehavior,
    QueueItem,
    alerts_equal,
    make_alert,
)
from alertkit.api.logging import AlertLoggingConfig, configure_logging, get_logger
from alertkit.api.presentation import AlertPresenter, create_alert_presenter
from alertkit.api.surfaces import PresentationSurface, RootProvider, SurfaceFactory, SurfaceKind

__all__ = [
    "ActionStyle",
    "AlertAction",
    "AlertLoggingConfig",
    "AlertPresenter",
    "AlertRequest",
    "Completion",
    "DisplayBehavior",
    "PresentationSurface",
    "QueueItem",
    "RootProvider",
    "SurfaceFactory",
    "SurfaceKind",
    "alerts_equal",
    "configure_logging",
    "create_alert_presenter",
    "get_logger",
    "make_alert",
]
