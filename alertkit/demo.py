"""Single-screen demo harness."""

from __future__ import annotations

from alertkit.api.alerts import DisplayBehavior, make_alert
from alertkit.api.logging import AlertLoggingConfig, configure_logging, get_logger
from alertkit.api.presentation import create_alert_presenter
from alertkit.runtime.config import load_config, load_env_file
from alertkit.runtime.host_tree import resolve_path
from alertkit.runtime.scheduler import Scheduler
from alertkit.runtime.surfaces import NavigationSurface, Surface, TabSurface

logger = get_logger(__name__)


def build_demo_tree(scheduler: Scheduler, *, transition_seconds: float) -> TabSurface:
    """Tab root whose first tab is a two-level navigation stack."""
    home = NavigationSurface(
        "home",
        (Surface("feed"), Surface("detail")),
        scheduler=scheduler,
        transition_seconds=transition_seconds,
    )
    settings = Surface("settings", scheduler=scheduler, transition_seconds=transition_seconds)
    return TabSurface(
        "tabs",
        (home, settings),
        scheduler=scheduler,
        transition_seconds=transition_seconds,
    )


def main() -> None:
    """Show one alert, postpone a second, then drain the queue with simulated taps."""
    load_env_file()
    config = load_config()
    configure_logging(
        AlertLoggingConfig(
            level_name=config.log_level,
            console_format=config.log_format,
            file_path=config.log_file,
        )
    )
    scheduler = Scheduler()
    root = build_demo_tree(scheduler, transition_seconds=config.transition_seconds)
    presenter = create_alert_presenter(lambda: root, config=config)

    def _log_top(label: str) -> None:
        path = resolve_path(root)
        logger.info(
            "demo_top label=%s top=%r navigation_depth=%d queued=%d",
            label,
            path.top,
            path.navigation_depth,
            len(presenter.queue),
        )

    first = make_alert(title="Hey", message="First")
    cancel = first.add_cancel(handler=lambda: logger.info("demo_cancel_tapped"))
    presenter.show(first, DisplayBehavior.DEFAULT, completion=lambda: _log_top("first_shown"))
    presenter.postpone(make_alert(title="Hey", message="Second"), completion=lambda: _log_top("second_shown"))
    scheduler.drain()

    presenter.perform_action(first, cancel)
    scheduler.drain()

    interrupt = make_alert(title="Network", message="Connection lost")
    interrupt.add_retry(lambda: logger.info("demo_retry_tapped"))
    presenter.show(interrupt, DisplayBehavior.PASSIVE, completion=lambda: _log_top("interrupt_queued"))
    scheduler.drain()

    while presenter.has_presented_alert:
        presenter.dismiss_topmost(completion=lambda: _log_top("dismissed"))
        scheduler.drain()
    _log_top("done")


if __name__ == "__main__":
    main()
