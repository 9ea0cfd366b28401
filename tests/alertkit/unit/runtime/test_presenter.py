from __future__ import annotations

import logging

import pytest

from alertkit.api.alerts import AlertRequest, DisplayBehavior, make_alert
from alertkit.runtime.config import AlertKitConfig
from alertkit.runtime.host_tree import resolve_topmost
from alertkit.runtime.presenter import RuntimeAlertPresenter
from alertkit.runtime.surfaces import AlertSurface, Surface
from tests.alertkit.conftest import CompletionLog, RootHolder, alert


def _visible(root: Surface) -> AlertRequest | None:
    return resolve_topmost(root).alert


def _queued(presenter: RuntimeAlertPresenter) -> list[str | None]:
    return [item.alert.message for item in presenter.queue.items()]


def test_show_presents_when_nothing_visible(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    first = alert("A")
    presenter.show(first, completion=completions.hook("a"))
    assert _visible(root) is first
    assert isinstance(root.modal_child(), AlertSurface)
    assert presenter.has_presented_alert
    assert presenter.is_presented(first)
    assert completions.calls == ["a"]


def test_show_twice_with_equal_alerts_is_idempotent(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    first = alert("A")
    duplicate = alert("A")
    presenter.show(first, completion=completions.hook("first"))
    presenter.show(duplicate, completion=completions.hook("second"))

    assert _visible(root) is first
    assert len(presenter.queue) == 0
    modal = root.modal_child()
    assert modal is not None and modal.modal_child() is None
    assert completions.calls == ["first", "second"]


def test_show_skips_alert_already_queued(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    presenter.postpone(alert("A"))
    presenter.show(alert("A"), completion=completions.hook("skipped"))
    assert _visible(root) is None
    assert _queued(presenter) == ["A"]
    assert completions.calls == ["skipped"]


def test_default_show_requeues_visible_alert(presenter: RuntimeAlertPresenter, root: Surface) -> None:
    first = alert("A")
    second = alert("B")
    presenter.show(first)
    presenter.show(second, DisplayBehavior.DEFAULT)

    assert _visible(root) is second
    assert _queued(presenter) == ["A"]
    assert presenter.queue.items()[0].alert is first
    assert not presenter.is_presented(first)
    assert presenter.is_queued(first)


def test_default_dismiss_presents_most_recent_queued(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    first = alert("A")
    second = alert("B")
    presenter.show(first)
    presenter.show(second)
    presenter.dismiss(second, DisplayBehavior.DEFAULT, completion=completions.hook("dismissed"))

    assert _visible(root) is first
    assert len(presenter.queue) == 0
    assert completions.calls == ["dismissed"]


def test_default_dismiss_with_empty_queue_just_dismisses(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    first = alert("A")
    presenter.show(first)
    presenter.dismiss(first, completion=completions.hook("dismissed"))
    assert _visible(root) is None
    assert root.modal_child() is None
    assert completions.calls == ["dismissed"]


def test_dismiss_of_unpresented_alert_only_completes(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    visible = alert("A")
    presenter.show(visible)
    presenter.dismiss(alert("other"), completion=completions.hook("noop"))
    assert _visible(root) is visible
    assert completions.calls == ["noop"]


def test_dismiss_accepts_structurally_equal_request(presenter: RuntimeAlertPresenter, root: Surface) -> None:
    presenter.show(alert("A"))
    presenter.dismiss(alert("A"))
    assert _visible(root) is None


def test_discard_all_show_clears_queue_and_discards_visible(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    presenter.postpone(alert("A"))
    presenter.postpone(alert("B"))
    presenter.show(alert("C"))
    assert _queued(presenter) == ["A", "B"]

    final = alert("D")
    presenter.show(final, DisplayBehavior.DISCARD_ALL, completion=completions.hook("d"))
    assert _visible(root) is final
    assert len(presenter.queue) == 0
    assert completions.calls == ["d"]

    presenter.dismiss(final)
    assert _visible(root) is None


def test_discard_all_show_without_visible_alert(presenter: RuntimeAlertPresenter, root: Surface) -> None:
    presenter.postpone(alert("A"))
    request = alert("B")
    presenter.show(request, DisplayBehavior.DISCARD_ALL)
    assert _visible(root) is request
    assert len(presenter.queue) == 0


def test_discard_all_dismiss_clears_queue_without_showing_next(
    presenter: RuntimeAlertPresenter, root: Surface
) -> None:
    first = alert("A")
    second = alert("B")
    presenter.show(first)
    presenter.show(second)
    presenter.dismiss(second, DisplayBehavior.DISCARD_ALL)
    assert _visible(root) is None
    assert len(presenter.queue) == 0


def test_passive_show_queues_behind_visible_alert(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    visible = alert("A")
    waiting = alert("B")
    presenter.show(visible)
    presenter.show(waiting, DisplayBehavior.PASSIVE, completion=completions.hook("queued"))

    assert _visible(root) is visible
    assert _queued(presenter) == ["B"]
    assert presenter.queue.items()[0].completion is None
    assert completions.calls == ["queued"]


def test_passive_show_presents_when_nothing_visible(presenter: RuntimeAlertPresenter, root: Surface) -> None:
    request = alert("A")
    presenter.show(request, DisplayBehavior.PASSIVE)
    assert _visible(root) is request


def test_passive_dismiss_requeues_and_show_next_restores(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    visible = alert("C")
    presenter.show(visible)
    presenter.dismiss(visible, DisplayBehavior.PASSIVE, completion=completions.hook("dismissed"))

    assert _visible(root) is None
    assert _queued(presenter) == ["C"]
    assert completions.calls == ["dismissed"]

    presenter.show_next(completion=completions.hook("next"))
    assert _visible(root) is visible
    assert len(presenter.queue) == 0
    assert completions.calls == ["dismissed", "next"]


def test_passive_dismiss_does_not_present_queued_alert(presenter: RuntimeAlertPresenter, root: Surface) -> None:
    presenter.postpone(alert("A"))
    visible = alert("B")
    presenter.show(visible)
    presenter.dismiss(visible, DisplayBehavior.PASSIVE)
    assert _visible(root) is None
    assert _queued(presenter) == ["A", "B"]


def test_show_next_is_lifo(presenter: RuntimeAlertPresenter, root: Surface) -> None:
    first = alert("A")
    second = alert("B")
    presenter.postpone(first)
    presenter.postpone(second)

    presenter.show_next()
    assert _visible(root) is second
    presenter.show_next()
    assert _visible(root) is first
    presenter.show_next()
    assert _visible(root) is None


def test_show_next_runs_item_completion_before_caller(
    presenter: RuntimeAlertPresenter, completions: CompletionLog
) -> None:
    presenter.postpone(alert("A"), completion=completions.hook("item"))
    presenter.show_next(completion=completions.hook("caller"))
    assert completions.calls == ["item", "caller"]


def test_show_next_with_empty_queue_completes(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    presenter.show_next(completion=completions.hook("empty"))
    assert _visible(root) is None
    assert completions.calls == ["empty"]


def test_dismiss_topmost(presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog) -> None:
    presenter.dismiss_topmost(completion=completions.hook("nothing"))
    assert completions.calls == ["nothing"]

    presenter.show(alert("A"))
    presenter.postpone(alert("B"))
    presenter.dismiss_topmost(DisplayBehavior.DISCARD_ALL, completion=completions.hook("discarded"))
    assert _visible(root) is None
    assert len(presenter.queue) == 0
    assert completions.calls == ["nothing", "discarded"]


def test_postpone_keeps_completion_until_presented(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    presenter.postpone(alert("A"), completion=completions.hook("shown"))
    assert completions.calls == []
    presenter.show_next()
    assert completions.calls == ["shown"]


def test_postpone_of_presented_or_queued_alert_completes_immediately(
    presenter: RuntimeAlertPresenter, completions: CompletionLog
) -> None:
    presenter.show(alert("A"))
    presenter.postpone(alert("A"), completion=completions.hook("presented"))
    presenter.postpone(alert("B"))
    presenter.postpone(alert("B"), completion=completions.hook("duplicate"))
    assert _queued(presenter) == ["B"]
    assert completions.calls == ["presented", "duplicate"]


def test_perform_action_runs_handler_then_presents_next(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    first = make_alert(title="Hey", message="First")
    cancel = first.add_cancel(handler=completions.hook("handler"))
    second = make_alert(title="Hey", message="Second")
    presenter.show(first)
    presenter.postpone(second, completion=completions.hook("second"))

    presenter.perform_action(first, cancel, completion=completions.hook("done"))
    assert _visible(root) is second
    assert len(presenter.queue) == 0
    assert completions.calls == ["handler", "second", "done"]


def test_perform_action_without_queue_only_dismisses(
    presenter: RuntimeAlertPresenter, root: Surface, completions: CompletionLog
) -> None:
    request = alert("A")
    ok = request.add_action("OK")
    presenter.show(request)
    presenter.perform_action(request, ok, completion=completions.hook("done"))
    assert _visible(root) is None
    assert completions.calls == ["done"]


def test_perform_action_rejects_foreign_action(presenter: RuntimeAlertPresenter) -> None:
    request = alert("A")
    foreign = alert("B").add_action("OK")
    with pytest.raises(ValueError):
        presenter.perform_action(request, foreign)


def test_missing_host_completes_and_logs(caplog: pytest.LogCaptureFixture, completions: CompletionLog) -> None:
    presenter = RuntimeAlertPresenter(RootHolder(None))
    request = alert("A")
    with caplog.at_level(logging.WARNING, logger="alertkit.runtime.presenter"):
        presenter.show(request, completion=completions.hook("show"))
        presenter.dismiss(request, completion=completions.hook("dismiss"))
        presenter.dismiss_topmost(completion=completions.hook("dismiss_topmost"))
        presenter.show_next(completion=completions.hook("show_next"))

    assert completions.calls == ["show", "dismiss", "dismiss_topmost", "show_next"]
    assert not presenter.is_presented(request)
    assert not presenter.has_presented_alert
    records = [record for record in caplog.records if record.getMessage() == "alert_host_unavailable"]
    assert records
    assert all(record.exc_info is not None for record in records)


def test_host_appearing_later_is_used(completions: CompletionLog) -> None:
    holder = RootHolder(None)
    presenter = RuntimeAlertPresenter(holder, config=AlertKitConfig(default_animated=False))
    presenter.show(alert("A"), completion=completions.hook("missed"))
    root = Surface("root")
    holder.root = root
    request = alert("B")
    presenter.show(request)
    assert _visible(root) is request
    assert completions.calls == ["missed"]


def test_custom_surface_factory_builds_presented_surface(root: Surface) -> None:
    built: list[AlertSurface] = []

    def _factory(request: AlertRequest) -> AlertSurface:
        surface = AlertSurface(request)
        built.append(surface)
        return surface

    presenter = RuntimeAlertPresenter(RootHolder(root), surface_factory=_factory)
    presenter.show(alert("A"))
    assert built and root.modal_child() is built[0]


def test_trace_logging_follows_config(caplog: pytest.LogCaptureFixture, root: Surface) -> None:
    quiet = RuntimeAlertPresenter(RootHolder(root))
    with caplog.at_level(logging.DEBUG, logger="alertkit.runtime.presenter"):
        quiet.show(alert("A"))
    assert not caplog.records

    other_root = Surface("other")
    traced = RuntimeAlertPresenter(RootHolder(other_root), config=AlertKitConfig(trace_enabled=True))
    with caplog.at_level(logging.DEBUG, logger="alertkit.runtime.presenter"):
        traced.show(alert("A"))
    assert any(record.getMessage().startswith("alert_show title=Hey") for record in caplog.records)


def test_dismiss_without_host_leaves_queue_untouched(completions: CompletionLog) -> None:
    presenter = RuntimeAlertPresenter(RootHolder(None))
    presenter.postpone(alert("A"))
    presenter.postpone(alert("B"))

    presenter.dismiss(alert("C"), DisplayBehavior.PASSIVE, completion=completions.hook("passive"))
    assert _queued(presenter) == ["A", "B"]
    presenter.dismiss(alert("X"), DisplayBehavior.DISCARD_ALL, completion=completions.hook("discard"))
    assert _queued(presenter) == ["A", "B"]
    assert completions.calls == ["passive", "discard"]


def test_perform_action_without_host_keeps_queued_alerts(completions: CompletionLog) -> None:
    presenter = RuntimeAlertPresenter(RootHolder(None))
    request = alert("A")
    ok = request.add_action("OK", handler=lambda _action: completions.calls.append("handler"))
    waiting = alert("B")
    presenter.postpone(waiting, completion=completions.hook("b_shown"))

    presenter.perform_action(request, ok, completion=completions.hook("done"))
    assert [item.alert for item in presenter.queue.items()] == [waiting]
    assert completions.calls == ["handler", "done"]
