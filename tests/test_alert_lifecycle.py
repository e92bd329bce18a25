import asyncio

from barangay_console.modules.alertlifecycle import AlertAction, AlertDescriptor
from barangay_console.modules.alertlifecycle.util import Severity


def test_alert_ids_are_unique_within_one_tick(build_manager):
    manager, _ = build_manager()

    ids = [manager.add_alert({"message": f"alert {n}"}) for n in range(200)]

    assert len(set(ids)) == 200
    assert [a.id for a in manager.alerts] == ids


def test_backup_success_is_auto_dismissed_after_exactly_ten_minutes(build_manager):
    manager, scheduler = build_manager()

    alert_id = manager.add_alert({"kind": "backup-success", "message": "Backup created successfully!"})
    assert manager.get_alert(alert_id) is not None

    asyncio.run(scheduler.advance(10 * 60 - 1))
    assert manager.get_alert(alert_id) is not None

    asyncio.run(scheduler.advance(1))
    assert manager.alerts == ()


def test_persistent_kind_is_never_auto_dismissed(build_manager):
    manager, scheduler = build_manager(persistentKinds=["critical-error"])

    alert_id = manager.add_alert({"kind": "critical-error", "message": "Disk full"})
    asyncio.run(scheduler.advance_minutes(60))

    alert = manager.get_alert(alert_id)
    assert alert is not None
    assert alert.expires_at is None
    assert scheduler.pending == 0


def test_persistent_kind_can_still_be_dismissed_manually(build_manager):
    manager, _ = build_manager(persistentKinds=["critical-error"])
    alert_id = manager.add_alert({"kind": "critical-error", "message": "Disk full"})

    assert manager.dismiss_alert(alert_id)
    assert manager.alerts == ()


def test_auto_dismiss_disabled_keeps_alerts(build_manager):
    manager, scheduler = build_manager(autoDismissEnabled=False)

    manager.add_alert({"kind": "backup-success", "message": "ok"})
    asyncio.run(scheduler.advance_minutes(120))

    assert len(manager.alerts) == 1


def test_dismiss_is_idempotent(build_manager):
    manager, _ = build_manager()
    keep = manager.add_alert({"message": "keep"})
    gone = manager.add_alert({"message": "gone"})

    assert manager.dismiss_alert(gone) is True
    after_first = manager.alerts
    assert manager.dismiss_alert(gone) is False
    assert manager.alerts == after_first
    assert [a.id for a in manager.alerts] == [keep]


def test_dismiss_unknown_id_is_a_noop(build_manager):
    manager, _ = build_manager()
    manager.add_alert({"message": "x"})

    assert manager.dismiss_alert("does-not-exist") is False
    assert len(manager.alerts) == 1


def test_non_dismissible_alert_needs_force(build_manager):
    manager, _ = build_manager()
    alert_id = manager.add_alert({"kind": "data-refresh", "message": "Refreshing...", "dismissible": False})

    assert manager.dismiss_alert(alert_id) is False
    assert manager.get_alert(alert_id) is not None
    assert manager.dismiss_alert(alert_id, force=True) is True
    assert manager.get_alert(alert_id) is None


def test_non_dismissible_alert_is_still_auto_dismissed(build_manager):
    manager, scheduler = build_manager()
    manager.add_alert({"kind": "data-refresh", "message": "Refreshing...", "dismissible": False})

    asyncio.run(scheduler.advance_minutes(10))

    assert manager.alerts == ()


def test_early_dismiss_leaves_timer_armed_but_harmless(build_manager):
    manager, scheduler = build_manager()
    first = manager.add_alert({"kind": "backup-success", "message": "first"})
    manager.dismiss_alert(first)
    # The auto-dismiss timer of the dismissed alert is not cancelled.
    assert scheduler.pending == 1

    asyncio.run(scheduler.advance_minutes(5))
    second = manager.add_alert({"kind": "backup-success", "message": "second"})
    asyncio.run(scheduler.advance_minutes(5))

    assert [a.id for a in manager.alerts] == [second]


def test_clear_all_empties_render_projection(build_manager):
    manager, _ = build_manager()
    for n in range(5):
        manager.add_alert({"message": f"alert {n}", "severity": "warning"})
    assert len(manager.render()) == 5

    assert manager.clear_all_alerts() == 5
    assert manager.render() == []


def test_settings_update_is_not_retroactive(build_manager):
    manager, scheduler = build_manager()
    old = manager.add_alert({"kind": "backup-success", "message": "old"})

    manager.update_settings({"autoDismissMinutes": 1})
    new = manager.add_alert({"kind": "backup-success", "message": "new"})

    asyncio.run(scheduler.advance_minutes(1))
    assert [a.id for a in manager.alerts] == [old]

    asyncio.run(scheduler.advance_minutes(9))
    assert manager.alerts == ()
    assert new not in {a.id for a in manager.alerts}


def test_missing_message_is_rendered_as_empty_text(build_manager):
    manager, _ = build_manager()

    alert_id = manager.add_alert({"kind": "backup-success"})

    assert manager.get_alert(alert_id).message == ""
    assert manager.render()[0].message == ""


def test_malformed_descriptor_does_not_raise(build_manager):
    manager, _ = build_manager()

    alert_id = manager.add_alert({"message": "bad count", "dismissCount": "many", "severity": "purple"})

    alert = manager.get_alert(alert_id)
    assert alert.message == "bad count"
    assert alert.severity is Severity.INFO


def test_descriptor_accepts_console_keys(build_manager):
    manager, _ = build_manager()

    alert_id = manager.add_alert(
        {
            "type": "backup-failed",
            "variant": "danger",
            "message": "Backup creation failed",
            "originalMessage": "Backup creation failed",
            "position": "fixed",
            "action": {"text": "Retry Backup", "icon": "bi bi-arrow-clockwise"},
        }
    )

    alert = manager.get_alert(alert_id)
    assert alert.kind == "backup-failed"
    assert alert.severity is Severity.DANGER
    assert alert.position.value == "fixed"
    assert alert.action.label == "Retry Backup"
    assert alert.dismiss_count == 0


def test_string_dismissible_flags_are_understood():
    assert AlertDescriptor.from_mapping({"message": "a", "dismissible": "false"}).dismissible is False
    assert AlertDescriptor.from_mapping({"message": "b", "dismissible": "No"}).dismissible is False
    assert AlertDescriptor.from_mapping({"message": "c", "dismissible": 0}).dismissible is False
    assert AlertDescriptor.from_mapping({"message": "d", "dismissible": "true"}).dismissible is True
    assert AlertDescriptor(message="e", dismissible=None).dismissible is True


def test_alert_timestamps_follow_the_scheduler_clock(build_manager):
    manager, scheduler = build_manager()
    asyncio.run(scheduler.advance(42))

    alert = manager.get_alert(manager.add_alert(AlertDescriptor(message="hi")))

    assert alert.created_at == scheduler.now()
    assert alert.last_shown_at == scheduler.now()


def test_trigger_action_runs_handler(build_manager):
    manager, _ = build_manager()
    calls = []

    async def retry():
        calls.append("async")

    sync_id = manager.add_alert(AlertDescriptor(message="a", action=AlertAction("Go", lambda: calls.append("sync"))))
    async_id = manager.add_alert(AlertDescriptor(message="b", action=AlertAction("Retry", retry)))

    assert asyncio.run(manager.trigger_action(sync_id)) is True
    assert asyncio.run(manager.trigger_action(async_id)) is True
    assert calls == ["sync", "async"]


def test_trigger_action_swallows_handler_errors(build_manager):
    manager, _ = build_manager()

    def explode():
        raise RuntimeError("boom")

    alert_id = manager.add_alert(AlertDescriptor(message="a", action=AlertAction("Go", explode)))

    assert asyncio.run(manager.trigger_action(alert_id)) is False
    assert asyncio.run(manager.trigger_action("missing")) is False
