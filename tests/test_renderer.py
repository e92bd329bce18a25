import asyncio

from barangay_console.modules.alertlifecycle import AlertAction, AlertDescriptor
from barangay_console.modules.alertlifecycle.util import AlertPosition, Severity


def test_severity_maps_to_variant_and_default_icon(build_manager):
    manager, _ = build_manager()
    manager.add_alert({"message": "careful", "severity": "warning"})

    (view,) = manager.render()

    assert view.variant == "warning"
    assert view.icon == "bi bi-exclamation-triangle"
    assert view.dismissible is True
    assert view.position == "relative"


def test_action_becomes_button(build_manager):
    manager, _ = build_manager()
    manager.add_alert(
        AlertDescriptor(
            message="Backup creation failed",
            severity=Severity.DANGER,
            icon="bi bi-exclamation-triangle-fill",
            position=AlertPosition.FIXED,
            action=AlertAction("Retry Backup", lambda: None, "bi bi-arrow-clockwise"),
        )
    )

    (view,) = manager.render()

    assert view.icon == "bi bi-exclamation-triangle-fill"
    assert view.position == "fixed"
    assert view.action.label == "Retry Backup"
    assert view.action.variant == "btn-outline-primary"
    assert view.action.icon == "bi bi-arrow-clockwise"


def test_countdown_tracks_remaining_time(build_manager):
    manager, scheduler = build_manager()
    manager.add_alert({"kind": "backup-success", "message": "ok"})

    assert manager.render()[0].countdown_label == "10m"
    asyncio.run(scheduler.advance(9 * 60 + 30))

    (view,) = manager.render()
    assert view.countdown_seconds == 30
    assert view.countdown_label == "1m"


def test_no_countdown_for_persistent_kinds_or_when_hidden(build_manager):
    manager, _ = build_manager(notificationSettings={"showCountdown": False})
    manager.add_alert({"kind": "backup-success", "message": "ok"})
    assert manager.render()[0].countdown_seconds is None

    manager, _ = build_manager()
    manager.add_alert({"kind": "critical-error", "message": "Disk full"})
    assert manager.render()[0].countdown_label is None


def test_retry_badge_for_recurring_alerts(build_manager):
    manager, _ = build_manager()
    manager.add_alert({"kind": "connection-error", "message": "Offline", "dismissCount": 2})

    (view,) = manager.render()

    assert view.recurring is True
    assert view.retry_label == "Recurring issue detected"


def test_retry_badge_hidden_by_display_setting(build_manager):
    manager, _ = build_manager(notificationSettings={"showRetryCount": False})
    manager.add_alert({"kind": "connection-error", "message": "Offline", "dismissCount": 2})

    (view,) = manager.render()

    assert view.recurring is False
    assert view.retry_label is None


def test_sound_only_for_warnings_and_dangers(build_manager):
    manager, _ = build_manager(notificationSettings={"enableSound": True})
    manager.add_alert({"message": "fyi"})
    manager.add_alert({"message": "bad", "severity": "danger"})

    assert [v.play_sound for v in manager.render()] == [False, True]


def test_render_preserves_insertion_order(build_manager):
    manager, _ = build_manager()
    ids = [manager.add_alert({"message": str(n)}) for n in range(3)]

    assert [v.id for v in manager.render()] == ids
    assert manager.render()[0].to_dict()["message"] == "0"
