"""Unit tests for client-side event triggers."""

import json

import pytest

from htmx_headers.domain.trigger import NotificationLevel, Trigger, notification_trigger


def test_plain_events_render_as_list() -> None:
    """Events without details are sent as comma-separated names."""
    trigger = Trigger().add_event("itemAdded").add_event("cartChanged")
    assert str(trigger) == "itemAdded, cartChanged"


def test_detailed_events_render_as_json() -> None:
    """A single detail switches the whole trigger to a JSON map."""
    trigger = (
        Trigger()
        .add_event("refresh")
        .add_event_detail("itemAdded", "42")
        .add_event_object("cart", total=3)
    )
    assert json.loads(str(trigger)) == {
        "refresh": None,
        "itemAdded": "42",
        "cart": {"total": 3},
    }


def test_re_adding_event_replaces_detail() -> None:
    """Event names are unique within a trigger."""
    trigger = Trigger().add_event_detail("saved", 1).add_event_detail("saved", 2)
    assert trigger.events == ["saved"]
    assert json.loads(str(trigger)) == {"saved": 2}


def test_empty_trigger_is_falsy() -> None:
    assert not Trigger()
    assert str(Trigger()) == ""


def test_notification_trigger_payload() -> None:
    """Notifications carry level, message and extra variables under the key."""
    trigger = notification_trigger(
        "showMessage", NotificationLevel.WARNING, "Disk almost full", {"percent": 91}
    )
    assert json.loads(str(trigger)) == {
        "showMessage": {"level": "warning", "message": "Disk almost full", "percent": 91}
    }


def test_notification_trigger_keeps_reserved_fields() -> None:
    """Variables cannot replace the level or the message."""
    trigger = notification_trigger(
        "showMessage",
        NotificationLevel.INFO,
        "Saved",
        {"level": "error", "message": "spoofed", "count": 2},
    )
    assert json.loads(str(trigger)) == {
        "showMessage": {"level": "info", "message": "Saved", "count": 2}
    }


def test_notification_trigger_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        notification_trigger("showMessage", "fatal", "boom")
