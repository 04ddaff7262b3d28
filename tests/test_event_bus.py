import logging

from eightpass.event_bus import EventBus


def test_publish_reaches_subscriber():
    bus = EventBus()
    received = []
    bus.subscribe("settings_changed", received.append)

    bus.publish("settings_changed", "SyncToast")

    assert received == ["SyncToast"]


def test_unsubscribe_stops_delivery():
    bus = EventBus()
    received = []
    bus.subscribe("settings_changed", received.append)
    bus.unsubscribe("settings_changed", received.append)

    bus.publish("settings_changed", "SyncToast")

    assert received == []


def test_unknown_event_is_ignored_with_warning(caplog):
    bus = EventBus()
    with caplog.at_level(logging.WARNING):
        bus.publish("toast_requested")
        bus.subscribe("toast_requested", print)

    assert "unknown event: toast_requested" in caplog.text
