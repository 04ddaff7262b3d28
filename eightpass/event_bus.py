# eightpass/event_bus.py
"""
Event bus announcing settings changes to whoever is interested.
Uses Qt signals for type-safe event publishing and subscription.
"""

import logging
from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class EventBus(QObject):
    """
    A simple event bus for decoupled settings notifications.
    Uses named signals for different event types.
    """

    settings_changed = pyqtSignal(str)    # key that was written or removed
    password_entered = pyqtSignal()       # password setting was written

    def __init__(self):
        super().__init__()
        logger.debug("EventBus initialized")

    def publish(self, event_name: str, *args):
        """
        Publishes an event to the corresponding signal.
        """
        signal = self._signal(event_name)
        if signal is None:
            logger.warning(f"⚠️ Attempted to publish unknown event: {event_name}")
            return
        signal.emit(*args)
        logger.debug(f"📢 Event published: {event_name} with args: {args}")

    def subscribe(self, event_name: str, slot: callable):
        """
        Subscribes a slot (callback function) to an event signal.
        """
        signal = self._signal(event_name)
        if signal is None:
            logger.warning(f"⚠️ Attempted to subscribe to unknown event: {event_name}")
            return
        signal.connect(slot)
        logger.debug(f"📩 Subscribed to event: {event_name}")

    def unsubscribe(self, event_name: str, slot: callable):
        """
        Unsubscribes a slot from an event signal.
        """
        signal = self._signal(event_name)
        if signal is None:
            logger.warning(f"⚠️ Attempted to unsubscribe from unknown event: {event_name}")
            return
        try:
            signal.disconnect(slot)
            logger.debug(f"📤 Unsubscribed from event: {event_name}")
        except TypeError as e:
            logger.error(f"Error unsubscribing from event {event_name}: {e}")

    def _signal(self, event_name: str):
        if event_name not in ("settings_changed", "password_entered"):
            return None
        return getattr(self, event_name)
