"""
Synchronous publish/subscribe for settings lifecycle and change events.
"""

import itertools
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List


class EventKind(Enum):
    """Events announced by the settings service."""
    STORE_READY = "store_ready"
    VALUE_CHANGED = "value_changed"


Callback = Callable[[Any], None]


@dataclass
class Subscription:
    id: int
    kind: EventKind
    callback: Callback


class ChangeNotifier:
    """
    Delivers events to subscribers in registration order.

    A subscriber that raises is logged and skipped; the remaining
    subscribers still run and the publisher never sees the exception.
    """

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        self._subscriptions: Dict[EventKind, List[Subscription]] = {
            kind: [] for kind in EventKind
        }
        self._ids = itertools.count(1)

    def subscribe(self, kind: EventKind, callback: Callback) -> int:
        """
        Subscribe to an event kind.

        Args:
            kind: Event kind to listen to
            callback: Called with the event payload (None for STORE_READY,
                a ChangeEvent for VALUE_CHANGED)

        Returns:
            Subscription ID for unsubscribing
        """
        if not callable(callback):
            raise ValueError("Callback must be callable")

        subscription = Subscription(next(self._ids), EventKind(kind), callback)
        self._subscriptions[subscription.kind].append(subscription)
        self.logger.debug(f"New subscription {subscription.id} for {subscription.kind.value}")
        return subscription.id

    def unsubscribe(self, subscription_id: int) -> bool:
        """Remove a subscription. Returns False for an unknown id."""
        for kind, subscriptions in self._subscriptions.items():
            for subscription in subscriptions:
                if subscription.id == subscription_id:
                    subscriptions.remove(subscription)
                    self.logger.debug(f"Unsubscribed {subscription_id} from {kind.value}")
                    return True
        self.logger.warning(f"Unsubscribe called with unknown id: {subscription_id}")
        return False

    def publish(self, kind: EventKind, payload: Any = None) -> int:
        """Deliver an event. Returns the number of subscribers that failed."""
        # Copy so subscribers may (un)subscribe while being notified
        subscriptions = list(self._subscriptions[kind])
        failures = 0

        for subscription in subscriptions:
            try:
                subscription.callback(payload)
            except Exception:
                failures += 1
                self.logger.exception(
                    f"Subscriber {subscription.id} failed handling {kind.value}"
                )

        return failures

    def subscriber_count(self, kind: EventKind) -> int:
        return len(self._subscriptions[kind])
