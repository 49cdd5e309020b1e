"""Scoped event subscriptions.

An EventHub dispatches named events to subscribed handlers. Every
subscription is an object that must be released; releasing is idempotent and
one-shot subscriptions release themselves after their first delivery.
Subclasses can hook the first acquisition and the last release to attach
and detach an underlying event source only while someone is listening.
"""

from typing import Any, Callable, Dict, List


POINTER_MOVE = 'pointer_move'
POINTER_RELEASE = 'pointer_release'


class Subscription:
    """Handle for one registered handler

    Usable as a context manager; leaving the block releases it.
    """

    def __init__(self, hub: 'EventHub', kind: str, handler: Callable[[Any], None], once: bool):
        self.hub = hub
        self.kind = kind
        self.handler = handler
        self.once = once
        self.active = True

    def release(self):
        """Detach the handler (no-op if already released)"""
        if not self.active:
            return
        self.active = False
        self.hub._detach(self)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.release()
        return False

    def __repr__(self) -> str:
        state = 'active' if self.active else 'released'
        return f"Subscription({self.kind}, {state})"


class EventHub:
    """Dispatches named events to scoped subscriptions"""

    def __init__(self):
        self._subscriptions: Dict[str, List[Subscription]] = {}

    def subscribe(self, kind: str, handler: Callable[[Any], None], once: bool = False) -> Subscription:
        """Register a handler for an event kind

        Args:
            kind: Event name (e.g. POINTER_MOVE)
            handler: Called with the event payload
            once: Release automatically after the first delivery

        Returns:
            Subscription to release when done
        """
        was_idle = self.subscription_count() == 0
        subscription = Subscription(self, kind, handler, once)
        self._subscriptions.setdefault(kind, []).append(subscription)
        if was_idle:
            self._on_first_subscription()
        return subscription

    def emit(self, kind: str, payload: Any = None) -> int:
        """Deliver an event to every active subscription of that kind

        Returns:
            Number of handlers called
        """
        delivered = 0
        for subscription in list(self._subscriptions.get(kind, ())):
            if not subscription.active:
                continue
            if subscription.once:
                subscription.release()
            subscription.handler(payload)
            delivered += 1
        return delivered

    def subscription_count(self, kind: str = None) -> int:
        if kind is not None:
            return len(self._subscriptions.get(kind, ()))
        return sum(len(subs) for subs in self._subscriptions.values())

    def _detach(self, subscription: Subscription):
        subs = self._subscriptions.get(subscription.kind, [])
        if subscription in subs:
            subs.remove(subscription)
        if not subs:
            self._subscriptions.pop(subscription.kind, None)
        if self.subscription_count() == 0:
            self._on_last_release()

    def _on_first_subscription(self):
        """Hook: called when the hub goes from no subscriptions to one"""

    def _on_last_release(self):
        """Hook: called when the last subscription is released"""
