"""
Observable - Subscribe/publish base for stateful services
"""

import itertools
import threading
from collections import deque
from typing import Any, Callable, Deque, Dict, Tuple

Subscriber = Callable[[Any], None]


class Observable:
    """
    Holds an observer list and publishes a snapshot to every observer.

    Subclasses implement `_snapshot()` and call `_publish()` after each
    mutation while holding `self._lock`, so observers never see a
    half-applied change. The lock is re-entrant: an observer may call
    back into the service that notified it.
    """

    def __init__(self):
        self._lock = threading.RLock()
        self._subscribers: Dict[int, Subscriber] = {}
        self._next_token = itertools.count()
        self._pending: Deque[Tuple[int, Subscriber, Any]] = deque()
        self._publishing = False

    def _snapshot(self) -> Any:
        raise NotImplementedError

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register callback and immediately call it with the current snapshot.

        Args:
            callback: Called with the full snapshot now and after every mutation

        Returns:
            Function that unsubscribes the callback (safe to call twice)
        """
        with self._lock:
            token = next(self._next_token)
            self._subscribers[token] = callback
            callback(self._snapshot())

        def unsubscribe() -> None:
            with self._lock:
                self._subscribers.pop(token, None)

        return unsubscribe

    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def _publish(self) -> None:
        """
        Notify every observer of the current snapshot.

        Notifications triggered by an observer (a mutation made while being
        notified) are queued behind the current round, so each observer gets
        snapshots in mutation order and the last one it sees is current.
        """
        snapshot = self._snapshot()
        for token, callback in list(self._subscribers.items()):
            self._pending.append((token, callback, snapshot))
        if self._publishing:
            return

        self._publishing = True
        try:
            while self._pending:
                token, callback, queued = self._pending.popleft()
                # Skip observers that unsubscribed while queued
                if token in self._subscribers:
                    callback(queued)
        finally:
            self._publishing = False
            self._pending.clear()
