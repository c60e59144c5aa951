"""
Synchronous observer signal.

Carries every plain notification in the package: property changes, command
invalidation, group membership and selection, and the handler lists behind
routed events. Emission happens on the caller's thread, in connection order;
a failing subscriber is logged and the remaining subscribers still run.
"""
from typing import Callable, List

from loguru import logger


class Signal:
    """
    Named list of callbacks invoked synchronously by emit().

    Connecting the same callback twice keeps a single subscription.
    """

    def __init__(self, name: str = "Signal"):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable) -> None:
        if callback not in self._subscribers:
            self._subscribers.append(callback)

    def disconnect(self, callback: Callable) -> None:
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def emit(self, *args, **kwargs) -> None:
        """Call each subscriber with the given arguments."""
        # Snapshot: subscribers may disconnect themselves while being called
        for callback in list(self._subscribers):
            try:
                callback(*args, **kwargs)
            except Exception as e:
                logger.error(f"Signal '{self.name}' subscriber {callback!r} failed: {e}")
