"""
Routed Events - notifications that travel along the element tree.

Provides:
- RoutingStrategy: DIRECT (source only) or BUBBLE (source, then ancestors)
- RoutedEvent: Identity of an event kind (compared by identity, not name)
- RoutedEventArgs: Payload carrying the source and a `handled` flag
- CancelEventArgs: Routed args with a `cancel` flag for pre-notifications

The route itself is computed by the element tree (see
`dockpane.ui.elements.Element.raise_event`); this module only defines the
event vocabulary.
"""
from enum import Enum
from typing import Any, Optional


class RoutingStrategy(Enum):
    DIRECT = "direct"
    BUBBLE = "bubble"


class RoutedEvent:
    """Identity of a routed event kind."""

    def __init__(self, name: str, strategy: RoutingStrategy = RoutingStrategy.BUBBLE):
        self.name = name
        self.strategy = strategy

    def __repr__(self) -> str:
        return f"RoutedEvent({self.name!r}, {self.strategy.value})"


class RoutedEventArgs:
    """
    Arguments passed to routed event handlers.

    Attributes:
        event: The RoutedEvent being raised
        source: Element that raised the event
        handled: Set by a handler to stop further routing
    """

    def __init__(self, event: Optional[RoutedEvent] = None, source: Any = None):
        self.event = event
        self.source = source
        self.handled = False


class CancelEventArgs(RoutedEventArgs):
    """Routed args for a cancelable pre-notification."""

    def __init__(self, event: Optional[RoutedEvent] = None, source: Any = None):
        super().__init__(event, source)
        self.cancel = False
