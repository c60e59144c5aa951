"""
Event System - Synchronous notifications.

Provides:
- Signal: Simple observer pattern for sync notifications (e.g., config changes)
- RoutedEvent / RoutedEventArgs / CancelEventArgs: Events routed along the element tree

Usage:
    from dockpane.core.events import Signal

    changed = Signal("Changed")
    changed.connect(on_changed)
    changed.emit("title", "Output")
"""
from .observer import Signal
from .routed import RoutedEvent, RoutedEventArgs, CancelEventArgs, RoutingStrategy


__all__ = ["Signal", "RoutedEvent", "RoutedEventArgs", "CancelEventArgs", "RoutingStrategy"]
