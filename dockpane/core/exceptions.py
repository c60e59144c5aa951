"""
Exception hierarchy for dockpane.

Pane operations (close, activate, attribute setters) report failure through
return values. Exceptions are reserved for structural misuse of the element
tree and for invalid configuration.
"""


class DockingError(Exception):
    """Base exception for the docking framework."""


class ElementTreeError(DockingError):
    """Invalid element tree mutation (e.g. adopting an element that already has a parent)."""


class ConfigError(DockingError):
    """Invalid configuration section or key."""
