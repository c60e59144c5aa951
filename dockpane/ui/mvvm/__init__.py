"""
MVVM Package - change notification for docking elements.

Provides:
- BindableProperty: Descriptor for auto-notifying, optionally validated properties.
- BindableBase: Base with a generic property_changed signal.
"""
from dockpane.ui.mvvm.bindable import BindableProperty, BindableBase

__all__ = [
    "BindableBase",
    "BindableProperty",
]
