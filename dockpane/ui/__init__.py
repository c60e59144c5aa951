"""
dockpane UI layer.

- elements: containment tree and keyboard focus
- mvvm: bindable properties
- docking: DockPane and PaneGroup
- qt: PySide6 adapters (imported explicitly, requires PySide6)
"""
from dockpane.ui.elements import Element, FocusManager, PointerEventArgs
from dockpane.ui.docking import DockPane, PaneGroup, PaneContainer, find_parent_container

__all__ = [
    "Element",
    "FocusManager",
    "PointerEventArgs",
    "DockPane",
    "PaneGroup",
    "PaneContainer",
    "find_parent_container",
]
