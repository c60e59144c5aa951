"""
dockpane - Dockable pane core for PySide6 docking layouts.

A pane hosts one content element, presents a title and tab label, and is
closed, selected and focus-activated as a unit within its parent group.
"""
from dockpane.core.config import ConfigManager, AppConfig, PaneSettings, DispatchSettings, GeneralSettings
from dockpane.core.events import Signal, RoutedEvent, RoutedEventArgs, CancelEventArgs
from dockpane.core.commands import ICommand, RelayCommand
from dockpane.core.dispatch import Dispatcher, DispatcherPriority
from dockpane.core.exceptions import DockingError, ElementTreeError, ConfigError
from dockpane.core.logging import setup_logging
from dockpane.ui.elements import Element, FocusManager
from dockpane.ui.docking import DockPane, PaneGroup, PaneContainer

__version__ = "0.1.0"

__all__ = [
    "ConfigManager",
    "AppConfig",
    "PaneSettings",
    "DispatchSettings",
    "GeneralSettings",
    "Signal",
    "RoutedEvent",
    "RoutedEventArgs",
    "CancelEventArgs",
    "ICommand",
    "RelayCommand",
    "Dispatcher",
    "DispatcherPriority",
    "DockingError",
    "ElementTreeError",
    "ConfigError",
    "setup_logging",
    "Element",
    "FocusManager",
    "DockPane",
    "PaneGroup",
    "PaneContainer",
]
