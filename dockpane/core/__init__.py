"""
dockpane Core - Infrastructure shared by the docking UI.

Provides:
- Signal / RoutedEvent: Synchronous notifications
- ICommand / RelayCommand: Gated commands for menus and buttons
- Dispatcher: Prioritized single-thread work queue
- ConfigManager: pydantic-validated settings with persistence
- setup_logging: Loguru configuration
"""
from .config import ConfigManager, AppConfig, GeneralSettings, PaneSettings, DispatchSettings
from .events import Signal, RoutedEvent, RoutedEventArgs, CancelEventArgs, RoutingStrategy
from .commands import ICommand, RelayCommand
from .dispatch import Dispatcher, DispatcherOperation, DispatcherPriority
from .exceptions import DockingError, ElementTreeError, ConfigError
from .logging import setup_logging, setup_logging_from_config

__all__ = [
    # Config
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "PaneSettings",
    "DispatchSettings",
    # Events
    "Signal",
    "RoutedEvent",
    "RoutedEventArgs",
    "CancelEventArgs",
    "RoutingStrategy",
    # Commands
    "ICommand",
    "RelayCommand",
    # Dispatch
    "Dispatcher",
    "DispatcherOperation",
    "DispatcherPriority",
    # Errors
    "DockingError",
    "ElementTreeError",
    "ConfigError",
    # Logging
    "setup_logging",
    "setup_logging_from_config",
]
