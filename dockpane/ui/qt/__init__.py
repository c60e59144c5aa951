"""
PySide6 adapters for the docking core.

Provides:
- QtDispatcher: Dispatcher pumped by the Qt event loop
- bind_command: QAction/button enablement bound to an ICommand
- PaneTabStrip: QTabBar presenting a PaneGroup
"""
from .dispatcher import QtDispatcher
from .commands import bind_command
from .tab_strip import PaneTabStrip

__all__ = ["QtDispatcher", "bind_command", "PaneTabStrip"]
