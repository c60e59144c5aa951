"""
Dispatch - prioritized single-thread work queue.

Provides:
- DispatcherPriority: Priority lanes (higher runs first)
- Dispatcher: Queue pumped by the host event loop
- DispatcherOperation: Handle to a posted callback (abortable)

The PySide6-driven variant lives in `dockpane.ui.qt.dispatcher.QtDispatcher`.
"""
from .priority import DispatcherPriority, OperationStatus
from .dispatcher import Dispatcher, DispatcherOperation

__all__ = [
    "DispatcherPriority",
    "OperationStatus",
    "Dispatcher",
    "DispatcherOperation",
]
