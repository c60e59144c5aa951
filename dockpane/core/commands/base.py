"""
Command Pattern - Base Interface.

Provides:
- ICommand: Gated command used by menus, buttons and key bindings

A host (menu, tab close button, shortcut) asks `can_execute()` to decide
whether the trigger is enabled, calls `execute()` when triggered, and
re-queries `can_execute()` whenever `can_execute_changed` fires.
"""
from abc import ABC, abstractmethod
from typing import Any

from ..events import Signal


class ICommand(ABC):
    """
    Interface for commands bound to UI triggers.

    Example:
        class SaveCommand(ICommand):
            def __init__(self, document):
                super().__init__()
                self.document = document

            def can_execute(self, parameter=None) -> bool:
                return self.document.is_dirty

            def execute(self, parameter=None):
                self.document.save()
    """

    def __init__(self):
        self.can_execute_changed = Signal(f"{self.__class__.__name__}.CanExecuteChanged")

    @property
    def description(self) -> str:
        """Human-readable description for UI display."""
        return self.__class__.__name__

    @abstractmethod
    def can_execute(self, parameter: Any = None) -> bool:
        """Return True if the command may run."""

    @abstractmethod
    def execute(self, parameter: Any = None) -> Any:
        """Run the command."""

    def raise_can_execute_changed(self) -> None:
        """Tell bound hosts to re-query can_execute()."""
        self.can_execute_changed.emit()
