"""
Command System.

Provides:
- ICommand: Gated command interface with can_execute invalidation
- RelayCommand: Command delegating to plain callables
"""
from .base import ICommand
from .relay import RelayCommand

__all__ = [
    "ICommand",
    "RelayCommand",
]
