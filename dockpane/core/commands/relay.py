from typing import Any, Callable, Optional

from loguru import logger

from .base import ICommand


class RelayCommand(ICommand):
    """
    Command delegating to callables.

    Args:
        execute: Called by execute(); receives the parameter if it accepts one
        can_execute: Predicate gating execution (always True when omitted)
        description: Label shown by hosts
        pass_parameter: Forward the command parameter to the callables

    Example:
        close_command = RelayCommand(pane.close, lambda: pane.allow_close, "Close")
    """

    def __init__(
        self,
        execute: Callable[..., Any],
        can_execute: Optional[Callable[..., bool]] = None,
        description: str = "",
        pass_parameter: bool = False,
    ):
        super().__init__()
        self._execute = execute
        self._can_execute = can_execute
        self._description = description
        self._pass_parameter = pass_parameter

    @property
    def description(self) -> str:
        return self._description or super().description

    def can_execute(self, parameter: Any = None) -> bool:
        if self._can_execute is None:
            return True
        if self._pass_parameter:
            return bool(self._can_execute(parameter))
        return bool(self._can_execute())

    def execute(self, parameter: Any = None) -> Any:
        """
        Run the delegate.

        Hosts are expected to check can_execute() first; execute() itself does
        not re-check so that programmatic callers keep full control.
        """
        logger.debug(f"Executing command '{self.description}'")
        if self._pass_parameter:
            return self._execute(parameter)
        return self._execute()
