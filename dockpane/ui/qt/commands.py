from typing import Any, Callable, Union

from PySide6.QtGui import QAction
from PySide6.QtWidgets import QAbstractButton

from dockpane.core.commands import ICommand


def bind_command(target: Union[QAction, QAbstractButton], command: ICommand,
                 parameter: Any = None) -> Callable[[], None]:
    """
    Bind a QAction or button to a command.

    The target's enabled state follows `command.can_execute()` and is
    refreshed on every `can_execute_changed`. Triggering runs the command
    only if it can still execute.

    Returns:
        Callable undoing the binding
    """
    def refresh():
        target.setEnabled(command.can_execute(parameter))

    def run(*_):
        if command.can_execute(parameter):
            command.execute(parameter)

    qt_signal = target.triggered if isinstance(target, QAction) else target.clicked
    qt_signal.connect(run)
    command.can_execute_changed.connect(refresh)
    refresh()

    def unbind():
        command.can_execute_changed.disconnect(refresh)
        qt_signal.disconnect(run)

    return unbind
