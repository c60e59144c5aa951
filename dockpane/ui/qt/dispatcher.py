"""
Qt-driven Dispatcher.

Pumps the dockpane dispatch queue from the Qt event loop so deferred work
(relayout passes, click activation checks) runs after Qt has handled the
events already queued.
"""
from typing import Optional

from PySide6.QtCore import QObject, QTimer
from loguru import logger

from dockpane.core.dispatch import Dispatcher


class QtDispatcher(Dispatcher):
    """
    Dispatcher woken by a zero-timeout single-shot QTimer.

    Usage:
        app = QApplication(sys.argv)
        Dispatcher.set_current(QtDispatcher())
    """

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__()
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.setInterval(0)
        self._timer.timeout.connect(self._on_timeout)
        logger.debug("QtDispatcher initialized")

    def _schedule(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def _on_timeout(self) -> None:
        self.process_pending()
        # Work posted while processing below the current lane gets another turn
        if self.has_pending():
            self._timer.start()
