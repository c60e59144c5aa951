"""
Pane Tab Strip

QTabBar presenting the members of a PaneGroup.
"""
from typing import Callable, Dict, List, Optional, Tuple

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QMouseEvent
from PySide6.QtWidgets import QTabBar, QWidget
from loguru import logger

from dockpane.ui.docking import DockPane, PaneGroup


class PaneTabStrip(QTabBar):
    """
    Tab bar mirroring a PaneGroup.

    Features:
    - One tab per member, labelled with the pane's tab_label
    - Close buttons routed through each pane's close command
    - Current tab follows the group's selection; picking a tab selects
      and activates the pane
    - A single click on a tab reports a pointer press to its pane

    Signals:
        close_rejected(int): Close button pressed while the pane's command could not execute
    """

    close_rejected = Signal(int)

    def __init__(self, group: PaneGroup, parent: Optional[QWidget] = None):
        """
        Initialize tab strip.

        Args:
            group: Group to present
            parent: Parent widget
        """
        super().__init__(parent)
        self.setTabsClosable(True)
        self.setElideMode(Qt.ElideRight)
        self.setUsesScrollButtons(True)

        self._group = group
        self._panes: List[DockPane] = []
        self._pane_hooks: Dict[DockPane, Tuple[Callable, Callable]] = {}
        self._syncing = False

        self.currentChanged.connect(self._on_current_changed)
        self.tabCloseRequested.connect(self._on_tab_close_requested)

        group.members_changed.connect(self.refresh)
        group.selection_changed.connect(self._on_selection_changed)
        group.layout_updated.connect(self._sync_current)

        self.refresh()
        logger.debug(f"PaneTabStrip bound to {group!r}")

    @property
    def group(self) -> PaneGroup:
        return self._group

    @property
    def panes(self) -> List[DockPane]:
        return list(self._panes)

    def pane_at(self, index: int) -> Optional[DockPane]:
        if 0 <= index < len(self._panes):
            return self._panes[index]
        return None

    # === Group -> tabs ===

    def refresh(self) -> None:
        """Rebuild the tabs from the group's members."""
        self._syncing = True
        try:
            for pane in self._panes:
                self._unhook(pane)
            while self.count():
                self.removeTab(0)

            self._panes = self._group.members
            for index, pane in enumerate(self._panes):
                self.addTab(pane.tab_label)
                self._hook(pane)
                self._sync_close_button(index)
        finally:
            self._syncing = False
        self._sync_current()

    def _hook(self, pane: DockPane) -> None:
        def on_property_changed(name, value, pane=pane):
            if name == "tab_label" and pane in self._panes:
                self.setTabText(self._panes.index(pane), value)

        def on_can_close_changed(pane=pane):
            if pane in self._panes:
                self._sync_close_button(self._panes.index(pane))

        pane.property_changed.connect(on_property_changed)
        pane.close_command.can_execute_changed.connect(on_can_close_changed)
        self._pane_hooks[pane] = (on_property_changed, on_can_close_changed)

    def _unhook(self, pane: DockPane) -> None:
        hooks = self._pane_hooks.pop(pane, None)
        if hooks is None:
            return
        on_property_changed, on_can_close_changed = hooks
        pane.property_changed.disconnect(on_property_changed)
        pane.close_command.can_execute_changed.disconnect(on_can_close_changed)

    def close_button(self, index: int) -> Optional[QWidget]:
        """Close button of tab `index`; its side depends on the style."""
        for side in (QTabBar.ButtonPosition.RightSide, QTabBar.ButtonPosition.LeftSide):
            button = self.tabButton(index, side)
            if button is not None:
                return button
        return None

    def _sync_close_button(self, index: int) -> None:
        pane = self.pane_at(index)
        button = self.close_button(index)
        if pane is not None and button is not None:
            button.setEnabled(pane.close_command.can_execute())

    def _on_selection_changed(self, old, new) -> None:
        self._sync_current()

    def _sync_current(self) -> None:
        selected = self._group.get_selected()
        if selected is None or selected not in self._panes:
            return
        index = self._panes.index(selected)
        if index != self.currentIndex():
            self._syncing = True
            try:
                self.setCurrentIndex(index)
            finally:
                self._syncing = False

    # === Tabs -> panes ===

    def _on_current_changed(self, index: int) -> None:
        if self._syncing:
            return
        pane = self.pane_at(index)
        if pane is not None:
            pane.select_and_activate()

    def _on_tab_close_requested(self, index: int) -> None:
        pane = self.pane_at(index)
        if pane is None:
            return
        if not pane.close_command.can_execute():
            logger.debug(f"Close of {pane!r} not allowed")
            self.close_rejected.emit(index)
            return
        pane.close_command.execute()

    def mousePressEvent(self, event: QMouseEvent):
        if event.button() == Qt.LeftButton:
            pane = self.pane_at(self.tabAt(event.position().toPoint()))
            if pane is not None:
                pane.raise_pointer_pressed(click_count=1)
        super().mousePressEvent(event)
