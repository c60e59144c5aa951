"""
Pane Group - reference implementation of the pane container capability.

A group holds an ordered set of DockPanes (its logical children), tracks
the selected one and coalesces relayout requests onto the dispatcher.
When it becomes empty it can remove itself from its own parent; what
happens above that is up to the layout collaborator owning the parent.
"""
from typing import List, Optional

from loguru import logger

from dockpane.core.config import DispatchSettings
from dockpane.core.dispatch import Dispatcher, DispatcherOperation, DispatcherPriority, OperationStatus
from dockpane.core.events import Signal
from dockpane.core.exceptions import ElementTreeError
from dockpane.ui.elements import Element

from .pane import DockPane


class PaneGroup(Element):
    """
    Ordered container of panes with a selection slot.

    Signals:
        members_changed(): Member added or removed
        selection_changed(old, new): Selected pane changed
        layout_updated(): A coalesced relayout pass ran
        removed(group): The group detached itself from its parent

    Example:
        group = PaneGroup("bottom")
        layout_root.add_child(group)
        group.add_member(DockPane("Output"))
        group.add_member(DockPane("Problems"), select=True)
    """

    def __init__(self, name: str = "", settings: Optional[DispatchSettings] = None,
                 dispatcher: Optional[Dispatcher] = None):
        super().__init__(name=name)
        self._settings = settings or DispatchSettings()
        self._dispatcher = dispatcher
        self._selected: Optional[DockPane] = None
        self._layout_op: Optional[DispatcherOperation] = None
        self.layout_passes = 0

        self.members_changed = Signal(f"{self!r}.MembersChanged")
        self.selection_changed = Signal(f"{self!r}.SelectionChanged")
        self.layout_updated = Signal(f"{self!r}.LayoutUpdated")
        self.removed = Signal(f"{self!r}.Removed")

    # === Members ===

    @property
    def members(self) -> List[DockPane]:
        return [child for child in self.children if isinstance(child, DockPane)]

    def member_count(self) -> int:
        return len(self.members)

    def add_member(self, pane: DockPane, index: Optional[int] = None, select: bool = False) -> None:
        """
        Append (or insert at `index`) a pane.

        The first member becomes selected automatically.

        Raises:
            ElementTreeError: pane already belongs to another element
        """
        if not isinstance(pane, DockPane):
            raise ElementTreeError(f"{self!r} only accepts DockPane members, got {pane!r}")
        self.add_child(pane, index)
        if select or self._selected is None:
            self.set_selected(pane)

    def remove_member(self, pane: DockPane) -> bool:
        """
        Remove `pane`. When it was selected, the pane now at its index (or
        the new last pane) becomes selected.
        """
        members = self.members
        if pane not in members:
            return False

        index = members.index(pane)
        was_selected = pane is self._selected
        self.remove_child(pane)
        pane.is_selected = False

        if was_selected:
            remaining = self.members
            successor = remaining[min(index, len(remaining) - 1)] if remaining else None
            self._selected = successor
            if successor is not None:
                successor.is_selected = True
            self.selection_changed.emit(pane, successor)
        return True

    def on_child_added(self, child: Element) -> None:
        logger.debug(f"{self!r} gained member {child!r}")
        self.members_changed.emit()

    def on_child_removed(self, child: Element) -> None:
        logger.debug(f"{self!r} lost member {child!r}")
        self.members_changed.emit()

    def remove_self(self) -> bool:
        """Detach this group from its parent element."""
        parent = self.parent
        if parent is None:
            return False
        if self._layout_op is not None:
            self._layout_op.abort()
            self._layout_op = None
        parent.remove_child(self)
        logger.debug(f"{self!r} removed from {parent!r}")
        self.removed.emit(self)
        return True

    # === Selection ===

    def get_selected(self) -> Optional[DockPane]:
        return self._selected

    def set_selected(self, pane: Optional[DockPane]) -> None:
        if pane is not None and pane.parent is not self:
            logger.warning(f"{self!r} cannot select non-member {pane!r}")
            return
        old = self._selected
        if pane is old:
            return
        if old is not None:
            old.is_selected = False
        self._selected = pane
        if pane is not None:
            pane.is_selected = True
        self.selection_changed.emit(old, pane)

    # === Layout ===

    def request_relayout(self) -> None:
        """Queue one layout pass; requests made before it runs are merged."""
        if self._layout_op is not None and self._layout_op.status == OperationStatus.PENDING:
            return
        dispatcher = self._dispatcher or Dispatcher.current()
        priority = DispatcherPriority.parse(self._settings.relayout_priority)
        self._layout_op = dispatcher.post(self._perform_layout, priority)

    def _perform_layout(self) -> None:
        self._layout_op = None
        self.layout_passes += 1
        logger.debug(f"{self!r} layout pass #{self.layout_passes} (selected={self._selected!r})")
        self.layout_updated.emit()
