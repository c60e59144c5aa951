"""
Pane Container capability.

The layout collaborator owns the tree of groups; a pane only needs the
small surface below from whichever ancestor currently holds it.
"""
from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from dockpane.ui.elements import Element
    from .pane import DockPane


@runtime_checkable
class PaneContainer(Protocol):
    """Capability a pane consumes from its parent container."""

    def remove_member(self, pane: "DockPane") -> bool: ...

    def member_count(self) -> int: ...

    def remove_self(self) -> bool: ...

    def set_selected(self, pane: Optional["DockPane"]) -> None: ...

    def get_selected(self) -> Optional["DockPane"]: ...

    def request_relayout(self) -> None: ...


def find_parent_container(element: "Element") -> Optional[PaneContainer]:
    """
    Nearest ancestor of `element` offering the container capability, read at call time.

    The walk stops at an enclosing DockPane: a pane hosted as another pane's
    content has no container of its own.
    """
    from .pane import DockPane

    for node in element.ancestors():
        if isinstance(node, PaneContainer):
            return node
        if isinstance(node, DockPane):
            return None
    return None
