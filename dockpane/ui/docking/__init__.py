"""
Docking - panes and the containers holding them.

Features:
- DockPane: title/tab label sync, cancelable close with cascading collapse,
  focus activation with fallback chain, gated close command
- PaneGroup: ordered pane container with selection and coalesced relayout
- PaneContainer: capability protocol a pane consumes from its container

Usage:
    from dockpane.ui.docking import DockPane, PaneGroup

    group = PaneGroup("documents")
    group.add_member(DockPane("Editor", content=editor))
"""
from .container import PaneContainer, find_parent_container
from .pane import DockPane
from .group import PaneGroup

__all__ = [
    "DockPane",
    "PaneGroup",
    "PaneContainer",
    "find_parent_container",
]
