"""
Focus Manager - keyboard focus ownership and focus scopes.

One element at a time holds keyboard focus. Focus scopes remember the
descendant that last held focus so the docking layer can restore it when a
pane is activated again.
"""
import weakref
from typing import ClassVar, Optional

from loguru import logger

from dockpane.core.events import Signal

from .element import Element


class FocusManager:
    """
    Tracks the keyboard-focused element.

    Signals:
        focus_changed(old, new): Emitted after focus moves
    """

    _current: ClassVar[Optional["FocusManager"]] = None

    def __init__(self):
        self._focused: Optional[Element] = None
        self._scope_memory: "weakref.WeakKeyDictionary[Element, Element]" = weakref.WeakKeyDictionary()
        self.focus_changed = Signal("FocusChanged")

    @classmethod
    def current(cls) -> "FocusManager":
        if FocusManager._current is None:
            FocusManager._current = FocusManager()
        return FocusManager._current

    @classmethod
    def set_current(cls, manager: Optional["FocusManager"]) -> None:
        FocusManager._current = manager

    @property
    def focused_element(self) -> Optional[Element]:
        return self._focused

    @staticmethod
    def can_receive_focus(element: Optional[Element]) -> bool:
        """Focusable, enabled and visible, with every ancestor enabled and visible."""
        if element is None or not element.focusable:
            return False
        if not (element.is_enabled and element.is_visible):
            return False
        return all(node.is_enabled and node.is_visible for node in element.ancestors())

    def set_focus(self, element: Optional[Element]) -> bool:
        """
        Move keyboard focus to `element`.

        Returns:
            True if `element` holds focus afterwards
        """
        if element is None:
            self.clear_focus()
            return False
        if element is self._focused:
            return True
        if not self.can_receive_focus(element):
            logger.debug(f"Focus refused by {element!r}")
            return False

        old = self._focused
        self._focused = element
        for scope in element.ancestors():
            if scope.is_focus_scope:
                self._scope_memory[scope] = element

        logger.debug(f"Focus moved {old!r} -> {element!r}")
        self.focus_changed.emit(old, element)
        return True

    def clear_focus(self) -> None:
        old = self._focused
        if old is None:
            return
        self._focused = None
        self.focus_changed.emit(old, None)

    def get_focused_element(self, scope: Element) -> Optional[Element]:
        """Element last focused inside `scope`, if it is still inside it."""
        remembered = self._scope_memory.get(scope)
        if remembered is not None and scope.is_ancestor_of(remembered):
            return remembered
        return None

    def set_focused_element(self, scope: Element, element: Optional[Element]) -> None:
        """Record `element` as the remembered focus of `scope` without moving focus."""
        if element is None:
            self._scope_memory.pop(scope, None)
        else:
            self._scope_memory[scope] = element

    def first_focusable(self, root: Element, include_root: bool = True) -> Optional[Element]:
        """First element in document order under `root` that can take focus."""
        if not (root.is_enabled and root.is_visible):
            return None
        if include_root and self.can_receive_focus(root):
            return root
        for child in root.children:
            found = self.first_focusable(child, include_root=True)
            if found is not None:
                return found
        return None

    def move_focus_to_first(self, root: Element) -> bool:
        """Focus the first focusable element of `root`'s subtree."""
        target = self.first_focusable(root)
        return target is not None and self.set_focus(target)
