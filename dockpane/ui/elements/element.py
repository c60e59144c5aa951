"""
Element - node of the runtime containment hierarchy.

Every docking participant (panes, groups, hosted content) is an Element.
The tree is the source of truth for containment: a pane discovers its
container by walking `parent` at call time, and focus/routing follow the
same links.
"""
from typing import Any, Callable, Dict, Iterator, List, Optional, Type, TypeVar

from loguru import logger

from dockpane.core.events import Signal, RoutedEvent, RoutedEventArgs, RoutingStrategy
from dockpane.core.exceptions import ElementTreeError
from dockpane.ui.mvvm.bindable import BindableBase, BindableProperty

E = TypeVar("E", bound="Element")


class PointerEventArgs(RoutedEventArgs):
    """Routed args for a pointer press; `click_count` is 1 for a single click."""

    def __init__(self, event: Optional[RoutedEvent] = None, source: Any = None, click_count: int = 1):
        super().__init__(event, source)
        self.click_count = click_count


class Element(BindableBase):
    """
    Tree node with focus attributes and routed event handlers.

    Attributes:
        name: Optional identifier, used in logs and lookups
        focusable: Element can take keyboard focus itself
        is_enabled / is_visible: Disabled or hidden elements (and their
            subtrees) cannot take focus
        is_focus_scope: Element remembers which descendant last had focus

    Example:
        root = Element("root")
        editor = Element("editor", focusable=True)
        root.add_child(editor)
        editor.focus()
        assert root.is_keyboard_focus_within
    """

    PointerPressedEvent = RoutedEvent("PointerPressed", RoutingStrategy.BUBBLE)

    focusable = BindableProperty(default=False, coerce=bool)
    is_enabled = BindableProperty(default=True, coerce=bool)
    is_visible = BindableProperty(default=True, coerce=bool)
    is_focus_scope = BindableProperty(default=False, coerce=bool)

    def __init__(self, name: str = "", focusable: bool = False, is_focus_scope: bool = False):
        super().__init__()
        self.name = name
        self._parent: Optional["Element"] = None
        self._children: List["Element"] = []
        self._handlers: Dict[RoutedEvent, Signal] = {}
        self.focusable = focusable
        self.is_focus_scope = is_focus_scope

    def __repr__(self) -> str:
        label = f" {self.name!r}" if self.name else ""
        return f"<{self.__class__.__name__}{label}>"

    # === Tree ===

    @property
    def parent(self) -> Optional["Element"]:
        return self._parent

    @property
    def children(self) -> List["Element"]:
        """Logical children in insertion order (copy)."""
        return list(self._children)

    def add_child(self, child: "Element", index: Optional[int] = None) -> None:
        """
        Adopt `child` as a logical child.

        Raises:
            ElementTreeError: child already has another parent, or adopting
                it would create a cycle
        """
        if child is self or child.is_ancestor_of(self):
            raise ElementTreeError(f"Adding {child!r} to {self!r} would create a cycle")
        if child._parent is not None:
            if child._parent is self:
                return
            raise ElementTreeError(f"{child!r} already belongs to {child._parent!r}")

        if index is None:
            self._children.append(child)
        else:
            self._children.insert(index, child)
        child._parent = self
        self.on_child_added(child)

    def remove_child(self, child: "Element") -> bool:
        """Detach `child`. Returns False when it was not a child of this element."""
        if child._parent is not self:
            return False
        self._children.remove(child)
        child._parent = None
        self.on_child_removed(child)
        return True

    def on_child_added(self, child: "Element") -> None:
        """Hook for subclasses."""

    def on_child_removed(self, child: "Element") -> None:
        """Hook for subclasses."""

    def ancestors(self) -> Iterator["Element"]:
        """Parent, grandparent, ... up to the root."""
        node = self._parent
        while node is not None:
            yield node
            node = node._parent

    def iter_descendants(self, include_self: bool = False) -> Iterator["Element"]:
        """Pre-order (document order) traversal of the subtree."""
        if include_self:
            yield self
        for child in list(self._children):
            yield from child.iter_descendants(include_self=True)

    def is_ancestor_of(self, other: Optional["Element"]) -> bool:
        if other is None:
            return False
        return any(node is self for node in other.ancestors())

    def find_ancestor(self, kind: Type[E]) -> Optional[E]:
        """Nearest ancestor that is an instance of `kind`."""
        for node in self.ancestors():
            if isinstance(node, kind):
                return node
        return None

    @property
    def root(self) -> "Element":
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    # === Focus ===

    @property
    def focus_manager(self):
        from .focus import FocusManager
        return FocusManager.current()

    def focus(self) -> bool:
        """Try to make this element the keyboard focus. Returns True on success."""
        return self.focus_manager.set_focus(self)

    @property
    def has_focus(self) -> bool:
        return self.focus_manager.focused_element is self

    @property
    def is_keyboard_focus_within(self) -> bool:
        """True when the focused element is this element or one of its descendants."""
        focused = self.focus_manager.focused_element
        return focused is not None and (focused is self or self.is_ancestor_of(focused))

    # === Routed events ===

    def handlers(self, event: RoutedEvent) -> Signal:
        """Handler list for `event` on this element, created on first use."""
        signal = self._handlers.get(event)
        if signal is None:
            signal = Signal(f"{self!r}.{event.name}")
            self._handlers[event] = signal
        return signal

    def add_handler(self, event: RoutedEvent, handler: Callable) -> None:
        self.handlers(event).connect(handler)

    def remove_handler(self, event: RoutedEvent, handler: Callable) -> None:
        if event in self._handlers:
            self._handlers[event].disconnect(handler)

    def build_route(self, event: RoutedEvent) -> List["Element"]:
        """Elements that receive `event` when raised here, in delivery order."""
        if event.strategy == RoutingStrategy.DIRECT:
            return [self]
        return [self, *self.ancestors()]

    def raise_event(self, event: RoutedEvent, args: Optional[RoutedEventArgs] = None,
                    route: Optional[List["Element"]] = None) -> RoutedEventArgs:
        """
        Deliver `event` along its route, stopping once a handler sets `handled`.

        Args:
            event: Event kind
            args: Arguments; a plain RoutedEventArgs is created when omitted
            route: Precomputed route, for events raised after the element
                left the tree
        """
        if args is None:
            args = RoutedEventArgs()
        if args.event is None:
            args.event = event
        if args.source is None:
            args.source = self

        for node in (route if route is not None else self.build_route(event)):
            signal = node._handlers.get(event)
            if signal is not None:
                signal.emit(args)
            if args.handled:
                logger.debug(f"{event.name} handled at {node!r}")
                break
        return args

    def raise_pointer_pressed(self, click_count: int = 1) -> PointerEventArgs:
        """Report a pointer press on this element (bubbles to ancestors)."""
        args = PointerEventArgs(self.PointerPressedEvent, self, click_count)
        self.raise_event(self.PointerPressedEvent, args)
        return args
