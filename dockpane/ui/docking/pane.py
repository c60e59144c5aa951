"""
Dock Pane - a dockable unit hosting one content element.

Covers the pane's side of the contract with its container:
- Pane state: title, tab label, selection, content size, close permission, content
- Close protocol: cancelable Closing, removal with cascading collapse, Closed
- Activation protocol: focus restore with a fallback chain, select-and-raise
- Close command gated by `allow_close`

Usage:
    pane = DockPane("Output", content=Element("log", focusable=True))
    group.add_member(pane)

    pane.closing.connect(lambda args: setattr(args, "cancel", has_unsaved_work()))
    pane.close_command.execute()     # or pane.close()

    pane.select_and_activate()       # bring to front and restore focus
"""
from numbers import Real
from typing import Optional

from loguru import logger

from dockpane.core.commands import RelayCommand
from dockpane.core.config import PaneSettings
from dockpane.core.dispatch import Dispatcher, DispatcherOperation, DispatcherPriority, OperationStatus
from dockpane.core.events import CancelEventArgs, RoutedEvent, RoutedEventArgs, RoutingStrategy, Signal
from dockpane.core.exceptions import ElementTreeError
from dockpane.ui.elements import Element, PointerEventArgs
from dockpane.ui.mvvm.bindable import BindableProperty

from .container import PaneContainer, find_parent_container


def _is_positive_size(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return value > 0


class DockPane(Element):
    """
    Dockable pane with one content element.

    Attributes:
        title: Authoritative display name
        tab_label: Tab strip text; follows `title` until set to something else
        is_selected: Active member of its container (written by the container)
        content_size: Positive docked width/height hint; other values are ignored
        allow_close: Gates `close_command`
        content: Hosted element, kept as the pane's single logical child

    Signals / routed events:
        closing (ClosingEvent): Cancelable, bubbles to ancestors before removal
        closed (ClosedEvent): Informational, bubbles along the pre-removal route
    """

    ClosingEvent = RoutedEvent("Closing", RoutingStrategy.BUBBLE)
    ClosedEvent = RoutedEvent("Closed", RoutingStrategy.BUBBLE)

    tab_label = BindableProperty(default="", coerce=lambda v: "" if v is None else str(v))
    is_selected = BindableProperty(default=False, coerce=bool)
    content_size = BindableProperty(default=225.0, validate=_is_positive_size)
    allow_close = BindableProperty(default=True, coerce=bool, on_changed="_on_allow_close_changed")

    def __init__(
        self,
        title: Optional[str] = None,
        content: Optional[Element] = None,
        settings: Optional[PaneSettings] = None,
        name: str = "",
        focusable: bool = False,
        dispatcher: Optional[Dispatcher] = None,
    ):
        """
        Initialize pane.

        Args:
            title: Display name (settings.default_title when omitted)
            content: Initial hosted element
            settings: Defaults for size, close permission and click activation
            name: Element name used in logs
            focusable: Whether the pane frame itself can take focus
            dispatcher: Queue for deferred activation (Dispatcher.current() when omitted)
        """
        super().__init__(name=name or (title or ""), focusable=focusable)
        self._settings = settings or PaneSettings()
        self._dispatcher = dispatcher
        self._title = ""
        self._content: Optional[Element] = None
        self._is_closed = False
        self._pending_activation: Optional[DispatcherOperation] = None

        self.close_command = RelayCommand(self.close, lambda: self.allow_close, "Close")

        self.content_size = self._settings.default_content_size
        self.allow_close = self._settings.allow_close
        self.title = self._settings.default_title if title is None else title
        if content is not None:
            self.content = content

        self.add_handler(Element.PointerPressedEvent, self._on_pointer_pressed)

    # === Pane state ===

    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: Optional[str]) -> None:
        value = "" if value is None else str(value)
        old = self._title
        if value == old:
            return
        self._title = value
        self.notify_property_changed("title", value)

        # Mirror into the tab label only while it was never customised
        if self.tab_label == old:
            self.tab_label = value

    @property
    def content(self) -> Optional[Element]:
        return self._content

    @content.setter
    def content(self, value: Optional[Element]) -> None:
        old = self._content
        if value is old:
            return
        if value is not None and value.parent is not None and value.parent is not self:
            raise ElementTreeError(f"{value!r} is already hosted by {value.parent!r}")
        if value is self or value.is_ancestor_of(self):
            raise ElementTreeError(f"{value!r} cannot host itself through {self!r}")

        if old is not None:
            self.remove_child(old)
        self._content = value
        if value is not None:
            self.add_child(value)

        logger.debug(f"{self!r} content {old!r} -> {value!r}")
        self.notify_property_changed("content", value)

    @property
    def settings(self) -> PaneSettings:
        return self._settings

    @property
    def is_closed(self) -> bool:
        """True once a close completed; the pane should not be reused."""
        return self._is_closed

    def _on_allow_close_changed(self, old: bool, new: bool) -> None:
        self.close_command.raise_can_execute_changed()

    # === Container lookup ===

    def find_parent_container(self) -> Optional[PaneContainer]:
        """Current parent container, read from the element tree on every call."""
        return find_parent_container(self)

    # === Notifications ===

    @property
    def closing(self) -> Signal:
        """Handlers receiving CancelEventArgs before the pane is removed."""
        return self.handlers(self.ClosingEvent)

    @property
    def closed(self) -> Signal:
        """Handlers receiving RoutedEventArgs after the pane was removed."""
        return self.handlers(self.ClosedEvent)

    # === Close protocol ===

    def close(self) -> bool:
        """
        Close the pane.

        Raises Closing (any listener may cancel), removes the pane from its
        container, asks the container to remove itself when it became empty,
        then raises Closed.

        Returns:
            False if a listener cancelled (or the pane was already closed), True otherwise
        """
        if self._is_closed:
            logger.warning(f"close() called on already closed {self!r}; ignoring")
            return False

        args = CancelEventArgs(self.ClosingEvent, self)
        self.raise_event(self.ClosingEvent, args)
        if args.cancel:
            logger.debug(f"Close of {self!r} cancelled")
            return False

        # Closed must still reach the listeners above the pane after removal
        closed_route = self.build_route(self.ClosedEvent)

        container = self.find_parent_container()
        if container is not None:
            container.remove_member(self)
            if container.member_count() == 0:
                logger.debug(f"{container!r} is empty after closing {self!r}; collapsing")
                container.remove_self()

        self._is_closed = True
        logger.info(f"Closed pane {self!r}")
        self.raise_event(self.ClosedEvent, RoutedEventArgs(self.ClosedEvent, self), route=closed_route)
        return True

    # === Activation protocol ===

    def select_and_activate(self, activate: bool = True) -> None:
        """
        Make this pane the selected member of its container and optionally focus it.

        The container re-lays out before focus moves so the pane is visible.
        """
        container = self.find_parent_container()
        if container is not None and container.get_selected() is not self:
            container.set_selected(self)
            container.request_relayout()

        if activate:
            self.activate()

    def activate(self) -> bool:
        """
        Move keyboard focus into the pane.

        Tries, in order: the element the content's focus scope remembers, the
        first focusable element of the content, the pane itself. Nothing is
        attempted when focus is already inside the pane.

        Returns:
            True if focus was moved
        """
        if self.is_keyboard_focus_within:
            return False

        focus_manager = self.focus_manager
        content = self._content

        if content is not None and content.is_focus_scope:
            remembered = focus_manager.get_focused_element(content)
            if remembered is not None and focus_manager.set_focus(remembered):
                logger.debug(f"{self!r} restored focus to {remembered!r}")
                return True

        if content is not None and focus_manager.move_focus_to_first(content):
            logger.debug(f"{self!r} focused first element of {content!r}")
            return True

        if self.focusable and focus_manager.set_focus(self):
            logger.debug(f"{self!r} focused itself")
            return True

        return False

    def _on_pointer_pressed(self, args: PointerEventArgs) -> None:
        if args.click_count == 1 and self._settings.activate_on_click:
            self.schedule_activation()

    def schedule_activation(self) -> DispatcherOperation:
        """
        Queue a focus check below layout and render work.

        The queued check activates the pane only if focus is still outside it
        when it runs. Repeated calls while a check is pending reuse it.
        """
        pending = self._pending_activation
        if pending is not None and pending.status == OperationStatus.PENDING:
            return pending

        dispatcher = self._dispatcher or Dispatcher.current()
        priority = DispatcherPriority.parse(self._settings.click_activation_priority)
        self._pending_activation = dispatcher.post(self._deferred_activate, priority)
        return self._pending_activation

    def _deferred_activate(self) -> bool:
        self._pending_activation = None
        if self._is_closed or self.is_keyboard_focus_within:
            return False
        return self.activate()
