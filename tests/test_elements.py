"""
Unit tests for the element tree, routed events and the focus manager.
"""
import pytest
from unittest.mock import MagicMock

from dockpane.core.events import RoutedEvent, RoutedEventArgs, RoutingStrategy
from dockpane.core.exceptions import ElementTreeError
from dockpane.ui.elements import Element, FocusManager


@pytest.fixture
def tree():
    """root -> [panel -> [edit, button], footer]"""
    root = Element("root")
    panel = Element("panel")
    edit = Element("edit", focusable=True)
    button = Element("button", focusable=True)
    footer = Element("footer", focusable=True)
    root.add_child(panel)
    panel.add_child(edit)
    panel.add_child(button)
    root.add_child(footer)
    return root, panel, edit, button, footer


# =============================================================================
# Tree
# =============================================================================

class TestTree:

    def test_parent_and_children(self, tree):
        root, panel, edit, button, footer = tree
        assert panel.parent is root
        assert root.children == [panel, footer]
        assert edit.root is root

    def test_insert_at_index(self, tree):
        root, panel, _, _, footer = tree
        header = Element("header")
        root.add_child(header, index=0)
        assert root.children == [header, panel, footer]

    def test_ancestors_and_descendants(self, tree):
        root, panel, edit, button, footer = tree
        assert list(edit.ancestors()) == [panel, root]
        assert list(root.iter_descendants()) == [panel, edit, button, footer]
        assert list(panel.iter_descendants(include_self=True)) == [panel, edit, button]

    def test_is_ancestor_of(self, tree):
        root, panel, edit, _, footer = tree
        assert root.is_ancestor_of(edit)
        assert not panel.is_ancestor_of(footer)
        assert not edit.is_ancestor_of(edit)
        assert not root.is_ancestor_of(None)

    def test_find_ancestor_by_type(self, tree):
        class Panel(Element):
            pass

        root = Element("root")
        panel = Panel("panel")
        leaf = Element("leaf")
        root.add_child(panel)
        panel.add_child(leaf)

        assert leaf.find_ancestor(Panel) is panel
        assert panel.find_ancestor(Panel) is None

    def test_adding_owned_child_raises(self, tree):
        root, panel, edit, _, _ = tree
        with pytest.raises(ElementTreeError):
            root.add_child(edit)

    def test_re_adding_to_same_parent_is_noop(self, tree):
        _, panel, edit, button, _ = tree
        panel.add_child(edit)
        assert panel.children == [edit, button]

    def test_cycles_rejected(self, tree):
        root, panel, edit, _, _ = tree
        with pytest.raises(ElementTreeError):
            edit.add_child(root)
        with pytest.raises(ElementTreeError):
            panel.add_child(panel)

    def test_remove_child(self, tree):
        root, panel, _, _, footer = tree
        assert root.remove_child(footer) is True
        assert footer.parent is None
        assert root.remove_child(footer) is False


# =============================================================================
# Routed events
# =============================================================================

class TestRoutedEvents:

    BubbleEvent = RoutedEvent("Bubble")
    DirectEvent = RoutedEvent("Direct", RoutingStrategy.DIRECT)

    def test_bubbles_from_source_to_root(self, tree):
        root, panel, edit, _, _ = tree
        order = []
        for node in (root, panel, edit):
            node.add_handler(self.BubbleEvent, lambda args, node=node: order.append(node.name))

        args = edit.raise_event(self.BubbleEvent)

        assert order == ["edit", "panel", "root"]
        assert args.source is edit
        assert args.event is self.BubbleEvent

    def test_handled_stops_route(self, tree):
        root, panel, edit, _, _ = tree
        root_handler = MagicMock()
        root.add_handler(self.BubbleEvent, root_handler)
        panel.add_handler(self.BubbleEvent, lambda args: setattr(args, "handled", True))

        edit.raise_event(self.BubbleEvent)

        root_handler.assert_not_called()

    def test_direct_event_stays_on_source(self, tree):
        root, _, edit, _, _ = tree
        root_handler = MagicMock()
        root.add_handler(self.DirectEvent, root_handler)

        edit.raise_event(self.DirectEvent)

        root_handler.assert_not_called()

    def test_explicit_route(self, tree):
        root, panel, edit, _, _ = tree
        handler = MagicMock()
        root.add_handler(self.BubbleEvent, handler)
        route = edit.build_route(self.BubbleEvent)
        root.remove_child(panel)

        edit.raise_event(self.BubbleEvent, RoutedEventArgs(), route=route)

        handler.assert_called_once()

    def test_remove_handler(self, tree):
        root, _, edit, _, _ = tree
        handler = MagicMock()
        root.add_handler(self.BubbleEvent, handler)
        root.remove_handler(self.BubbleEvent, handler)

        edit.raise_event(self.BubbleEvent)

        handler.assert_not_called()

    def test_pointer_press_carries_click_count(self, tree):
        root, _, edit, _, _ = tree
        received = []
        root.add_handler(Element.PointerPressedEvent, received.append)

        edit.raise_pointer_pressed(click_count=2)

        assert received[0].click_count == 2
        assert received[0].source is edit


# =============================================================================
# Focus
# =============================================================================

class TestFocusManager:

    def test_focus_focusable_element(self, tree, focus_manager):
        _, panel, edit, _, _ = tree
        assert edit.focus() is True
        assert edit.has_focus
        assert focus_manager.focused_element is edit
        assert panel.is_keyboard_focus_within

    def test_unfocusable_element_refuses(self, tree, focus_manager):
        _, panel, _, _, _ = tree
        assert panel.focus() is False
        assert focus_manager.focused_element is None

    def test_hidden_ancestor_blocks_focus(self, tree):
        _, panel, edit, _, _ = tree
        panel.is_visible = False
        assert edit.focus() is False

    def test_focus_changed_signal(self, tree, focus_manager):
        _, _, edit, button, _ = tree
        changes = []
        focus_manager.focus_changed.connect(lambda old, new: changes.append((old, new)))

        edit.focus()
        button.focus()
        button.focus()

        assert changes == [(None, edit), (edit, button)]

    def test_clear_focus(self, tree, focus_manager):
        _, _, edit, _, _ = tree
        edit.focus()
        focus_manager.clear_focus()
        assert focus_manager.focused_element is None
        assert focus_manager.set_focus(None) is False

    def test_scope_remembers_last_focused(self, tree, focus_manager):
        root, panel, edit, button, footer = tree
        panel.is_focus_scope = True

        button.focus()
        footer.focus()

        assert focus_manager.get_focused_element(panel) is button

    def test_scope_forgets_element_that_left(self, tree, focus_manager):
        _, panel, _, button, _ = tree
        panel.is_focus_scope = True
        button.focus()

        panel.remove_child(button)

        assert focus_manager.get_focused_element(panel) is None

    def test_set_focused_element_without_moving_focus(self, tree, focus_manager):
        _, panel, edit, button, _ = tree
        focus_manager.set_focused_element(panel, button)

        assert focus_manager.get_focused_element(panel) is button
        assert focus_manager.focused_element is None

        focus_manager.set_focused_element(panel, None)
        assert focus_manager.get_focused_element(panel) is None

    def test_first_focusable_document_order(self, tree, focus_manager):
        root, panel, edit, button, footer = tree
        assert focus_manager.first_focusable(root) is edit

        edit.is_enabled = False
        assert focus_manager.first_focusable(root) is button

        panel.is_visible = False
        assert focus_manager.first_focusable(root) is footer

    def test_first_focusable_can_exclude_root(self, focus_manager):
        single = Element("single", focusable=True)
        assert focus_manager.first_focusable(single) is single
        assert focus_manager.first_focusable(single, include_root=False) is None

    def test_current_instance_is_shared(self):
        manager = FocusManager()
        FocusManager.set_current(manager)
        assert FocusManager.current() is manager
        assert Element("x").focus_manager is manager
