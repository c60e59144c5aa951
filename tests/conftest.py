import os

# Qt tests run headless
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from loguru import logger

from dockpane.core.dispatch import Dispatcher
from dockpane.ui.elements import Element, FocusManager


@pytest.fixture(autouse=True)
def ui_context():
    """Fresh focus manager and dispatcher for every test."""
    focus_manager = FocusManager()
    dispatcher = Dispatcher()
    FocusManager.set_current(focus_manager)
    Dispatcher.set_current(dispatcher)
    yield focus_manager, dispatcher
    FocusManager.set_current(None)
    Dispatcher.set_current(None)


@pytest.fixture
def focus_manager(ui_context):
    return ui_context[0]


@pytest.fixture
def dispatcher(ui_context):
    return ui_context[1]


@pytest.fixture
def log_messages():
    """Capture loguru output as a list of formatted messages."""
    messages = []
    handler_id = logger.add(lambda msg: messages.append(str(msg)), level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)


class RecordingContainer(Element):
    """Minimal pane container recording every capability call."""

    def __init__(self, name: str = "recording"):
        super().__init__(name=name)
        self.calls = []
        self._selected = None

    def add(self, *panes):
        for pane in panes:
            self.add_child(pane)
        return self

    def remove_member(self, pane):
        self.calls.append(("remove_member", pane))
        return self.remove_child(pane)

    def member_count(self):
        return len(self.children)

    def remove_self(self):
        self.calls.append(("remove_self",))
        if self.parent is None:
            return False
        return self.parent.remove_child(self)

    def set_selected(self, pane):
        self.calls.append(("set_selected", pane))
        self._selected = pane

    def get_selected(self):
        return self._selected

    def request_relayout(self):
        self.calls.append(("request_relayout",))

    def call_names(self):
        return [call[0] for call in self.calls]


@pytest.fixture
def container():
    """A RecordingContainer hosted under a layout root element."""
    root = Element("layout-root")
    recording = RecordingContainer()
    root.add_child(recording)
    return recording
