from unittest.mock import MagicMock

from dockpane.core.commands import ICommand, RelayCommand


def test_can_execute_defaults_to_true():
    command = RelayCommand(lambda: None)
    assert command.can_execute() is True


def test_execute_returns_delegate_result():
    command = RelayCommand(lambda: "done")
    assert command.execute() == "done"


def test_can_execute_predicate():
    state = {"enabled": False}
    command = RelayCommand(lambda: None, lambda: state["enabled"])

    assert command.can_execute() is False
    state["enabled"] = True
    assert command.can_execute() is True


def test_parameter_forwarding():
    execute = MagicMock()
    command = RelayCommand(execute, lambda p: p == "ok", pass_parameter=True)

    assert command.can_execute("ok") is True
    assert command.can_execute("no") is False
    command.execute("ok")
    execute.assert_called_once_with("ok")


def test_raise_can_execute_changed():
    command = RelayCommand(lambda: None)
    callback = MagicMock()
    command.can_execute_changed.connect(callback)

    command.raise_can_execute_changed()

    callback.assert_called_once()


def test_description():
    assert RelayCommand(lambda: None, description="Close").description == "Close"
    assert RelayCommand(lambda: None).description == "RelayCommand"
    assert isinstance(RelayCommand(lambda: None), ICommand)
