"""
WPF-Style Bindable Property Descriptor.

Provides automatic change notification on property assignment, reducing
boilerplate in docking elements.

Usage:
    class MyElement(BindableBase):
        title = BindableProperty(default="")
        width = BindableProperty(default=100.0, validate=lambda v: v > 0)

    # Changing the property emits property_changed("title", "Output")
    element.title = "Output"
"""
from typing import Any, Callable, Generic, Optional, TypeVar, Union

from loguru import logger

from dockpane.core.events import Signal

T = TypeVar('T')


class BindableProperty(Generic[T]):
    """
    Descriptor that emits `property_changed` when the property value changes.

    Inspired by WPF's DependencyProperty / INotifyPropertyChanged pattern.

    Args:
        default: Default value for the property.
        coerce: Optional callable to coerce the value before it is validated.
        validate: Optional predicate; values it rejects are dropped and the
            previous value is kept.
        on_changed: Optional hook run after a change, either a callable
            `(obj, old, new)` or the name of a method `(old, new)` on the owner.

    Example:
        class PaneState(BindableBase):
            size = BindableProperty(default=225.0, validate=lambda v: v > 0)
            allow_close = BindableProperty(default=True, on_changed="_on_allow_close_changed")
    """

    def __init__(
        self,
        default: T = None,
        coerce: Optional[Callable[[Any], T]] = None,
        validate: Optional[Callable[[Any], bool]] = None,
        on_changed: Union[str, Callable[[Any, Any, Any], None], None] = None,
    ):
        self.default = default
        self.coerce = coerce
        self.validate = validate
        self.on_changed = on_changed
        self._attr_name: str = ""
        self._public_name: str = ""

    def __set_name__(self, owner: type, name: str) -> None:
        """Called when the descriptor is assigned to a class attribute."""
        self._public_name = name
        self._attr_name = f"_bindable_{name}"

    @property
    def name(self) -> str:
        return self._public_name

    def __get__(self, obj: Any, objtype: type = None) -> T:
        """Get the property value."""
        if obj is None:
            return self  # type: ignore
        return getattr(obj, self._attr_name, self.default)

    def __set__(self, obj: Any, value: Any) -> None:
        """Set the property value and notify if different."""
        if self.coerce is not None:
            value = self.coerce(value)

        if self.validate is not None and not self.validate(value):
            logger.debug(f"Rejected value {value!r} for {type(obj).__name__}.{self._public_name}")
            return

        old_value = getattr(obj, self._attr_name, self.default)
        if old_value == value:
            return

        setattr(obj, self._attr_name, value)

        if self.on_changed is not None:
            if isinstance(self.on_changed, str):
                getattr(obj, self.on_changed)(old_value, value)
            else:
                self.on_changed(obj, old_value, value)

        notify = getattr(obj, 'notify_property_changed', None)
        if notify is not None:
            notify(self._public_name, value)


class BindableBase:
    """
    Base class with WPF-style property change notification.

    Provides:
    - A generic `property_changed(name, value)` signal for any property change.
    - Works with `BindableProperty` descriptors for automatic notification.
    """

    def __init__(self):
        self.property_changed = Signal(f"{self.__class__.__name__}.PropertyChanged")

    def notify_property_changed(self, property_name: str, value: Any) -> None:
        """
        Manually emit a property changed notification.

        Use this for properties not using BindableProperty descriptor.
        """
        self.property_changed.emit(property_name, value)
