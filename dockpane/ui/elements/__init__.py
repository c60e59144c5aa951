"""
Element tree and keyboard focus.

Provides:
- Element: Node of the containment hierarchy with routed event handlers
- PointerEventArgs: Args of the bubbling PointerPressed event
- FocusManager: Keyboard focus owner and focus-scope memory
"""
from .element import Element, PointerEventArgs
from .focus import FocusManager

__all__ = ["Element", "PointerEventArgs", "FocusManager"]
