"""Output channels for published gesture states."""

from .udp import UDPGestureController

__all__ = ["UDPGestureController"]
