"""
JSON-over-UDP output for gesture states.

Each datagram is one JSON object with a "type" field and a "seq" counter
so receivers can drop reordered or stale packets.

Usage:
    from airpointer.controller.udp import UDPGestureController

    with UDPGestureController(target_ip="192.168.1.20") as udp:
        udp.pointer(0.5, 0.5)             # cursor at viewport center
        udp.pinch(0.5, 0.5, active=True)  # press
"""

import json
import logging
import socket

import numpy as np

logger = logging.getLogger(__name__)

BROADCAST_IP = "255.255.255.255"


def to_jsonable(obj):
    """Convert numpy scalars/arrays (and containers of them) to plain Python."""
    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    if isinstance(obj, (np.generic, np.ndarray)):
        return obj.tolist()
    return obj


def encode_message(message: dict) -> bytes:
    return json.dumps(to_jsonable(message), separators=(",", ":")).encode("utf-8")


class UDPGestureController:
    """Sends gesture messages to a single host (or the broadcast address)."""

    GESTURE_PORT = 9090

    def __init__(
        self,
        gesture_port: int = GESTURE_PORT,
        target_ip: str = "127.0.0.1",
        broadcast: bool = False,
    ):
        """
        Args:
            gesture_port: Destination port for gesture datagrams
            target_ip: Destination host, ignored when broadcasting
            broadcast: Send to 255.255.255.255 instead of target_ip
        """
        self.gesture_port = gesture_port
        self.target_ip = BROADCAST_IP if broadcast else target_ip
        self.seq = 0

        self.sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        if broadcast:
            self.sock.setsockopt(socket.SOL_SOCKET, socket.SO_BROADCAST, 1)

    @property
    def address(self) -> tuple[str, int]:
        return self.target_ip, self.gesture_port

    def send(self, msg_type: str, **fields) -> None:
        """Send one message; fields are merged after "type" and "seq"."""
        self.seq += 1
        payload = encode_message({"type": msg_type, "seq": self.seq, **fields})
        self.sock.sendto(payload, self.address)
        logger.debug("UDP -> %s:%d %s", self.target_ip, self.gesture_port, msg_type)

    def pointer(self, x: float, y: float, confidence: float = 0.95) -> None:
        """Cursor position as viewport ratios (0 = left/top, 1 = right/bottom)."""
        self.send("pointer", x=x, y=y, confidence=confidence)

    def pinch(self, x: float, y: float, active: bool, confidence: float = 0.95) -> None:
        """Pinch edge at (x, y): active=True presses, active=False releases."""
        self.send("pinch", x=x, y=y, pinchActive=active, confidence=confidence)

    def state(self, state: dict, viewport_width: float, viewport_height: float) -> None:
        """
        Full published state in viewport pixels.

        Args:
            state: GestureState.to_dict() payload
            viewport_width: Width the cursor coordinates refer to
            viewport_height: Height the cursor coordinates refer to
        """
        self.send("state", **state, viewportWidth=viewport_width, viewportHeight=viewport_height)

    def no_gesture(self) -> None:
        """Hand gone: receivers drop any held interaction."""
        self.send("none")

    def close(self) -> None:
        self.sock.close()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()
