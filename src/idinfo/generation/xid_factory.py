"""Xid factory: 4-byte seconds | 3-byte machine id | 2-byte pid | 3-byte counter."""

from __future__ import annotations

import base64
import hashlib
import os
import secrets
import socket
import threading
import time
from typing import Callable


def _machine_id() -> bytes:
    return hashlib.md5(socket.gethostname().encode("utf-8")).digest()[:3]


def encode_xid(raw: bytes) -> str:
    """12 raw bytes as 20 lowercase base32hex characters without padding."""
    return base64.b32hexencode(raw).decode("ascii").rstrip("=").lower()


class XidFactory:
    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._machine = _machine_id()
        self._pid = (os.getpid() & 0xFFFF).to_bytes(2, "big")
        self._lock = threading.Lock()
        self._counter = secrets.randbits(24)

    def generate(self) -> str:
        with self._lock:
            self._counter = (self._counter + 1) & 0xFFFFFF
            counter = self._counter
        seconds = int(self._clock()) & 0xFFFFFFFF
        raw = seconds.to_bytes(4, "big") + self._machine + self._pid + counter.to_bytes(3, "big")
        return encode_xid(raw)
