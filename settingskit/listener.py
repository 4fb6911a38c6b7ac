"""A single callback fired when any of several settings change."""

from __future__ import annotations

import threading
from typing import Any, Callable

from .settingdata import Connection


class SettingListener:
    """Invokes one callback whenever any added setting is updated.

    A setting is anything with ``connect_simple(callback, auto_invoke)``
    returning a Connection; ``auto_invoke`` calls the callback right away.
    Leaving the listener's ``with`` block clears the callback and drops
    every connection it made.
    """

    def __init__(self, callback: Callable[[], Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._callback = callback
        self._connections: list[Connection] = []

    def set_callback(self, callback: Callable[[], Any]) -> None:
        with self._lock:
            self._callback = callback

    def reset_callback(self) -> None:
        with self._lock:
            self._callback = None

    def add_setting(self, setting: Any, auto_invoke: bool = False) -> None:
        connection = setting.connect_simple(self.invoke, auto_invoke)
        self._connections.append(connection)

    def invoke(self) -> None:
        with self._lock:
            if self._callback is not None:
                self._callback()

    def __enter__(self) -> "SettingListener":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.reset_callback()
        for connection in self._connections:
            connection.disconnect()
        self._connections.clear()