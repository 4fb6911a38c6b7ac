"""Per-path setting state and a small signal/slot mechanism."""

from __future__ import annotations

import itertools
import threading
import weakref
from typing import Any, Callable

from .options import SignalArgs


class Connection:
    """Handle to a callback connected to a Signal."""

    def __init__(self, signal: "Signal", key: int) -> None:
        self._signal = weakref.ref(signal)
        self._key = key

    @property
    def connected(self) -> bool:
        signal = self._signal()
        return signal is not None and signal._has(self._key)

    def disconnect(self) -> None:
        """Stop the callback from being invoked; safe to call repeatedly."""
        signal = self._signal()
        if signal is not None:
            signal._remove(self._key)

    def __enter__(self) -> "Connection":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()


class Signal:
    """A list of callbacks invoked in connection order."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._slots: dict[int, Callable[..., Any]] = {}
        self._ids = itertools.count()

    def connect(self, callback: Callable[..., Any]) -> Connection:
        with self._lock:
            key = next(self._ids)
            self._slots[key] = callback
        return Connection(self, key)

    def invoke(self, *args: Any) -> None:
        with self._lock:
            callbacks = list(self._slots.values())
        for callback in callbacks:
            callback(*args)

    def __len__(self) -> int:
        with self._lock:
            return len(self._slots)

    def _has(self, key: int) -> bool:
        with self._lock:
            return key in self._slots

    def _remove(self, key: int) -> None:
        with self._lock:
            self._slots.pop(key, None)


class SettingData:
    """State shared by every handle to the setting at one path.

    The owning manager is held weakly. It must provide ``get(path)``
    returning the stored value (or None) and ``set(path, value, args)``
    returning whether the value was stored.
    """

    def __init__(self, path: str, instance: Any) -> None:
        self._path = path
        self._instance = weakref.ref(instance)
        self._lock = threading.Lock()
        self._update_iteration = 0
        self.updated = Signal()

    @property
    def path(self) -> str:
        return self._path

    @property
    def update_iteration(self) -> int:
        with self._lock:
            return self._update_iteration

    def notify_update(self, value: Any, args: SignalArgs | None = None) -> None:
        """Record an update and tell every connected callback about it."""
        with self._lock:
            self._update_iteration += 1
        self.updated.invoke(value, args if args is not None else SignalArgs())

    def marshal(self, value: Any, args: SignalArgs | None = None) -> bool:
        """Store value through the manager; False once the manager is gone."""
        manager = self._instance()
        if manager is None:
            return False
        return manager.set(self._path, value, args if args is not None else SignalArgs())

    def unmarshal(self) -> Any:
        """Return the stored value, or None if absent or the manager is gone."""
        manager = self._instance()
        if manager is None:
            return None
        return manager.get(self._path)