"""Signal dispatch, per-type singletons and key event routing."""

from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Hashable, Iterable, List, Optional, Protocol, Type, TypeVar

S = TypeVar("S")
C = TypeVar("C")


class Dispatcher(Generic[S]):
    """Delivers each emitted signal to every subscriber, in subscription order."""

    def __init__(self) -> None:
        self._listeners: List[Callable[[S], Any]] = []

    def emit(self, signal: S) -> None:
        for listener in list(self._listeners):
            listener(signal)

    def subscribe(self, callback: Callable[[S], Any]) -> None:
        self._listeners.append(callback)


_dispatchers: Dict[type, Dispatcher[Any]] = {}
_singletons: Dict[type, Any] = {}


def dispatcher_for(signal_type: type) -> Dispatcher[Any]:
    """The shared dispatcher for one signal type."""
    return _dispatchers.setdefault(signal_type, Dispatcher())


def create_singleton(cls: Type[C], *args: Any, **kwargs: Any) -> C:
    """Build the shared instance of cls, replacing any previous one."""
    instance = cls(*args, **kwargs)
    _singletons[cls] = instance
    return instance


def get_singleton(cls: Type[C]) -> C:
    """The shared instance of cls; raises LookupError if none was created."""
    try:
        return _singletons[cls]
    except KeyError:
        raise LookupError(f"no {cls.__name__} instance has been created") from None


class KeySource(Protocol):
    def poll_keys(self) -> Iterable[Hashable]:
        """Keys pressed since the last poll."""


class EventHandler:
    """Routes key presses from a window to the callback registered for each key."""

    def __init__(self, window: Optional[KeySource] = None) -> None:
        self._window = window
        self._callbacks: Dict[Hashable, Callable[[Hashable], Any]] = {}

    def on_key_pressed(self, key: Hashable, callback: Callable[[Hashable], Any]) -> None:
        """Register callback for key, replacing any earlier one."""
        self._callbacks[key] = callback

    def key_pressed(self, key: Hashable) -> bool:
        """Run the callback for key; return whether one was registered."""
        callback = self._callbacks.get(key)
        if callback is None:
            return False
        callback(key)
        return True

    def process_events(self) -> None:
        """Handle every key the window reports."""
        if self._window is None:
            return
        for key in self._window.poll_keys():
            self.key_pressed(key)