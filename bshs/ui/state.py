"""Observable page state: views subscribe to keys and are told about changes."""

from collections import defaultdict
from collections.abc import Callable
from typing import Any

Listener = Callable[[str, Any], None]


class PageState:
    """Transient per-page-view state. Nothing here outlives the view."""

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._listeners: dict[str, list[Listener]] = defaultdict(list)

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """Store a value; notify subscribers only if it changed. Returns True on change."""
        if key in self._values and self._values[key] == value:
            return False
        self._values[key] = value
        for listener in list(self._listeners[key]):
            listener(key, value)
        return True

    def subscribe(self, key: str, listener: Listener) -> Callable[[], None]:
        """Register a listener for one key. Returns an unsubscribe callable."""
        self._listeners[key].append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners[key]:
                self._listeners[key].remove(listener)

        return _unsubscribe

    def snapshot(self) -> dict[str, Any]:
        return dict(self._values)
