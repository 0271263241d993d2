import logging
from typing import Callable, List


class ObserverEvent:
    """
    Lightweight observer used outside of QObject hierarchies.

    connect() returns a callable that removes the subscription again,
    so owners can release listeners on teardown.
    """

    def __init__(self, name: str):
        self.name = name
        self._subscribers: List[Callable] = []

    def connect(self, callback: Callable) -> Callable[[], None]:
        if callback not in self._subscribers:
            self._subscribers.append(callback)
        return lambda: self.disconnect(callback)

    def disconnect(self, callback: Callable):
        if callback in self._subscribers:
            self._subscribers.remove(callback)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def clear(self):
        self._subscribers.clear()

    def emit(self, *args, **kwargs):
        # Copy so subscribers may disconnect themselves while being notified
        for sub in list(self._subscribers):
            try:
                sub(*args, **kwargs)
            except Exception as e:
                logging.error(f"Event '{self.name}' error in subscriber '{sub}': {e}")
