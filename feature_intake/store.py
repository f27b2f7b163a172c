import threading
from typing import Callable, List

from feature_intake.models.feature_request import FeatureRequest


class RequestStore:
    """Almacén en memoria de las solicitudes, en orden de inserción."""

    def __init__(self):
        self._lock = threading.Lock()
        self._items: List[FeatureRequest] = []
        self._next_id = 1

    def next_id(self) -> int:
        with self._lock:
            return self._take_id()

    def append(self, record: FeatureRequest) -> None:
        with self._lock:
            self._items.append(record)

    def add(self, build: Callable[[int], FeatureRequest]) -> FeatureRequest:
        """Asigna id y añade el registro en una sola sección crítica."""
        with self._lock:
            record = build(self._take_id())
            self._items.append(record)
        return record

    def all(self) -> List[FeatureRequest]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def _take_id(self) -> int:
        current = self._next_id
        self._next_id += 1
        return current


store = RequestStore()

def get_store() -> RequestStore:
    return store
