"""
Generic keyed collection used by the in‑memory store.

A ``Collection`` is a map from integer id to entity plus the counter
that hands out the next id.  Ids start at 1, only ever grow and are
never reused, even after deletes.

Every operation runs under the collection's lock, so a
read‑modify‑write (``update``) cannot interleave with another one for
the same id whether callers share one event loop or run in FastAPI's
threadpool.  Collections are independent: there is no lock spanning
two of them.

Entities are pydantic models.  The collection owns its instances and
only ever hands out copies, so callers cannot change stored state by
mutating a returned object.
"""

import threading
from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


class Collection(Generic[ModelT]):
    """Thread‑safe id → entity map with a monotonically increasing counter."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._items: Dict[int, ModelT] = {}
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    @staticmethod
    def _copy(item: ModelT) -> ModelT:
        return item.model_copy(deep=True)

    def insert(self, build: Callable[[int], ModelT]) -> ModelT:
        """Assign the next id, build the entity with it and store it.

        ``build`` receives the new id and returns the complete entity.
        If it raises, the id is still consumed.
        """
        with self._lock:
            item_id = self._next_id
            self._next_id += 1
            item = build(item_id)
            self._items[item_id] = item
            return self._copy(item)

    def get(self, item_id: int) -> Optional[ModelT]:
        with self._lock:
            item = self._items.get(item_id)
            return self._copy(item) if item is not None else None

    def values(self) -> List[ModelT]:
        """Return every entity in insertion order."""
        with self._lock:
            return [self._copy(item) for item in self._items.values()]

    def find(self, predicate: Callable[[ModelT], bool]) -> Optional[ModelT]:
        """Return the first entity (in insertion order) matching ``predicate``."""
        with self._lock:
            for item in self._items.values():
                if predicate(item):
                    return self._copy(item)
            return None

    def filter(self, predicate: Callable[[ModelT], bool]) -> List[ModelT]:
        with self._lock:
            return [self._copy(item) for item in self._items.values() if predicate(item)]

    def update(
        self,
        item_id: int,
        changes: Callable[[ModelT], Dict[str, Any]],
    ) -> Optional[ModelT]:
        """Atomically merge ``changes(current)`` into the entity.

        ``changes`` is called with the stored entity while the lock is
        held and returns the fields to overwrite.  The merge does not
        run validation.  Returns the merged entity, or ``None`` if the
        id is unknown.
        """
        with self._lock:
            current = self._items.get(item_id)
            if current is None:
                return None
            updated = current.model_copy(update=changes(current))
            self._items[item_id] = updated
            return self._copy(updated)

    def delete_first(self, predicate: Callable[[ModelT], bool]) -> bool:
        """Remove the first entity matching ``predicate``.

        Returns ``True`` if an entity was removed.  Later matches are
        left in place.
        """
        with self._lock:
            for item_id, item in self._items.items():
                if predicate(item):
                    del self._items[item_id]
                    return True
            return False
