"""
In‑memory storage for categories.

``CategoryStore`` owns the ordered list of categories for one
application instance.  ``create_app`` builds a fresh store and keeps
it on ``app.state``; route handlers receive it through the
``get_category_store`` dependency, much like a database connection
would be injected.  Nothing is persisted: the collection is seeded on
construction and lost when the process exits.

Every public method takes the store's lock, so callers on different
threads cannot interleave an append with a delete or hand out the
same id twice.

Ids are assigned as ``len(categories) + 1`` at the time of creation.
After a delete this can produce an id that was used before, or one
that is still held by a live record (delete 1 from ``[1, 2]`` and the
next create gets 2 again).  Lookups return the first match in
insertion order.
"""

from __future__ import annotations

import threading
from typing import Iterable, List, Optional

from fastapi import Request

from category_api.app.schemas.category import Category

SEED_CATEGORIES = (
    Category(id=1, name="Makanan", description="Produk makanan"),
    Category(id=2, name="Minuman", description="Produk minuman"),
)


class CategoryStore:
    """Thread‑safe, insertion‑ordered collection of categories."""

    def __init__(self, seed: Optional[Iterable[Category]] = None) -> None:
        records = SEED_CATEGORIES if seed is None else seed
        self._categories: List[Category] = [c.model_copy() for c in records]
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._categories)

    def all(self) -> List[Category]:
        """Return a snapshot of every category in insertion order."""
        with self._lock:
            return [c.model_copy() for c in self._categories]

    def get(self, category_id: int) -> Optional[Category]:
        with self._lock:
            index = self._index_of(category_id)
            if index is None:
                return None
            return self._categories[index].model_copy()

    def add(self, name: str, description: str) -> Category:
        """Append a new category and return it with its assigned id."""
        with self._lock:
            category = Category(id=len(self._categories) + 1, name=name, description=description)
            self._categories.append(category)
            return category.model_copy()

    def replace(self, category_id: int, name: str, description: str) -> Optional[Category]:
        """Overwrite the fields of an existing category in place.

        Returns ``None`` when no category has ``category_id``.
        """
        with self._lock:
            index = self._index_of(category_id)
            if index is None:
                return None
            category = Category(id=category_id, name=name, description=description)
            self._categories[index] = category
            return category.model_copy()

    def remove(self, category_id: int) -> bool:
        """Remove the category with ``category_id``; ``False`` if absent."""
        with self._lock:
            index = self._index_of(category_id)
            if index is None:
                return False
            del self._categories[index]
            return True

    def _index_of(self, category_id: int) -> Optional[int]:
        # Caller must hold the lock.
        for i, category in enumerate(self._categories):
            if category.id == category_id:
                return i
        return None


def get_category_store(request: Request) -> CategoryStore:
    """FastAPI dependency returning the store owned by the running app."""
    return request.app.state.category_store
