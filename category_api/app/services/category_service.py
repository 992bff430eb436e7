"""
Service layer for categories.

``CategoryService`` implements the list/get/create/update/delete
operations on top of a ``CategoryStore``.  It knows nothing about
HTTP: missing records are reported as ``None`` or ``False`` and the
route handlers turn those into 404 responses.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import Depends

from category_api.app.core.store import CategoryStore, get_category_store
from category_api.app.schemas.category import Category, CategoryIn

logger = logging.getLogger(__name__)


class CategoryService:
    """Operations on the category collection of one application."""

    def __init__(self, store: CategoryStore) -> None:
        self.store = store

    async def list_categories(self) -> List[Category]:
        """Return all categories in insertion order."""
        return self.store.all()

    async def get_category(self, category_id: int) -> Optional[Category]:
        return self.store.get(category_id)

    async def create_category(self, data: CategoryIn) -> Category:
        """Append a new category.

        Any ``id`` in ``data`` is ignored; the store assigns one from the
        current size of the collection.
        """
        category = self.store.add(data.name, data.description)
        logger.info("Created category %s", category.id)
        return category

    async def update_category(self, category_id: int, data: CategoryIn) -> Optional[Category]:
        """Replace name and description of an existing category.

        The stored id is always ``category_id``, whatever ``data.id``
        says.  Returns ``None`` if the category does not exist.
        """
        category = self.store.replace(category_id, data.name, data.description)
        if category is not None:
            logger.info("Updated category %s", category_id)
        return category

    async def delete_category(self, category_id: int) -> bool:
        """Delete a category.  Returns ``True`` if a record was removed."""
        deleted = self.store.remove(category_id)
        if deleted:
            logger.info("Deleted category %s", category_id)
        return deleted


def get_category_service(store: CategoryStore = Depends(get_category_store)) -> CategoryService:
    return CategoryService(store)
