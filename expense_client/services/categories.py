"""Categories: ``/categories``."""

from __future__ import annotations

from expense_client.models.schemas import Category
from expense_client.services.base import CrudService


class CategoryService(CrudService[Category]):
    """Expense categories; ``get_all`` accepts a ``CategoryQuery`` for sorting."""

    prefix = "/categories"
    item_model = Category
