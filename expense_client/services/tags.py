"""Tags: ``/tags``."""

from __future__ import annotations

from expense_client.models.schemas import Tag
from expense_client.services.base import CrudService


class TagService(CrudService[Tag]):
    prefix = "/tags"
    item_model = Tag
