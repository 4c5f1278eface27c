"""Recurring expenses: ``/recurring`` plus upcoming and generation endpoints."""

from __future__ import annotations

from expense_client.models.responses import ServerEnvelope
from expense_client.models.schemas import GeneratedExpenses, RecurringExpense, UpcomingRecurring
from expense_client.services.base import CrudService


class RecurringService(CrudService[RecurringExpense]):
    prefix = "/recurring"
    item_model = RecurringExpense

    async def get_upcoming(self, days: int | None = None) -> ServerEnvelope[UpcomingRecurring]:
        """Recurring expenses due within ``days`` (server default when None)."""
        result = await self._client.get(self._path("upcoming"), {"days": days})
        return self._unwrap(result, ServerEnvelope[UpcomingRecurring])

    async def generate(self) -> ServerEnvelope[GeneratedExpenses]:
        """Ask the server to materialize expenses for every due recurring entry."""
        result = await self._client.post(self._path("generate"))
        return self._unwrap(result, ServerEnvelope[GeneratedExpenses])
