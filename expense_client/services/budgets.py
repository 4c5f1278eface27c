"""Budgets: ``/budgets`` plus the monthly status and overview reports."""

from __future__ import annotations

from expense_client.models.responses import ServerEnvelope
from expense_client.models.schemas import Budget, BudgetOverview, BudgetStatus
from expense_client.services.base import CrudService


class BudgetService(CrudService[Budget]):
    prefix = "/budgets"
    item_model = Budget

    async def get_status(self, year: int, month: int) -> ServerEnvelope[BudgetStatus]:
        """Spending against budget per category for one month."""
        result = await self._client.get(self._path("status"), {"year": year, "month": month})
        return self._unwrap(result, ServerEnvelope[BudgetStatus])

    async def get_overview(self, year: int, month: int) -> ServerEnvelope[BudgetOverview]:
        """Budget, spent and remaining amounts per category for one month."""
        result = await self._client.get(self._path("overview"), {"year": year, "month": month})
        return self._unwrap(result, ServerEnvelope[BudgetOverview])
