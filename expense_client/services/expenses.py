"""Expenses: ``/expenses`` plus the summary report."""

from __future__ import annotations

from expense_client.models.requests import ExpenseSummaryQuery
from expense_client.models.responses import ServerEnvelope
from expense_client.models.schemas import Expense, ExpenseSummary
from expense_client.services.base import CrudService


class ExpenseService(CrudService[Expense]):
    """Expenses; ``get_all`` accepts an ``ExpenseQuery`` for filtering."""

    prefix = "/expenses"
    item_model = Expense

    async def get_summary(
        self, query: ExpenseSummaryQuery | None = None
    ) -> ServerEnvelope[ExpenseSummary]:
        result = await self._client.get(self._path("summary"), self._query(query))
        return self._unwrap(result, ServerEnvelope[ExpenseSummary])
