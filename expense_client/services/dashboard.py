"""Dashboard data: current-month expense summary and budget status.

Both reports are requested concurrently; neither depends on the other.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TypeVar

from expense_client.errors import ExpenseClientError
from expense_client.models.requests import ExpenseSummaryQuery
from expense_client.models.schemas import BudgetStatus, ExpenseSummary
from expense_client.services.budgets import BudgetService
from expense_client.services.expenses import ExpenseService
from expense_client.utils.dates import month_bounds

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class ChartPoint:
    """Spending for one category, ready for a bar chart."""

    name: str
    amount: float


@dataclass
class DashboardSnapshot:
    year: int
    month: int
    summary: ExpenseSummary | None = None
    budget_status: BudgetStatus | None = None
    chart: list[ChartPoint] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)


class DashboardService:
    """Loads the figures shown on the dashboard for a given month."""

    def __init__(self, expenses: ExpenseService, budgets: BudgetService) -> None:
        self._expenses = expenses
        self._budgets = budgets

    async def load(self, today: date | None = None) -> DashboardSnapshot:
        """Fetch the month containing ``today`` (defaults to the current date).

        A failed request or an envelope whose status is not ``success`` leaves
        the matching field empty; failure messages are collected in
        ``errors``. Exceptions other than ``ExpenseClientError`` propagate.
        """
        today = today or date.today()
        start, end = month_bounds(today.year, today.month)

        summary_envelope, budget_envelope = await asyncio.gather(
            self._expenses.get_summary(ExpenseSummaryQuery(start_date=start, end_date=end)),
            self._budgets.get_status(today.year, today.month),
            return_exceptions=True,
        )

        snapshot = DashboardSnapshot(year=today.year, month=today.month)
        summary_envelope = self._check(summary_envelope, snapshot)
        budget_envelope = self._check(budget_envelope, snapshot)

        if summary_envelope is not None and summary_envelope.status == "success":
            snapshot.summary = summary_envelope.data
            snapshot.chart = [
                ChartPoint(name=item.category_name, amount=float(item.total_amount))
                for item in summary_envelope.data.by_category
            ]
        if budget_envelope is not None and budget_envelope.status == "success":
            snapshot.budget_status = budget_envelope.data

        logger.debug(
            "Dashboard loaded for %d-%02d (%d chart points)",
            snapshot.year,
            snapshot.month,
            len(snapshot.chart),
        )
        return snapshot

    @staticmethod
    def _check(outcome: T | BaseException, snapshot: DashboardSnapshot) -> T | None:
        """Pass envelopes through; record client errors and re-raise anything else."""
        if isinstance(outcome, ExpenseClientError):
            logger.warning("Error fetching dashboard data: %s", outcome.message)
            snapshot.errors.append(outcome.message)
            return None
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome
