"""Pydantic models for resource payloads returned by the backend.

Amounts arrive as decimal strings ("150000.00") and are parsed to Decimal.
Unknown fields are ignored so that additive server changes do not break
the client.
"""

from __future__ import annotations

import datetime as dt
from datetime import datetime
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, ConfigDict


class _Schema(BaseModel):
    model_config = ConfigDict(extra="ignore")


class BudgetState(str, Enum):
    """Server-computed budget health for a category."""

    ON_TRACK = "on_track"
    WARNING = "warning"
    EXCEEDED = "exceeded"


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class User(_Schema):
    id: int
    username: str
    email: str
    created_at: datetime | None = None


class AuthToken(_Schema):
    access_token: str
    token_type: str = "bearer"
    expires_in: int | None = None


# ---------------------------------------------------------------------------
# Reference shapes embedded in other resources
# ---------------------------------------------------------------------------


class CategoryRef(_Schema):
    id: int
    name: str
    description: str | None = None


class AccountRef(_Schema):
    id: int
    name: str
    initial_balance: Decimal | None = None


class TagRef(_Schema):
    id: int
    name: str


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


class Account(_Schema):
    id: int
    name: str
    initial_balance: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Category(_Schema):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Tag(_Schema):
    id: int
    name: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class Budget(_Schema):
    id: int
    category_id: int
    year: int
    month: int
    amount: Decimal
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: CategoryRef | None = None


class Expense(_Schema):
    id: int
    amount: Decimal
    date: dt.date
    description: str | None = None
    category: CategoryRef | None = None
    account: AccountRef | None = None
    tags: list[TagRef] = []
    receipt_path: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class RecurringExpense(_Schema):
    id: int
    name: str
    amount: Decimal
    category_id: int
    interval: str
    next_date: dt.date
    end_date: dt.date | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    category: CategoryRef | None = None


# ---------------------------------------------------------------------------
# Budget reports
# ---------------------------------------------------------------------------


class BudgetStatusSummary(_Schema):
    total_budget: Decimal
    total_spent: Decimal = Decimal("0")
    percent: float


class BudgetStatusLine(_Schema):
    category_id: int
    category_name: str
    budget_amount: Decimal
    total_spent: Decimal
    percent: float
    status: BudgetState


class BudgetStatus(_Schema):
    summary: BudgetStatusSummary
    categories: list[BudgetStatusLine] = []


class BudgetPeriod(_Schema):
    year: int
    month: int


class BudgetOverviewSummary(_Schema):
    total_budget: Decimal
    total_spent: Decimal
    remaining: Decimal
    percent_used: float


class BudgetOverviewLine(_Schema):
    category_id: int
    category_name: str
    budget_amount: Decimal
    spent_amount: Decimal
    remaining: Decimal
    percent_used: float
    status: BudgetState


class BudgetOverview(_Schema):
    summary: BudgetOverviewSummary
    categories: list[BudgetOverviewLine] = []
    period: BudgetPeriod


# ---------------------------------------------------------------------------
# Expense reports
# ---------------------------------------------------------------------------


class CategoryTotal(_Schema):
    category_id: int | None = None
    category_name: str
    total_amount: Decimal
    count: int = 0


class TagTotal(_Schema):
    tag_id: int
    tag_name: str
    total_amount: Decimal
    count: int = 0


class SummaryPeriod(_Schema):
    start_date: dt.date | None = None
    end_date: dt.date | None = None


class ExpenseSummary(_Schema):
    total_amount: Decimal
    average_amount: Decimal
    count: int = 0
    by_category: list[CategoryTotal] = []
    by_tag: list[TagTotal] = []
    period: SummaryPeriod | None = None


# ---------------------------------------------------------------------------
# Recurring reports
# ---------------------------------------------------------------------------


class UpcomingItem(_Schema):
    id: int
    name: str
    amount: Decimal
    next_date: dt.date
    category: CategoryRef | None = None
    days_until: int


class UpcomingRecurring(_Schema):
    items: list[UpcomingItem] = []
    total_upcoming: Decimal
    count: int


class GeneratedExpenses(_Schema):
    generated: list[Expense] = []
    total_generated: int
    next_generation_date: dt.date | None = None
