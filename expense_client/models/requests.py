"""Pydantic request payloads and query-parameter models for the resource services."""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field


class RecurringInterval(str, Enum):
    """Supported recurrence intervals."""

    DAILY = "daily"
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


# ---------------------------------------------------------------------------
# Auth
# ---------------------------------------------------------------------------


class LoginCredentials(BaseModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterData(BaseModel):
    username: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    password: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Query parameters
# ---------------------------------------------------------------------------


class PageParams(BaseModel):
    """Pagination parameters shared by every list endpoint."""

    page: int | None = Field(default=None, ge=1)
    size: int | None = Field(default=None, ge=1)


class CategoryQuery(PageParams):
    sort: str | None = None
    order: Literal["asc", "desc"] | None = None


class ExpenseQuery(CategoryQuery):
    category_id: int | None = None
    account_id: int | None = None
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    tag_ids: list[int] | None = None


class ExpenseSummaryQuery(BaseModel):
    start_date: dt.date | None = None
    end_date: dt.date | None = None
    category_id: int | None = None


# ---------------------------------------------------------------------------
# Create / update payloads
# ---------------------------------------------------------------------------


class AccountCreate(BaseModel):
    name: str = Field(..., min_length=1)
    initial_balance: Decimal


class AccountUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    initial_balance: Decimal | None = None


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str


class CategoryUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None


class TagCreate(BaseModel):
    name: str = Field(..., min_length=1)


class TagUpdate(BaseModel):
    name: str = Field(..., min_length=1)


class BudgetCreate(BaseModel):
    category_id: int
    year: int = Field(..., ge=1900)
    month: int = Field(..., ge=1, le=12)
    amount: Decimal = Field(..., ge=0)


class BudgetUpdate(BaseModel):
    amount: Decimal = Field(..., ge=0)


class ExpenseCreate(BaseModel):
    amount: Decimal = Field(..., gt=0)
    date: dt.date
    description: str
    category_id: int
    account_id: int
    tag_ids: list[int] | None = None
    receipt_path: str | None = None


class ExpenseUpdate(BaseModel):
    amount: Decimal | None = Field(default=None, gt=0)
    date: dt.date | None = None
    description: str | None = None
    category_id: int | None = None
    account_id: int | None = None
    tag_ids: list[int] | None = None
    receipt_path: str | None = None


class RecurringCreate(BaseModel):
    name: str = Field(..., min_length=1)
    amount: Decimal = Field(..., gt=0)
    category_id: int
    interval: RecurringInterval
    next_date: dt.date
    end_date: dt.date | None = None


class RecurringUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1)
    amount: Decimal | None = Field(default=None, gt=0)
    category_id: int | None = None
    interval: RecurringInterval | None = None
    next_date: dt.date | None = None
    end_date: dt.date | None = None
