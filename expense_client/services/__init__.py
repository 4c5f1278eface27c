"""Resource services layered over the HTTP client."""

from expense_client.services.accounts import AccountService
from expense_client.services.auth import AuthService
from expense_client.services.budgets import BudgetService
from expense_client.services.categories import CategoryService
from expense_client.services.dashboard import ChartPoint, DashboardService, DashboardSnapshot
from expense_client.services.expenses import ExpenseService
from expense_client.services.recurring import RecurringService
from expense_client.services.tags import TagService

__all__ = [
    "AccountService",
    "AuthService",
    "BudgetService",
    "CategoryService",
    "ChartPoint",
    "DashboardService",
    "DashboardSnapshot",
    "ExpenseService",
    "RecurringService",
    "TagService",
]
