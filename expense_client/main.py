"""Client wiring: settings, logging and one instance of every service.

``create_client()`` is the startup entry point. It reads ``ClientSettings``
from the environment, configures logging, and binds every resource service
to a single shared ``ApiClient`` so that a login through ``auth`` is seen by
all other services.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from expense_client.config.settings import ClientSettings
from expense_client.integration.api_client import ApiClient
from expense_client.logging_config import configure_logging
from expense_client.services import (
    AccountService,
    AuthService,
    BudgetService,
    CategoryService,
    DashboardService,
    ExpenseService,
    RecurringService,
    TagService,
)

logger = logging.getLogger(__name__)


@dataclass
class ExpenseClient:
    """Every resource service, sharing one ``ApiClient``."""

    api: ApiClient
    auth: AuthService
    accounts: AccountService
    budgets: BudgetService
    categories: CategoryService
    expenses: ExpenseService
    recurring: RecurringService
    tags: TagService
    dashboard: DashboardService


def create_client(
    settings: ClientSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
    configure_logs: bool = True,
) -> ExpenseClient:
    """Build the service bundle.

    Parameters
    ----------
    settings:
        Explicit settings; read from ``EXPENSE_*`` environment variables when None.
    transport:
        Optional httpx transport handed to the ``ApiClient``.
    configure_logs:
        Install the root log handler from ``settings.log_level``/``log_json``.
    """
    settings = settings or ClientSettings()

    if configure_logs:
        configure_logging(settings.log_level, json_output=settings.log_json)

    api = ApiClient(
        settings.api_base_url,
        timeout_seconds=settings.request_timeout_seconds,
        transport=transport,
    )
    expenses = ExpenseService(api)
    budgets = BudgetService(api)

    logger.info("Expense client configured for %s", settings.api_base_url)

    return ExpenseClient(
        api=api,
        auth=AuthService(api),
        accounts=AccountService(api),
        budgets=budgets,
        categories=CategoryService(api),
        expenses=expenses,
        recurring=RecurringService(api),
        tags=TagService(api),
        dashboard=DashboardService(expenses, budgets),
    )
