"""Accounts: ``/accounts``."""

from __future__ import annotations

from expense_client.models.schemas import Account
from expense_client.services.base import CrudService


class AccountService(CrudService[Account]):
    prefix = "/accounts"
    item_model = Account
