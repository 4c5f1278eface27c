"""Shared test fixtures and an in-process stub of the expense backend."""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator
from decimal import Decimal

import httpx
import pytest
from fastapi import FastAPI, Header, HTTPException
from pydantic import BaseModel

from expense_client.config.settings import ClientSettings
from expense_client.integration.api_client import ApiClient, reset_api_client

BASE_URL = "http://testserver"
VALID_TOKEN = "test-access-token"


# ---------------------------------------------------------------------------
# Isolate tests from the developer's environment and the shared client
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Remove EXPENSE_* env vars and drop the process-wide client."""
    for key in list(os.environ):
        if key.startswith("EXPENSE_"):
            monkeypatch.delenv(key, raising=False)
    reset_api_client()
    yield
    reset_api_client()


@pytest.fixture
def settings() -> ClientSettings:
    """Test settings pointing at the stub backend."""
    return ClientSettings(api_base_url=BASE_URL, request_timeout_seconds=5.0)


# ---------------------------------------------------------------------------
# Stub backend
# ---------------------------------------------------------------------------

class _Credentials(BaseModel):
    username: str
    password: str


class _AccountIn(BaseModel):
    name: str
    initial_balance: Decimal


def _envelope(data: object, message: str | None = None) -> dict:
    return {"status": "success", "data": data, "message": message}


def create_fake_backend() -> FastAPI:
    """A small in-memory rendition of the expense backend.

    Implements auth, account CRUD, budget status and expense summary, which
    is enough to drive the services end to end over ``httpx.ASGITransport``.
    """
    app = FastAPI()
    accounts: dict[int, dict] = {}

    def _require_token(authorization: str | None) -> None:
        if authorization != f"Bearer {VALID_TOKEN}":
            raise HTTPException(status_code=401, detail="Not authenticated")

    @app.post("/auth/token")
    async def issue_token(credentials: _Credentials) -> dict:
        if credentials.username != "alice" or credentials.password != "s3cret":
            raise HTTPException(status_code=401, detail="Invalid credentials")
        return _envelope(
            {"access_token": VALID_TOKEN, "token_type": "bearer", "expires_in": 3600},
            "Login successful",
        )

    @app.get("/auth/me")
    async def me(authorization: str | None = Header(default=None)) -> dict:
        _require_token(authorization)
        return _envelope(
            {"id": 1, "username": "alice", "email": "alice@example.com",
             "created_at": "2025-01-01T00:00:00"}
        )

    @app.get("/accounts")
    async def list_accounts(
        page: int = 1,
        size: int = 10,
        authorization: str | None = Header(default=None),
    ) -> dict:
        _require_token(authorization)
        items = sorted(accounts.values(), key=lambda a: a["id"])
        chunk = items[(page - 1) * size: page * size]
        pages = max(1, -(-len(items) // size))
        return _envelope(
            {"items": chunk, "total": len(items), "page": page, "size": size, "pages": pages}
        )

    @app.post("/accounts", status_code=201)
    async def create_account(
        payload: _AccountIn,
        authorization: str | None = Header(default=None),
    ) -> dict:
        _require_token(authorization)
        account_id = len(accounts) + 1
        accounts[account_id] = {
            "id": account_id,
            "name": payload.name,
            "initial_balance": str(payload.initial_balance),
            "created_at": "2025-06-01T10:00:00",
            "updated_at": "2025-06-01T10:00:00",
        }
        return _envelope(accounts[account_id], "Account created")

    @app.get("/accounts/{account_id}")
    async def get_account(
        account_id: int,
        authorization: str | None = Header(default=None),
    ) -> dict:
        _require_token(authorization)
        if account_id not in accounts:
            raise HTTPException(status_code=404, detail="Account not found")
        return _envelope(accounts[account_id])

    @app.delete("/accounts/{account_id}")
    async def delete_account(
        account_id: int,
        authorization: str | None = Header(default=None),
    ) -> dict:
        _require_token(authorization)
        if accounts.pop(account_id, None) is None:
            raise HTTPException(status_code=404, detail="Account not found")
        return _envelope(None, "Account deleted")

    @app.get("/budgets/status")
    async def budget_status(year: int, month: int) -> dict:
        return _envelope({
            "summary": {"total_budget": "5000000.00", "total_spent": "4100000.00", "percent": 82.0},
            "categories": [
                {"category_id": 1, "category_name": "Makanan", "budget_amount": "3000000.00",
                 "total_spent": "3300000.00", "percent": 110.0, "status": "exceeded"},
                {"category_id": 2, "category_name": "Transport", "budget_amount": "2000000.00",
                 "total_spent": "800000.00", "percent": 40.0, "status": "on_track"},
            ],
        })

    @app.get("/expenses/summary")
    async def expense_summary(
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> dict:
        return _envelope({
            "total_amount": "4100000.00",
            "average_amount": "205000.00",
            "count": 20,
            "by_category": [
                {"category_id": 1, "category_name": "Makanan", "total_amount": "3300000.00", "count": 15},
                {"category_id": 2, "category_name": "Transport", "total_amount": "800000.00", "count": 5},
            ],
            "by_tag": [],
            "period": {"start_date": start_date, "end_date": end_date},
        })

    return app


@pytest.fixture
def fake_backend() -> FastAPI:
    return create_fake_backend()


@pytest.fixture
def backend_client(fake_backend: FastAPI) -> ApiClient:
    """ApiClient routed in-process to the stub backend."""
    return ApiClient(BASE_URL, transport=httpx.ASGITransport(app=fake_backend))


@pytest.fixture
def make_client() -> Callable[..., ApiClient]:
    """Factory for an ApiClient whose every request is answered with a fixed JSON response."""

    def _make(status_code: int, payload: object) -> ApiClient:
        transport = httpx.MockTransport(
            lambda request: httpx.Response(status_code, json=payload)
        )
        return ApiClient(BASE_URL, transport=transport)

    return _make
