"""Pydantic Settings for the expense client.

All environment variables use the EXPENSE_ prefix.
Example: EXPENSE_API_BASE_URL=https://api.example.com, EXPENSE_LOG_LEVEL=DEBUG
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class ClientSettings(BaseSettings):
    """Client configuration validated from environment variables."""

    # Backend
    api_base_url: str = Field(default="http://localhost:8000", min_length=1)
    request_timeout_seconds: float | None = Field(default=None, gt=0)  # None = no timeout

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    model_config = {"env_prefix": "EXPENSE_"}
