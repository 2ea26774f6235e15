"""Integration test fixtures.

This conftest loads the full app for tests under tests/integration.
Unit tests in tests/unit/ have their own conftest and never import app.py.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, AsyncIterator, cast

import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)

# Load .env.test (overrides .env values)
env_test_path = Path(__file__).parent.parent / ".env.test"
if env_test_path.exists():
    load_dotenv(env_test_path, override=True)

# Tests never talk to a real database
os.environ["REPOSITORY_BACKEND"] = "inmemory"


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the FastAPI app (no network)."""
    from app import app

    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac
