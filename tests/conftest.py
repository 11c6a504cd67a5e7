"""Shared fixtures for the API tests.

Every test gets a freshly built application so the in‑memory todo
collection never leaks between tests.
"""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from hello_todo_api.app.core.config import Settings
from hello_todo_api.app.main import create_app
from hello_todo_api.app.services.todo_service import TodoService


@pytest.fixture
def app_settings() -> Settings:
    """Settings with a small ``/big`` payload for fast tests."""
    return Settings(big_payload_bytes=64, api_prefix="")


@pytest.fixture
def app(app_settings: Settings) -> FastAPI:
    return create_app(app_settings)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)


@pytest.fixture
def todo_service() -> TodoService:
    return TodoService()
