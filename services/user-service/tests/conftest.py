from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_service.api import routes
from fakes import build_handler


@pytest.fixture
def make_client():
    """Provide a factory building FastAPI test clients around a repository."""
    clients: list[TestClient] = []

    def _make(repository, *, reject_percent: int = 0) -> TestClient:
        app = FastAPI()
        app.include_router(routes.router)
        app.state.user_handler = build_handler(repository, reject_percent)
        client = TestClient(app)
        clients.append(client)
        return client

    yield _make

    for client in clients:
        client.close()
