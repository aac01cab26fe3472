"""Shared fixtures: a recording stand-in for `core.db` and an HTTP client."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from auth import security
from core import db
from main import app


class FakeDB:
    """Replays queued results and records every statement it receives."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[Any]]] = []
        self._results: list[Any] = []

    def returns(self, *results: Any) -> None:
        self._results.extend(results)

    @property
    def sql(self) -> list[str]:
        return [sql for sql, _ in self.calls]

    async def _next(self, sql: str, args: tuple[Any, ...]) -> Any:
        self.calls.append((" ".join(sql.split()), list(args)))
        if not self._results:
            raise AssertionError(f"unexpected query: {sql}")
        return self._results.pop(0)

    async def fetch_one(self, sql: str, *args: Any) -> Any:
        return await self._next(sql, args)

    async def fetch_all(self, sql: str, *args: Any) -> Any:
        return await self._next(sql, args)

    async def execute(self, sql: str, *args: Any) -> Any:
        return await self._next(sql, args)


@pytest.fixture()
def fake_db(monkeypatch) -> FakeDB:
    fake = FakeDB()
    monkeypatch.setattr(db, "fetch_one", fake.fetch_one)
    monkeypatch.setattr(db, "fetch_all", fake.fetch_all)
    monkeypatch.setattr(db, "execute", fake.execute)
    return fake


@pytest.fixture()
def client(fake_db) -> TestClient:
    # No context manager: the lifespan (real pool) is not started.
    return TestClient(app)


@pytest.fixture()
def admin_headers() -> dict:
    token = security.build_access_token(username="admin", is_admin=True)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def user_headers() -> dict:
    token = security.build_access_token(username="u1", is_admin=False)
    return {"Authorization": f"Bearer {token}"}
