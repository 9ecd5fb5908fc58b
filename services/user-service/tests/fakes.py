"""In-memory persistence collaborators used across the test suite."""

from __future__ import annotations

import uuid

from user_service.domain.handler import UserCreationHandler
from user_service.domain.service import UserService
from user_service.domain.user import User
from user_service.faults.injector import FaultInjector


class FakeRepository:
    """In-memory repository mimicking the Postgres upsert behaviour."""

    def __init__(self, result: object | None = None) -> None:
        self._result = result
        self.users: dict[str, User] = {}
        self.calls: list[User] = []

    def create_user(self, user: User):
        self.calls.append(user)
        self.users[user.phone] = user
        if self._result is not None:
            return self._result
        return {"id": uuid.uuid4().hex}


class FailingRepository:
    """Repository whose storage is unreachable."""

    def __init__(self, exc: Exception | None = None) -> None:
        self._exc = exc or ConnectionError("connection to postgres:5432 refused (password=hunter2)")
        self.calls: list[User] = []

    def create_user(self, user: User):
        self.calls.append(user)
        raise self._exc


def build_handler(repository, reject_percent: int) -> UserCreationHandler:
    return UserCreationHandler(UserService(repository), FaultInjector(reject_percent))
