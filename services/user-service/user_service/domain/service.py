"""User service converting persistence outcomes into explicit results."""

from __future__ import annotations

import logging
from typing import Any

from .contracts import PersistenceFailure, UserStore
from .user import User

logger = logging.getLogger(__name__)


class UserService:
    """User workflows backed by a persistence collaborator."""

    def __init__(self, repository: UserStore) -> None:
        """Store the collaborator used to persist user records."""
        self._repository = repository

    def create_user(self, user: User) -> Any | PersistenceFailure:
        """Persist ``user`` once and return its creation result or a ``PersistenceFailure``.

        Parameters
        ----------
        user:
            Record forwarded verbatim to the collaborator.

        Returns
        -------
        Any | PersistenceFailure
            The collaborator's opaque result on success. Any exception raised by
            the collaborator (storage, connectivity, constraint) is returned as a
            ``PersistenceFailure`` instead of propagating.
        """
        try:
            return self._repository.create_user(user)
        except Exception as exc:
            logger.debug("persistence collaborator raised %s", type(exc).__name__)
            return PersistenceFailure.from_exception(exc)
