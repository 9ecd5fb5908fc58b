"""Request handler orchestrating fault injection and user persistence."""

from __future__ import annotations

import logging

from .contracts import PersistenceFailure, ResponseEnvelope, UserCreateRequest
from .service import UserService
from .user import User
from ..faults.injector import FaultInjector
from ..metrics import record_outcome

logger = logging.getLogger(__name__)


class UserCreationHandler:
    """Run one user creation request through the fault gate and persistence."""

    def __init__(
        self,
        service: UserService,
        fault_injector: FaultInjector,
        *,
        default_source: str = "api",
    ) -> None:
        """Store collaborators shared by every request."""
        self._service = service
        self._fault_injector = fault_injector
        self._default_source = default_source

    def handle(self, category: str, user: User, source: str | None = None) -> ResponseEnvelope:
        """Return the response envelope for creating ``user`` under ``category``.

        A missing or empty ``source`` falls back to the configured default. Every
        failure is converted into an envelope here; nothing propagates to the caller.
        """
        request = UserCreateRequest(
            category=category,
            user=user,
            source=source or self._default_source,
        )
        try:
            envelope, outcome = self._process(request)
        except Exception:
            logger.exception("unexpected failure creating user in category %s", request.category)
            envelope, outcome = ResponseEnvelope.failed(), "failed"
        record_outcome(outcome)
        return envelope

    def _process(self, request: UserCreateRequest) -> tuple[ResponseEnvelope, str]:
        logger.info("inserting user record")
        logger.info("category: %s", request.category)
        logger.info("source: %s", request.source)
        logger.info("phone: %s", request.user.phone)

        if self._fault_injector.should_reject():
            logger.info(
                "simulated rejection for category %s (source %s)", request.category, request.source
            )
            return ResponseEnvelope.rejected(request.category, request.source), "rejected"

        result = self._service.create_user(request.user)
        if isinstance(result, PersistenceFailure):
            logger.error(
                "user persistence failed for category %s: %s",
                request.category,
                result.reason,
                exc_info=result.error,
            )
            return ResponseEnvelope.failed(), "failed"

        return ResponseEnvelope.created(result, request.category, request.source), "created"
