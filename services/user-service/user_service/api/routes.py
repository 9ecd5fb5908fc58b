"""HTTP route definitions for the user service."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict

from ..domain.handler import UserCreationHandler
from ..domain.user import User

router = APIRouter(prefix="/users", tags=["users"])


class UserPayload(BaseModel):
    """Body accepted when creating a user; unknown fields are passed through."""

    model_config = ConfigDict(extra="allow")

    phone: str

    def to_domain(self) -> User:
        """Build the domain record, keeping every field other than ``phone`` opaque."""
        attributes: dict[str, Any] = dict(self.model_extra or {})
        return User(phone=self.phone, attributes=attributes)


def get_handler(request: Request) -> UserCreationHandler:
    """Resolve the `UserCreationHandler` stored on the FastAPI application state."""
    handler: UserCreationHandler = request.app.state.user_handler
    return handler


@router.post(
    "/{category}",
    status_code=201,
    responses={
        400: {"description": "Simulated rejection"},
        500: {"description": "Unexpected failure"},
    },
)
def create_user(
    payload: UserPayload,
    category: str = Path(..., min_length=1),
    source: str | None = Query(default=None),
    handler: UserCreationHandler = Depends(get_handler),
) -> JSONResponse:
    """Create a user in ``category``, subject to simulated fault injection."""
    envelope = handler.handle(category, payload.to_domain(), source)
    return JSONResponse(status_code=envelope.status_code, content=jsonable_encoder(envelope.body))
