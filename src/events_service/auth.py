"""Bearer token verification and the event mutation guard."""

import logging
from typing import Optional

import jwt
from fastapi import Depends, Header

from .config import Settings, get_settings
from .errors import AuthInvalidError, AuthMissingError, PermissionDeniedError
from .models.identity import Identity

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer"


def verify_identity(authorization: Optional[str], settings: Settings) -> Identity:
    """Decode the caller identity from an ``Authorization`` header value.

    Raises:
        AuthMissingError: header absent or not a Bearer credential.
        AuthInvalidError: bad signature, expired token or no ``id`` claim.
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthMissingError("Not authorized, no token")

    parts = authorization.split(" ")
    token = parts[1] if len(parts) > 1 else ""

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
        )
    except jwt.PyJWTError as e:
        logger.debug(f"Token rejected: {e}")
        raise AuthInvalidError("Not authorized, token failed") from e

    user_id = payload.get("id")
    if user_id is None:
        logger.debug("Token rejected: missing id claim")
        raise AuthInvalidError("Not authorized, token failed")

    role = payload.get("role")
    return Identity(id=str(user_id), role=str(role) if role is not None else None)


def authorize_event_action(identity: Optional[Identity]) -> Identity:
    """Allow event mutations for any verified, non-guest caller."""
    if identity is None or identity.is_guest:
        raise PermissionDeniedError("Guests cannot create or modify events")
    return identity


async def get_current_identity(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> Identity:
    """FastAPI dependency: the verified caller."""
    return verify_identity(authorization, settings)


async def require_event_actor(
    identity: Identity = Depends(get_current_identity),
) -> Identity:
    """FastAPI dependency: a caller allowed to mutate events."""
    return authorize_event_action(identity)
