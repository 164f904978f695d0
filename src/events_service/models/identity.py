"""Caller identity model."""

from typing import Optional

from pydantic import BaseModel

GUEST_ROLE = "guest"


class Identity(BaseModel):
    """Identity decoded from a bearer token."""

    id: str
    role: Optional[str] = None

    @property
    def is_guest(self) -> bool:
        return self.role == GUEST_ROLE
