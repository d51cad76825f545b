"""Identity boundary between the auth gateway and the action handlers."""

# purpose: turn the gateway-asserted user header into an explicit Identity value
# status: active

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from .errors import unauthorized

USER_HEADER = "X-User-Id"


@dataclass(frozen=True)
class Identity:
    """Authenticated caller as supplied by the upstream auth collaborator."""

    user_id: str


def get_current_user(
    x_user_id: Optional[str] = Header(default=None, alias=USER_HEADER),
) -> Identity:
    user_id = (x_user_id or "").strip()
    if not user_id:
        raise unauthorized()
    return Identity(user_id=user_id)


def require_user(identity: Optional[Identity]) -> Identity:
    if identity is None or not identity.user_id:
        raise unauthorized()
    return identity
