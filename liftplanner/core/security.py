"""Admin token check for scenario authoring.

End-user identity comes from the external auth provider; this service only
guards the administrator operations with a shared token.
"""
import hmac
from typing import Annotated

from fastapi import Header, Request

from liftplanner.core.errors import ForbiddenError


def verify_admin_token(expected: str | None, supplied: str | None) -> bool:
    """True when no token is configured or the supplied one matches."""
    if not expected:
        return True
    if not supplied:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


async def require_admin(
    request: Request,
    x_admin_token: Annotated[str | None, Header()] = None,
) -> None:
    settings = request.app.state.settings
    if not verify_admin_token(settings.admin_token, x_admin_token):
        raise ForbiddenError("Admin token required")
