"""
Bearer token gate for protected routes.
"""
from typing import Annotated, Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from medilocker.core.exceptions import Forbidden, TokenError, Unauthorized
from medilocker.core.security import TokenAuthority, TokenClaims

_bearer_scheme = HTTPBearer(auto_error=False)


def get_token_authority(request: Request) -> TokenAuthority:
    return request.app.state.token_authority


async def require_identity(
    request: Request,
    authority: Annotated[TokenAuthority, Depends(get_token_authority)],
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(_bearer_scheme)],
) -> TokenClaims:
    """
    Resolve the caller's identity from ``Authorization: Bearer <token>``.

    No bearer token is a 401, a token that fails verification is a 403.
    The decoded claims are also left on ``request.state.identity``.
    """
    if credentials is None or not credentials.credentials:
        raise Unauthorized()

    try:
        claims = authority.verify(credentials.credentials)
    except TokenError as e:
        raise Forbidden() from e

    request.state.identity = claims
    return claims


CurrentIdentity = Annotated[TokenClaims, Depends(require_identity)]
