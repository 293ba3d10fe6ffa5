"""Registration, login and the auth gate (get_current_claims, require_role, role_gated_route)."""

import logging
from collections.abc import Callable, Coroutine
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.routing import APIRoute
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import Forbidden, MissingToken, Unauthenticated
from app.core.roles import Role
from app.core.security import TokenClaims, authorize, decode_access_token
from app.schemas.auth import LoginRequest, PenggunaRead, RegisterRequest, TokenResponse
from app.services.auth import authenticate, register_user

logger = logging.getLogger(__name__)
router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post(
    "/register",
    response_model=PenggunaRead,
    status_code=status.HTTP_201_CREATED,
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> PenggunaRead:
    """Create a user account. The password hash is never returned."""
    user = register_user(db, body)
    return PenggunaRead.model_validate(user)


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <accessToken>
    """
    token = authenticate(db, body)
    return TokenResponse(access_token=token)


def get_current_claims(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Dependency: require a valid Bearer JWT and return its claims. Raises 401 otherwise."""
    if credentials is None:
        raise MissingToken()
    try:
        return decode_access_token(credentials.credentials)
    except Unauthenticated as e:
        logger.warning("Rejected token: %s", e.message)
        raise


def require_role(role: Role) -> Callable[[TokenClaims], TokenClaims]:
    """Build a dependency that lets through only tokens whose role is exactly `role`."""

    def _require_role(
        claims: Annotated[TokenClaims, Depends(get_current_claims)],
    ) -> TokenClaims:
        if not authorize(role, claims):
            logger.warning(
                "Role check failed",
                extra={"id_pengguna": claims.user_id, "role": claims.role.value, "required": role.value},
            )
            raise Forbidden(f"Role '{role.value}' required")
        return claims

    return _require_role


def role_gated_route(role: Role) -> type[APIRoute]:
    """
    Build an APIRoute class that verifies the bearer token and role first.

    The check runs on the raw request before FastAPI reads the body or path
    parameters, so a protected route answers 401/403 even when the request
    is otherwise malformed. Verified claims are left on request.state.claims.
    """
    gate = require_role(role)

    class RoleGatedRoute(APIRoute):
        def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
            handler = super().get_route_handler()

            async def gated_handler(request: Request) -> Response:
                credentials = await security(request)
                request.state.claims = gate(get_current_claims(credentials))
                return await handler(request)

            return gated_handler

    RoleGatedRoute.__name__ = f"RoleGatedRoute[{role.value}]"
    return RoleGatedRoute


FinanceOfficerRoute = role_gated_route(Role.PETUGAS_KEUANGAN)
