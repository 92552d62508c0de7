from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from ..models.user import Role
from ..schemas.user import TokenIdentity
from ..services.auth import AuthService

security = HTTPBearer(auto_error=False)


def get_auth_service(request: Request) -> AuthService:
    return AuthService(request.app.state.settings)


def get_current_identity(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    auth: AuthService = Depends(get_auth_service),
) -> TokenIdentity:
    """Identity from the ``Authorization: Bearer`` header."""
    token = credentials.credentials if credentials else None
    return auth.verify_token(token)


def require_roles(*roles: Role):
    """Dependency factory: allow only the listed roles (no hierarchy)"""
    def role_checker(identity: TokenIdentity = Depends(get_current_identity)) -> TokenIdentity:
        return AuthService.authorize(identity, roles)
    return role_checker


require_owner = require_roles(Role.OWNER)
require_admin = require_roles(Role.ADMIN)
