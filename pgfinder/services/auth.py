"""Signup, login and bearer-token handling."""

import logging
from datetime import timedelta
from typing import Iterable, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ..config import Settings
from ..core.exceptions import ValidationError, ConflictError, InvalidCredentials, Unauthorized, Forbidden
from ..core.security import create_access_token, decode_access_token, get_password_hash, verify_password
from ..models.user import User, Role
from ..schemas.user import AuthResponse, TokenIdentity, UserOut

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


def email_taken(db: Session, email: str) -> bool:
    return db.query(User.id).filter(User.email == email).first() is not None


class AuthService:
    """Issues and checks tokens; registers and logs in users.

    Tokens are stateless: nothing is stored server side, so a token stays
    valid until its ``exp`` claim passes.
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    # Tokens

    def issue_token(self, user, expires_delta: Optional[timedelta] = None) -> str:
        role = Role(user.role)
        data = {"id": user.id, "email": user.email, "role": role.value}
        return create_access_token(data, self.settings, expires_delta)

    def verify_token(self, token: Optional[str]) -> TokenIdentity:
        if not token:
            raise Unauthorized("Token required")
        payload = decode_access_token(token, self.settings)
        if payload is None:
            raise Unauthorized("Invalid or expired token")
        try:
            return TokenIdentity(id=payload["id"], email=payload["email"], role=payload["role"])
        except (KeyError, ValueError):
            # Covers unknown role values as well as missing claims.
            raise Unauthorized("Invalid or expired token")

    @staticmethod
    def authorize(identity: TokenIdentity, allowed_roles: Iterable[Role]) -> TokenIdentity:
        allowed = [Role(role) for role in allowed_roles]
        if identity.role not in allowed:
            raise Forbidden(
                "Access denied. Required roles: " + ", ".join(role.value for role in allowed)
            )
        return identity

    # Accounts

    def _response(self, user: User) -> AuthResponse:
        return AuthResponse(
            token=self.issue_token(user),
            role=user.role,
            user=UserOut.model_validate(user),
        )

    def signup(self, db: Session, name, email, password, role) -> AuthResponse:
        if not name or not email or not password or not role:
            raise ValidationError("All fields required")
        try:
            role = Role(role)
        except ValueError:
            raise ValidationError(
                "Role must be one of: " + ", ".join(r.value for r in Role)
            )

        email = normalize_email(email)
        if email_taken(db, email):
            raise ConflictError("Email already exists")

        user = User(
            name=name,
            email=email,
            password_hash=get_password_hash(password, self.settings.password_hash_iterations),
            role=role.value,
        )
        db.add(user)
        try:
            db.commit()
        except IntegrityError:
            # Concurrent signup with the same email won the race.
            db.rollback()
            raise ConflictError("Email already exists")
        db.refresh(user)

        logger.info("User %s signed up as %s", user.id, user.role)
        return self._response(user)

    def login(self, db: Session, email, password) -> AuthResponse:
        if not email or not password:
            raise InvalidCredentials()

        user = db.query(User).filter(User.email == normalize_email(email)).first()
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", normalize_email(email))
            raise InvalidCredentials()

        logger.info("User %s logged in", user.id)
        return self._response(user)
