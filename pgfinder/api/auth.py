from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..core.permissions import get_auth_service
from ..schemas.user import SignupRequest, LoginRequest, AuthResponse
from ..services.auth import AuthService
from .errors import store_errors

router = APIRouter(prefix="/api/auth", tags=["authentication"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    body: SignupRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service)
):
    """Register a new user and return a token"""
    with store_errors(db, "Signup"):
        return auth.signup(db, body.name, body.email, body.password, body.role)


@router.post("/login", response_model=AuthResponse)
def login(
    body: LoginRequest,
    db: Session = Depends(get_db),
    auth: AuthService = Depends(get_auth_service)
):
    """Login and get access token"""
    with store_errors(db, "Login"):
        return auth.login(db, body.email, body.password)
