from pydantic import BaseModel, ConfigDict
from typing import Optional
from ..models.user import Role


# Request schemas. Presence is checked by the auth service so that a missing
# field answers 400 with a message instead of a schema error.
class SignupRequest(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


# Response schemas
class UserOut(BaseModel):
    id: int
    name: str
    email: str
    role: Role

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    token: str
    role: Role
    user: UserOut


class TokenIdentity(BaseModel):
    """Identity carried by a verified token"""
    id: int
    email: str
    role: Role
