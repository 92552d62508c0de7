from .auth import AuthService
from . import listings

__all__ = ["AuthService", "listings"]
