from ..database import Base
from .user import User, Role
from .listing import Listing, ListingStatus

__all__ = [
    "Base",
    "User",
    "Role",
    "Listing",
    "ListingStatus",
]
