from .user import SignupRequest, LoginRequest, UserOut, AuthResponse, TokenIdentity
from .listing import (
    ListingCreate, PublicListing, OwnerListing, AdminListing,
    PublicListingCollection, AdminListingCollection, OwnerListingCollection,
    ListingStatusResponse
)

__all__ = [
    "SignupRequest", "LoginRequest", "UserOut", "AuthResponse", "TokenIdentity",
    # Listing schemas
    "ListingCreate", "PublicListing", "OwnerListing", "AdminListing",
    "PublicListingCollection", "AdminListingCollection", "OwnerListingCollection",
    "ListingStatusResponse"
]
