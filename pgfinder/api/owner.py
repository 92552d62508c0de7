from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from ..database import get_db
from ..core.permissions import require_owner
from ..schemas.listing import ListingCreate, OwnerListing, OwnerListingCollection, ListingStatusResponse
from ..schemas.user import TokenIdentity
from ..services import listings
from .errors import store_errors

router = APIRouter(prefix="/api", tags=["owner"])


@router.post("/pg/add", response_model=ListingStatusResponse, status_code=status.HTTP_201_CREATED)
def add_pg(
    body: ListingCreate,
    db: Session = Depends(get_db),
    current_user: TokenIdentity = Depends(require_owner)
):
    """Submit a PG for admin approval"""
    with store_errors(db, "Adding PG"):
        listing = listings.submit(db, current_user.id, body)
    return {"message": "PG submitted for approval", "pgId": listing.id, "status": listing.status}


@router.get("/owner/pgs", response_model=OwnerListingCollection)
def get_owner_pgs(
    db: Session = Depends(get_db),
    current_user: TokenIdentity = Depends(require_owner)
):
    """All of the caller's PGs, any status, newest first"""
    with store_errors(db, "Fetching owner PGs"):
        rows = listings.list_by_owner(db, current_user.id)
        return {"listings": [OwnerListing.model_validate(row) for row in rows]}
