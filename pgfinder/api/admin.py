from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from ..database import get_db
from ..core.permissions import require_admin
from ..models.listing import ListingStatus
from ..schemas.listing import AdminListing, AdminListingCollection, ListingStatusResponse
from ..schemas.user import TokenIdentity
from ..services import listings
from .errors import store_errors

router = APIRouter(prefix="/api/admin", tags=["admin"])


def _collection(rows):
    items = [AdminListing.model_validate(row) for row in rows]
    return {"total": len(items), "listings": items}


@router.get("/pgs/pending", response_model=AdminListingCollection)
def get_pending_pgs(
    db: Session = Depends(get_db),
    current_user: TokenIdentity = Depends(require_admin)
):
    """PGs waiting for moderation, newest first"""
    with store_errors(db, "Fetching pending PGs"):
        return _collection(listings.list_pending(db))


@router.get("/pgs", response_model=AdminListingCollection)
def get_all_pgs(
    db: Session = Depends(get_db),
    current_user: TokenIdentity = Depends(require_admin)
):
    """Every PG, grouped by status then newest first"""
    with store_errors(db, "Fetching admin PGs"):
        return _collection(listings.list_all(db))


@router.patch("/pgs/{pg_id}/approve", response_model=ListingStatusResponse)
def approve_pg(
    pg_id: int,
    db: Session = Depends(get_db),
    current_user: TokenIdentity = Depends(require_admin)
):
    with store_errors(db, "Approving PG"):
        listings.set_status(db, pg_id, ListingStatus.APPROVED)
    return {"message": "PG approved successfully", "pgId": pg_id, "status": ListingStatus.APPROVED}


@router.patch("/pgs/{pg_id}/reject", response_model=ListingStatusResponse)
def reject_pg(
    pg_id: int,
    db: Session = Depends(get_db),
    current_user: TokenIdentity = Depends(require_admin)
):
    with store_errors(db, "Rejecting PG"):
        listings.set_status(db, pg_id, ListingStatus.REJECTED)
    return {"message": "PG rejected successfully", "pgId": pg_id, "status": ListingStatus.REJECTED}
