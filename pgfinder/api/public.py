import math
from datetime import datetime, timezone
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from ..database import get_db
from ..core.exceptions import ValidationError
from ..schemas.listing import PublicListing, PublicListingCollection
from ..services import listings
from .errors import store_errors

router = APIRouter(prefix="/api", tags=["public"])


def _number(value: Optional[str], name: str) -> Optional[float]:
    # Search forms send empty strings for untouched inputs.
    if value is None or not value.strip():
        return None
    try:
        number = float(value)
    except ValueError:
        raise ValidationError(f"{name} must be a number")
    if not math.isfinite(number):
        raise ValidationError(f"{name} must be a finite number")
    return number


@router.get("/pgs", response_model=PublicListingCollection)
def search_pgs(
    min_price: Optional[str] = Query(None, alias="minPrice"),
    max_price: Optional[str] = Query(None, alias="maxPrice"),
    max_distance: Optional[str] = Query(None, alias="maxDistance"),
    facilities: Optional[str] = Query(None, description="Comma-separated tags, all required"),
    db: Session = Depends(get_db)
):
    """Approved PGs matching the filters, nearest first"""
    filters = {
        "min_price": _number(min_price, "minPrice"),
        "max_price": _number(max_price, "maxPrice"),
        "max_distance": _number(max_distance, "maxDistance"),
        "facilities": facilities,
    }
    with store_errors(db, "Fetching approved PGs"):
        rows = listings.search(db, **filters)
        items = [PublicListing.model_validate(row) for row in rows]
    return {"total": len(items), "listings": items}


@router.get("/health")
def health():
    return {
        "status": "OK",
        "message": "PG Finder API running",
        "time": datetime.now(timezone.utc).isoformat(),
    }
