"""Listing lifecycle and public search.

A listing is created ``pending`` and only becomes publicly searchable once an
admin approves it. Admins may flip a listing between ``approved`` and
``rejected`` any number of times.
"""

import json
import logging
from typing import List, Optional
from sqlalchemy.orm import Session, joinedload
from ..core.exceptions import ValidationError, NotFound
from ..core.facilities import decode_facilities, encode_facilities, parse_facility_filter
from ..models.listing import Listing, ListingStatus
from ..schemas.listing import ListingCreate

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "rent", "address", "city", "pincode", "distance")

LIKE_ESCAPE = "\\"


def submit(db: Session, owner_id: int, fields: ListingCreate) -> Listing:
    missing = [field for field in REQUIRED_FIELDS if not getattr(fields, field)]
    if missing:
        raise ValidationError("Missing required fields: " + ", ".join(missing))

    data = fields.model_dump(exclude={"facilities"})
    listing = Listing(
        **data,
        owner_id=owner_id,
        facilities=encode_facilities(fields.facilities),
        status=ListingStatus.PENDING.value,
    )
    db.add(listing)
    db.commit()
    db.refresh(listing)

    logger.info("Listing %s submitted by owner %s", listing.id, owner_id)
    return listing


def list_by_owner(db: Session, owner_id: int) -> List[Listing]:
    return (
        db.query(Listing)
        .filter(Listing.owner_id == owner_id)
        .order_by(Listing.created_at.desc(), Listing.id.desc())
        .all()
    )


def list_pending(db: Session) -> List[Listing]:
    return (
        db.query(Listing)
        .options(joinedload(Listing.owner))
        .filter(Listing.status == ListingStatus.PENDING.value)
        .order_by(Listing.created_at.desc(), Listing.id.desc())
        .all()
    )


def list_all(db: Session) -> List[Listing]:
    return (
        db.query(Listing)
        .options(joinedload(Listing.owner))
        .order_by(Listing.status.asc(), Listing.created_at.desc(), Listing.id.desc())
        .all()
    )


def set_status(db: Session, listing_id: int, status: ListingStatus) -> Listing:
    status = ListingStatus(status)
    if status == ListingStatus.PENDING:
        raise ValidationError("Listings can only be approved or rejected")

    updated = (
        db.query(Listing)
        .filter(Listing.id == listing_id)
        .update({Listing.status: status.value}, synchronize_session=False)
    )
    if not updated:
        db.rollback()
        raise NotFound("PG not found")
    db.commit()

    logger.info("Listing %s %s", listing_id, status.value)
    return db.get(Listing, listing_id)


def _escape_like(value: str) -> str:
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def facility_contains(tag: str):
    """Predicate: the stored JSON array text contains ``tag`` as an element.

    LIKE ignores ASCII case on SQLite and on MySQL's default collations, so
    this only narrows the rows; ``search`` makes the exact comparison.
    """
    pattern = "%" + _escape_like(json.dumps(tag)) + "%"
    return Listing.facilities.like(pattern, escape=LIKE_ESCAPE)


def build_search_query(
    db: Session,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    max_distance: Optional[float] = None,
    facilities: Optional[str] = None,
):
    query = db.query(Listing).filter(Listing.status == ListingStatus.APPROVED.value)

    if min_price is not None:
        query = query.filter(Listing.rent >= min_price)
    if max_price is not None:
        query = query.filter(Listing.rent <= max_price)
    if max_distance is not None:
        query = query.filter(Listing.distance <= max_distance)
    # Every requested tag must be present.
    for tag in parse_facility_filter(facilities):
        query = query.filter(facility_contains(tag))

    return query.order_by(Listing.distance.asc(), Listing.id.asc())


def search(db: Session, **filters) -> List[Listing]:
    rows = build_search_query(db, **filters).all()
    wanted = parse_facility_filter(filters.get("facilities"))
    if not wanted:
        return rows
    return [row for row in rows if set(wanted) <= set(decode_facilities(row.facilities))]
