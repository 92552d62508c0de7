from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from typing import Optional, List, Union
from datetime import datetime
from ..core.facilities import decode_facilities
from ..models.listing import ListingStatus


def _field(*names):
    return Field(default=None, validation_alias=AliasChoices(*names))


class ListingCreate(BaseModel):
    """Owner submission. Accepts the form names (pgName, ...) or column names.

    Unknown keys, including any ``status``, are dropped.
    """
    name: Optional[str] = _field("pgName", "name")
    rent: Optional[float] = _field("pgRent", "rent")
    address: Optional[str] = _field("pgAddress", "address")
    city: Optional[str] = _field("pgCity", "city")
    pincode: Optional[str] = _field("pgPincode", "pincode")
    distance: Optional[float] = _field("pgDistance", "distance")
    college: Optional[str] = _field("pgCollege", "college")
    room_type: Optional[str] = _field("pgRoomType", "room_type", "roomType")
    gender: Optional[str] = _field("pgGender", "gender")
    deposit: Optional[float] = _field("pgDeposit", "deposit")
    facilities: Optional[Union[List[str], str]] = None
    description: Optional[str] = _field("pgDescription", "description")

    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class PublicListing(BaseModel):
    id: int
    name: str
    rent: float
    address: str
    city: str
    distance: float
    college: Optional[str] = None
    room_type: Optional[str] = None
    gender: Optional[str] = None
    deposit: Optional[float] = None
    facilities: List[str] = []
    description: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @field_validator("facilities", mode="before")
    @classmethod
    def _decode_facilities(cls, value):
        return decode_facilities(value)


class OwnerListing(PublicListing):
    owner_id: int
    pincode: str
    status: ListingStatus


class AdminListing(OwnerListing):
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None


class PublicListingCollection(BaseModel):
    total: int
    listings: List[PublicListing]


class AdminListingCollection(BaseModel):
    total: int
    listings: List[AdminListing]


class OwnerListingCollection(BaseModel):
    listings: List[OwnerListing]


class ListingStatusResponse(BaseModel):
    message: str
    pgId: int
    status: ListingStatus
