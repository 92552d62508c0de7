import enum
from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship
from ..database import Base


class ListingStatus(str, enum.Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Listing(Base):
    """A PG (paying-guest) listing submitted by an owner"""
    __tablename__ = "pgs"

    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(200), nullable=False)
    rent = Column(Float, nullable=False)
    address = Column(String(500), nullable=False)
    city = Column(String(100), nullable=False)
    pincode = Column(String(20), nullable=False)
    distance = Column(Float, nullable=False)  # km from college
    college = Column(String(200))
    room_type = Column(String(50))
    gender = Column(String(20))
    deposit = Column(Float)
    facilities = Column(Text)  # JSON array text, see core.facilities
    description = Column(Text)
    status = Column(String(20), nullable=False, default=ListingStatus.PENDING.value, index=True)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    # Relationships
    owner = relationship("User", back_populates="listings")

    @property
    def owner_name(self):
        return self.owner.name if self.owner else None

    @property
    def owner_email(self):
        return self.owner.email if self.owner else None
