import enum
from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from ..database import Base


class Role(str, enum.Enum):
    STUDENT = "student"
    OWNER = "owner"
    ADMIN = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)  # stored lower-cased
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)  # student, owner, admin

    # Relationships
    listings = relationship("Listing", back_populates="owner")
