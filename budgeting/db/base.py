"""
Declarative base and shared columns for all ORM models.
"""
from sqlalchemy import Column, Integer
from sqlalchemy.orm import declarative_base
from budgeting.db.types import UTCDateTime, utc_now

Base = declarative_base()


class BaseModel(Base):
    """Abstract model with a surrogate key and audit timestamps."""
    __abstract__ = True
    
    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    created_at = Column(UTCDateTime, default=utc_now, nullable=False)
    updated_at = Column(UTCDateTime, default=utc_now, onupdate=utc_now, nullable=False)
