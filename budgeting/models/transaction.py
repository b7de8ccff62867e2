"""
Transaction model: a single recorded spend.
"""
from datetime import datetime, timezone
from typing import NamedTuple, Optional, Tuple, Union
from sqlalchemy import Column, String, Float, ForeignKey, Integer, Text
from sqlalchemy.orm import relationship
from budgeting.db.base import BaseModel
from budgeting.db.types import UTCDateTime


class TimeRange(NamedTuple):
    """Closed interval ``[lower_bound, upper_bound]``."""
    lower_bound: datetime
    upper_bound: datetime


class Transaction(BaseModel):
    """
    One spend against a category.
    
    ``category`` is a copy of the owning category's name taken at creation
    and is not updated afterwards. A time range, when given, is stored as its
    two endpoints.
    """
    __tablename__ = "transactions"
    
    category_id = Column(Integer, ForeignKey("budget_categories.id"), nullable=True, index=True)
    category = Column(String(255), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    date = Column(UTCDateTime, nullable=False)
    details = Column(Text, nullable=True)
    start_time = Column(UTCDateTime, nullable=True)
    end_time = Column(UTCDateTime, nullable=True)
    
    # Relationships
    budget_category = relationship("BudgetCategory", back_populates="transactions")
    
    def __init__(
        self,
        category: str,
        amount: float,
        date: Optional[datetime] = None,
        details: Optional[str] = None,
        time_range: Optional[Union[TimeRange, Tuple[datetime, datetime]]] = None
    ):
        self.category = category
        self.amount = amount
        self.date = date if date is not None else datetime.now(timezone.utc)
        self.details = details
        if time_range is not None:
            self.start_time, self.end_time = time_range
        else:
            self.start_time = None
            self.end_time = None
    
    @property
    def time_range(self) -> Optional[TimeRange]:
        """The interval, present only when both endpoints are set."""
        if self.start_time is None or self.end_time is None:
            return None
        return TimeRange(self.start_time, self.end_time)
    
    def __repr__(self) -> str:
        return f"Transaction(category={self.category!r}, amount={self.amount!r}, date={self.date!r})"
