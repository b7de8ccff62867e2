"""
Pydantic schemas for Transaction entity.
"""
from pydantic import BaseModel, field_validator, model_validator
from typing import Optional, Tuple
from datetime import datetime, timezone


class TransactionCreate(BaseModel):
    """Schema for recording a transaction against a category."""
    amount: float
    details: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    
    @field_validator("start_time", "end_time")
    @classmethod
    def to_utc(cls, v):
        """Normalize to UTC; times without an offset are read as UTC."""
        if v is None:
            return v
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v.astimezone(timezone.utc)
    
    @model_validator(mode="after")
    def check_time_range(self):
        """Start and end times come as a pair."""
        if (self.start_time is None) != (self.end_time is None):
            raise ValueError("start_time and end_time must be given together")
        return self
    
    @property
    def time_range(self) -> Optional[Tuple[datetime, datetime]]:
        if self.start_time is None:
            return None
        return (self.start_time, self.end_time)


class TransactionResponse(BaseModel):
    """Schema for transaction response."""
    id: int
    category: str
    amount: float
    date: datetime
    details: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    
    class Config:
        from_attributes = True
