"""
Pydantic schemas for Budget entity.
"""
from pydantic import BaseModel, field_validator
from typing import List
from datetime import datetime
from budgeting.models.unit import BudgetUnit
from budgeting.schemas.unit import UnitPayload


class BudgetBase(BaseModel):
    """Base budget schema."""
    name: str
    unit: UnitPayload


class BudgetCreate(BudgetBase):
    """Schema for budget creation."""
    pass


class AllocationUpdate(BaseModel):
    """Schema for setting a category allocation."""
    amount: float


class CategoryReportItem(BaseModel):
    """Schema for one category row of a budget report."""
    name: str
    allocated: float
    spent: float
    remaining: float
    
    model_config = {"from_attributes": True}


class BudgetResponse(BudgetBase):
    """Schema for budget response."""
    id: int
    created_at: datetime
    updated_at: datetime
    
    @field_validator("unit", mode="before")
    @classmethod
    def serialize_unit(cls, v):
        """Accept the model-side unit value and expose its wire form."""
        if isinstance(v, BudgetUnit):
            return v.to_dict()
        return v
    
    class Config:
        from_attributes = True


class BudgetDetailResponse(BudgetResponse):
    """Schema for budget response with its category report."""
    categories: List[CategoryReportItem] = []


class RemainingResponse(BaseModel):
    """Schema for the remaining amount of one category."""
    category: str
    remaining: float
