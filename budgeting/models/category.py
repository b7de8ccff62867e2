"""
Budget category model.
"""
from sqlalchemy import Column, String, Float, ForeignKey, Integer
from sqlalchemy.orm import relationship
from budgeting.db.base import BaseModel


class BudgetCategory(BaseModel):
    """Named allocation bucket owning its transactions."""
    __tablename__ = "budget_categories"
    
    budget_id = Column(Integer, ForeignKey("budgets.id"), nullable=True, index=True)
    name = Column(String(255), nullable=False)
    allocated = Column(Float, nullable=False, default=0.0)
    
    # Relationships
    budget = relationship("Budget", back_populates="categories")
    transactions = relationship(
        "Transaction",
        back_populates="budget_category",
        cascade="all, delete-orphan",
        order_by="Transaction.id"
    )
    
    def __init__(self, name: str, allocated: float):
        self.name = name
        self.allocated = allocated
    
    @property
    def spent(self) -> float:
        return sum((t.amount for t in self.transactions), 0.0)
    
    @property
    def remaining(self) -> float:
        # Negative when overspent
        return self.allocated - self.spent
    
    def __repr__(self) -> str:
        return f"BudgetCategory(name={self.name!r}, allocated={self.allocated!r})"
