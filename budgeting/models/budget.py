"""
Budget model: the top-level aggregate of categories and their transactions.
"""
from datetime import datetime
from typing import List, NamedTuple, Optional, Tuple, Union
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from budgeting.core.exceptions import CategoryNotFound
from budgeting.db.base import BaseModel
from budgeting.db.types import BudgetUnitType
from budgeting.models.category import BudgetCategory
from budgeting.models.transaction import Transaction, TimeRange
from budgeting.models.unit import BudgetUnit, Money, Time


class CategoryReport(NamedTuple):
    """One report row: ``(name, allocated, spent, remaining)``."""
    name: str
    allocated: float
    spent: float
    remaining: float


class Budget(BaseModel):
    """
    A named budget measured in one unit and split into categories.
    
    Categories are looked up by exact, case-sensitive name. Allocation creates
    a category or overwrites its amount; recording requires the category to
    exist already.
    """
    __tablename__ = "budgets"
    
    name = Column(String(200), nullable=False)
    unit = Column(BudgetUnitType, nullable=False)
    
    # Relationships
    categories = relationship(
        "BudgetCategory",
        back_populates="budget",
        cascade="all, delete-orphan",
        order_by="BudgetCategory.id"
    )
    
    def __init__(self, name: str, unit: BudgetUnit):
        self.name = name
        self.unit = unit
    
    @classmethod
    def with_currency(cls, name: str, currency: str) -> "Budget":
        """Money budget in ``currency``."""
        return cls(name, Money(currency=currency))
    
    @classmethod
    def with_time_unit(cls, name: str, time_unit: str) -> "Budget":
        """Time budget measured in ``time_unit``."""
        return cls(name, Time(unit=time_unit))
    
    def _find(self, category: str) -> Optional[BudgetCategory]:
        for cat in self.categories:
            if cat.name == category:
                return cat
        return None
    
    def _require(self, category: str) -> BudgetCategory:
        cat = self._find(category)
        if cat is None:
            raise CategoryNotFound(category)
        return cat
    
    def allocate(self, category: str, amount: float) -> None:
        """Set the allocation for ``category``, creating the category if needed."""
        existing = self._find(category)
        if existing is not None:
            existing.allocated = amount
        else:
            self.categories.append(BudgetCategory(name=category, allocated=amount))
    
    def record(
        self,
        amount: float,
        category: str,
        details: Optional[str] = None,
        time_range: Optional[Union[TimeRange, Tuple[datetime, datetime]]] = None
    ) -> Transaction:
        """
        Record a spend against an allocated category.
        
        Returns the new transaction.
        
        Raises:
            CategoryNotFound: if ``category`` was never allocated. The budget
                is left unchanged.
        """
        cat = self._require(category)
        transaction = Transaction(
            category=category,
            amount=amount,
            details=details,
            time_range=time_range
        )
        cat.transactions.append(transaction)
        return transaction
    
    def remaining(self, category: str) -> float:
        """Allocated minus spent for ``category``."""
        return self._require(category).remaining
    
    def transactions(self, category: str) -> List[Transaction]:
        """Transactions of ``category``, oldest first."""
        return list(self._require(category).transactions)
    
    @property
    def all_transactions(self) -> List[Transaction]:
        """Every transaction, grouped by category in category order."""
        return [t for cat in self.categories for t in cat.transactions]
    
    def report(self) -> List[CategoryReport]:
        """One ``(name, allocated, spent, remaining)`` row per category."""
        return [
            CategoryReport(cat.name, cat.allocated, cat.spent, cat.remaining)
            for cat in self.categories
        ]
    
    def __repr__(self) -> str:
        return f"Budget(name={self.name!r}, unit={self.unit!r})"
