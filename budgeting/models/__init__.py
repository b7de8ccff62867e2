"""Models package - Import all models for SQLAlchemy registration."""
from budgeting.models.unit import BudgetUnit, Money, Time, Numeric
from budgeting.models.transaction import Transaction, TimeRange
from budgeting.models.category import BudgetCategory
from budgeting.models.budget import Budget, CategoryReport
from budgeting.models.ledger import Ledger

__all__ = [
    "BudgetUnit",
    "Money",
    "Time",
    "Numeric",
    "Transaction",
    "TimeRange",
    "BudgetCategory",
    "Budget",
    "CategoryReport",
    "Ledger",
]
