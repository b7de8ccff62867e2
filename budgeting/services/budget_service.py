"""
Budget service: session-bound budget operations.

Each function loads the budget by id, applies the model operation and
commits. Lookup failures propagate to the caller without touching the session.
"""
import logging
from datetime import datetime
from typing import List, Optional, Tuple
from sqlalchemy.orm import Session
from budgeting.core.exceptions import BudgetNotFound, CategoryNotFound
from budgeting.models.budget import Budget, CategoryReport
from budgeting.models.transaction import Transaction
from budgeting.models.unit import BudgetUnit

logger = logging.getLogger(__name__)


def create_budget(name: str, unit: BudgetUnit, db: Session) -> Budget:
    """Create and persist an empty budget."""
    budget = Budget(name=name, unit=unit)
    db.add(budget)
    db.commit()
    db.refresh(budget)
    logger.info(f"Created budget {budget.id} '{name}' ({unit.tag}: {unit.value})")
    return budget


def get_budget(budget_id: int, db: Session) -> Budget:
    """
    Load a budget by id.
    
    Raises:
        BudgetNotFound: if no budget has this id
    """
    budget = db.query(Budget).filter(Budget.id == budget_id).first()
    if not budget:
        logger.warning(f"Budget {budget_id} not found")
        raise BudgetNotFound(budget_id)
    return budget


def list_budgets(db: Session) -> List[Budget]:
    """All budgets in creation order."""
    return db.query(Budget).order_by(Budget.id).all()


def delete_budget(budget_id: int, db: Session) -> None:
    """Delete a budget together with its categories and transactions."""
    budget = get_budget(budget_id, db)
    db.delete(budget)
    db.commit()
    logger.info(f"Deleted budget {budget_id}")


def allocate(budget_id: int, category: str, amount: float, db: Session) -> Budget:
    """Create or overwrite the allocation of ``category``."""
    budget = get_budget(budget_id, db)
    budget.allocate(category, amount)
    db.commit()
    db.refresh(budget)
    logger.info(f"Allocated {amount} to '{category}' in budget {budget_id}")
    return budget


def record(
    budget_id: int,
    category: str,
    amount: float,
    db: Session,
    details: Optional[str] = None,
    time_range: Optional[Tuple[datetime, datetime]] = None
) -> Transaction:
    """
    Record a spend against an allocated category.
    
    Raises:
        BudgetNotFound: if the budget does not exist
        CategoryNotFound: if the category was never allocated; nothing is committed
    """
    budget = get_budget(budget_id, db)
    try:
        transaction = budget.record(amount, category, details=details, time_range=time_range)
    except CategoryNotFound:
        logger.warning(f"Cannot record {amount} in budget {budget_id}: category '{category}' not allocated")
        raise
    db.commit()
    db.refresh(transaction)
    logger.info(f"Recorded {amount} against '{category}' in budget {budget_id}")
    return transaction


def remaining(budget_id: int, category: str, db: Session) -> float:
    """Remaining amount of ``category``."""
    budget = get_budget(budget_id, db)
    value = budget.remaining(category)
    logger.debug(f"Remaining for '{category}' in budget {budget_id}: {value}")
    return value


def transactions(budget_id: int, category: str, db: Session) -> List[Transaction]:
    """Transactions of ``category`` in recording order."""
    return get_budget(budget_id, db).transactions(category)


def all_transactions(budget_id: int, db: Session) -> List[Transaction]:
    """Every transaction of the budget, grouped by category."""
    return get_budget(budget_id, db).all_transactions


def report(budget_id: int, db: Session) -> List[CategoryReport]:
    """Per-category allocated/spent/remaining rows."""
    budget = get_budget(budget_id, db)
    rows = budget.report()
    logger.debug(f"Built report for budget {budget_id} with {len(rows)} categories")
    return rows
