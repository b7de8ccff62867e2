"""
Tests for storing budgets through SQLAlchemy.
"""
import json
import subprocess
import sys
from datetime import datetime, timedelta, timezone
import pytest
from sqlalchemy import text
from budgeting.core.exceptions import BudgetNotFound, CategoryNotFound
from budgeting.models.budget import Budget
from budgeting.models.category import BudgetCategory
from budgeting.models.transaction import Transaction
from budgeting.models.unit import Money, Numeric
from budgeting.services import budget_service


def make_budget() -> Budget:
    budget = Budget.with_currency("Monthly", "USD")
    budget.allocate("Food", 500)
    budget.allocate("Transport", 200)
    budget.record(50, "Food", details="Lunch")
    budget.record(30, "Transport")
    budget.record(20, "Food", details="Snack")
    return budget


def test_reload_preserves_order_and_values(db):
    budget = make_budget()
    db.add(budget)
    db.commit()
    budget_id = budget.id
    db.expunge_all()
    
    loaded = db.get(Budget, budget_id)
    
    assert loaded.unit == Money(currency="USD")
    assert [c.name for c in loaded.categories] == ["Food", "Transport"]
    assert [t.details for t in loaded.transactions("Food")] == ["Lunch", "Snack"]
    assert [t.amount for t in loaded.all_transactions] == [50, 20, 30]
    assert loaded.report() == [("Food", 500, 70, 430), ("Transport", 200, 30, 170)]


def test_unit_stored_as_tagged_json(db):
    db.add(Budget("Inventory", Numeric(unit="items")))
    db.commit()
    raw = db.execute(text("SELECT unit FROM budgets")).scalar_one()
    if isinstance(raw, str):
        raw = json.loads(raw)
    assert raw == {"type": "numeric", "value": "items"}


def test_time_range_persists(db):
    start = datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    end = start + timedelta(hours=1)
    budget = Budget.with_time_unit("Project", "hours")
    budget.allocate("Work", 10)
    budget.record(1.0, "Work", time_range=(start, end))
    db.add(budget)
    db.commit()
    db.expunge_all()
    
    loaded = db.query(Transaction).one()
    assert loaded.time_range == (start, end)


def test_delete_cascades(db):
    budget = make_budget()
    keep = Budget.with_currency("Other", "EUR")
    keep.allocate("Rent", 900)
    keep.record(900, "Rent")
    db.add_all([budget, keep])
    db.commit()
    
    db.delete(budget)
    db.commit()
    
    assert db.query(Budget).count() == 1
    assert [c.name for c in db.query(BudgetCategory).all()] == ["Rent"]
    assert db.query(Transaction).count() == 1


def test_allocate_overwrite_persists(db):
    budget = budget_service.create_budget("Test", Money(currency="USD"), db)
    budget_service.allocate(budget.id, "Food", 500, db)
    budget_service.record(budget.id, "Food", 100, db)
    budget_service.allocate(budget.id, "Food", 250, db)
    
    assert db.query(BudgetCategory).count() == 1
    assert budget_service.remaining(budget.id, "Food", db) == 150
    assert len(budget_service.transactions(budget.id, "Food", db)) == 1


def test_service_record_failure_commits_nothing(db):
    budget = budget_service.create_budget("Test", Money(currency="USD"), db)
    budget_service.allocate(budget.id, "Food", 500, db)
    
    with pytest.raises(CategoryNotFound):
        budget_service.record(budget.id, "Development", 2.5, db)
    db.rollback()
    
    assert db.query(Transaction).count() == 0
    assert budget_service.report(budget.id, db) == [("Food", 500, 0, 500)]


def test_service_unknown_budget(db):
    with pytest.raises(BudgetNotFound):
        budget_service.get_budget(999, db)
    with pytest.raises(BudgetNotFound):
        budget_service.delete_budget(999, db)


def test_service_list_and_delete(db):
    first = budget_service.create_budget("A", Money(currency="USD"), db)
    second = budget_service.create_budget("B", Money(currency="EUR"), db)
    budget_service.allocate(first.id, "Food", 10, db)
    budget_service.record(first.id, "Food", 5, db)
    
    assert [b.name for b in budget_service.list_budgets(db)] == ["A", "B"]
    
    budget_service.delete_budget(first.id, db)
    
    assert [b.id for b in budget_service.list_budgets(db)] == [second.id]
    assert db.query(Transaction).count() == 0
    assert budget_service.all_transactions(second.id, db) == []


def test_offset_times_keep_their_instant(db):
    """Times with a UTC offset are stored as the same moment in UTC."""
    plus_two = timezone(timedelta(hours=2))
    start = datetime(2024, 5, 1, 9, 0, tzinfo=plus_two)
    end = datetime(2024, 5, 1, 10, 30, tzinfo=plus_two)
    budget = Budget.with_time_unit("Project", "hours")
    budget.allocate("Work", 10)
    budget.record(1.5, "Work", time_range=(start, end))
    db.add(budget)
    db.commit()
    db.expunge_all()
    
    loaded = db.query(Transaction).one()
    assert loaded.time_range == (start, end)
    assert loaded.start_time == datetime(2024, 5, 1, 7, 0, tzinfo=timezone.utc)
    assert loaded.start_time.utcoffset() == timedelta(0)


def test_naive_times_read_back_as_utc(db):
    budget = Budget.with_time_unit("Project", "hours")
    budget.allocate("Work", 10)
    budget.record(1.0, "Work", time_range=(datetime(2024, 5, 1, 9, 0), datetime(2024, 5, 1, 10, 0)))
    db.add(budget)
    db.commit()
    db.expunge_all()
    
    loaded = db.query(Transaction).one()
    assert loaded.start_time == datetime(2024, 5, 1, 9, 0, tzinfo=timezone.utc)
    assert loaded.date.tzinfo is not None
    assert db.query(Budget).one().created_at.tzinfo is not None


@pytest.mark.parametrize("module", [
    "budgeting.db.types",
    "budgeting.db.base",
    "budgeting.models.budget",
    "budgeting.schemas.budget",
])
def test_modules_import_on_their_own(module):
    """Each module loads in a fresh interpreter without a prior models import."""
    result = subprocess.run(
        [sys.executable, "-c", f"import {module}"],
        capture_output=True,
        text=True
    )
    assert result.returncode == 0, result.stderr
