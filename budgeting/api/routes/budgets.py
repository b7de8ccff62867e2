"""
Budget management routes.

Route handlers call the budget service directly and translate its lookup
errors into 404 responses.
"""
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from typing import List
from budgeting.db.session import get_db
from budgeting.core.exceptions import BudgetNotFound, CategoryNotFound
from budgeting.models.budget import Budget
from budgeting.models.unit import BudgetUnit
from budgeting.schemas.budget import (
    AllocationUpdate, BudgetCreate, BudgetDetailResponse, BudgetResponse,
    CategoryReportItem, RemainingResponse
)
from budgeting.schemas.transaction import TransactionCreate, TransactionResponse
from budgeting.services import budget_service

router = APIRouter(prefix="/budgets", tags=["budgets"])


def budget_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Budget not found"
    )


def category_not_found(category: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Category '{category}' not found"
    )


def build_detail(budget: Budget) -> BudgetDetailResponse:
    """Budget response with a fresh category report."""
    return BudgetDetailResponse(
        id=budget.id,
        name=budget.name,
        unit=budget.unit.to_dict(),
        created_at=budget.created_at,
        updated_at=budget.updated_at,
        categories=[CategoryReportItem(**row._asdict()) for row in budget.report()]
    )


@router.post("", response_model=BudgetResponse, status_code=status.HTTP_201_CREATED)
async def create_budget(
    budget_data: BudgetCreate,
    db: Session = Depends(get_db)
):
    """Create a new budget."""
    unit = BudgetUnit.from_dict(budget_data.unit.model_dump())
    return budget_service.create_budget(budget_data.name, unit, db)


@router.get("", response_model=List[BudgetResponse])
async def list_budgets(db: Session = Depends(get_db)):
    """List all budgets."""
    return budget_service.list_budgets(db)


@router.get("/{budget_id}", response_model=BudgetDetailResponse)
async def get_budget(
    budget_id: int,
    db: Session = Depends(get_db)
):
    """Get budget details with its category report."""
    try:
        budget = budget_service.get_budget(budget_id, db)
    except BudgetNotFound:
        raise budget_not_found()
    return build_detail(budget)


@router.delete("/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_budget(
    budget_id: int,
    db: Session = Depends(get_db)
):
    """Delete a budget and everything it owns."""
    try:
        budget_service.delete_budget(budget_id, db)
    except BudgetNotFound:
        raise budget_not_found()
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{budget_id}/categories/{category}", response_model=BudgetDetailResponse)
async def allocate_category(
    budget_id: int,
    category: str,
    allocation: AllocationUpdate,
    db: Session = Depends(get_db)
):
    """Set or edit the allocation of a category."""
    try:
        budget = budget_service.allocate(budget_id, category, allocation.amount, db)
    except BudgetNotFound:
        raise budget_not_found()
    return build_detail(budget)


@router.post(
    "/{budget_id}/categories/{category}/transactions",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED
)
async def record_transaction(
    budget_id: int,
    category: str,
    transaction_data: TransactionCreate,
    db: Session = Depends(get_db)
):
    """Record a spend against an allocated category."""
    try:
        return budget_service.record(
            budget_id,
            category,
            transaction_data.amount,
            db,
            details=transaction_data.details,
            time_range=transaction_data.time_range
        )
    except BudgetNotFound:
        raise budget_not_found()
    except CategoryNotFound:
        raise category_not_found(category)


@router.get(
    "/{budget_id}/categories/{category}/transactions",
    response_model=List[TransactionResponse]
)
async def get_category_transactions(
    budget_id: int,
    category: str,
    db: Session = Depends(get_db)
):
    """Get transactions of one category, oldest first."""
    try:
        return budget_service.transactions(budget_id, category, db)
    except BudgetNotFound:
        raise budget_not_found()
    except CategoryNotFound:
        raise category_not_found(category)


@router.get("/{budget_id}/categories/{category}/remaining", response_model=RemainingResponse)
async def get_remaining(
    budget_id: int,
    category: str,
    db: Session = Depends(get_db)
):
    """Get the remaining amount of one category."""
    try:
        value = budget_service.remaining(budget_id, category, db)
    except BudgetNotFound:
        raise budget_not_found()
    except CategoryNotFound:
        raise category_not_found(category)
    return RemainingResponse(category=category, remaining=value)


@router.get("/{budget_id}/transactions", response_model=List[TransactionResponse])
async def get_all_transactions(
    budget_id: int,
    db: Session = Depends(get_db)
):
    """Get every transaction of the budget, grouped by category."""
    try:
        return budget_service.all_transactions(budget_id, db)
    except BudgetNotFound:
        raise budget_not_found()


@router.get("/{budget_id}/report", response_model=List[CategoryReportItem])
async def get_report(
    budget_id: int,
    db: Session = Depends(get_db)
):
    """Get allocated, spent and remaining per category."""
    try:
        rows = budget_service.report(budget_id, db)
    except BudgetNotFound:
        raise budget_not_found()
    return [CategoryReportItem(**row._asdict()) for row in rows]
