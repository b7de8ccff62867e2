"""
Main API router that includes all route modules.
"""
from fastapi import APIRouter
from budgeting.api.routes import budgets

api_router = APIRouter()

# Include all route modules
api_router.include_router(budgets.router)
