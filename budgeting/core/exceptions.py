"""
Errors raised by the budgeting model and its service layer.
"""


class BudgetError(Exception):
    """Base class for budgeting errors."""


class CategoryNotFound(BudgetError, LookupError):
    """No category with the given name exists in the budget."""

    def __init__(self, category: str):
        super().__init__(f"Category not found: {category!r}")
        self.category = category


class BudgetNotFound(BudgetError, LookupError):
    """No stored budget has the given id."""

    def __init__(self, budget_id: int):
        super().__init__(f"Budget not found: {budget_id}")
        self.budget_id = budget_id


class DecodeError(BudgetError, ValueError):
    """A serialized budget unit is malformed or carries an unknown tag."""
