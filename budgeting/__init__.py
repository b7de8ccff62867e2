"""
Budgeting: budgets, categories, transactions and a standalone ledger.
"""
__version__ = "1.0.0"
