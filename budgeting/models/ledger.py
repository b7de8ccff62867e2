"""
Standalone transaction log.
"""
from typing import Iterator, List
from budgeting.models.transaction import Transaction


class Ledger:
    """
    Flat, append-only list of transactions grouped only by their category string.
    
    A ledger has no link to any Budget; recording here does not require the
    category to exist anywhere.
    """
    
    def __init__(self):
        self._transactions: List[Transaction] = []
    
    def record(self, transaction: Transaction) -> None:
        self._transactions.append(transaction)
    
    def transactions(self, category: str) -> List[Transaction]:
        """Transactions whose category equals ``category`` exactly, in recording order."""
        return [t for t in self._transactions if t.category == category]
    
    def total_spent(self, category: str) -> float:
        """Sum of amounts for ``category``; 0 when nothing matches."""
        return sum((t.amount for t in self.transactions(category)), 0.0)
    
    def __len__(self) -> int:
        return len(self._transactions)
    
    def __iter__(self) -> Iterator[Transaction]:
        return iter(list(self._transactions))
