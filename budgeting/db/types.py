"""
Custom column types.
"""
from datetime import datetime, timezone
from sqlalchemy import JSON, DateTime
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """
    Timestamp stored as naive UTC and loaded back as aware UTC.

    Aware values are converted to UTC before storing; naive values are taken
    to be UTC already.
    """
    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class BudgetUnitType(TypeDecorator):
    """Stores a BudgetUnit as its two-field ``{"type", "value"}`` JSON form."""
    impl = JSON
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return value.to_dict()

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        # Imported here: budgeting.models imports this module while loading
        from budgeting.models.unit import BudgetUnit
        return BudgetUnit.from_dict(value)
