"""Small helpers shared by models and resolvers."""
from datetime import datetime, timezone


def utcnow():
    """Naive UTC timestamp, the form stored in the database."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_iso(value):
    """ISO-8601 string for a stored timestamp, or None when there is no usable date."""
    if not isinstance(value, datetime):
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
