"""
Base model shared by all tables.
"""
from datetime import datetime, timezone
from sqlalchemy.orm import DeclarativeBase
import uuid


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def generate_uuid():
    """Generate a UUID string."""
    return str(uuid.uuid4())


def utcnow():
    """Timezone-aware current UTC time."""
    return datetime.now(timezone.utc)
