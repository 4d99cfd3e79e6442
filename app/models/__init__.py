"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.report import SecurityReport

__all__ = ["Base", "SecurityReport"]
