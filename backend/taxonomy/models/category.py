"""
Category database model.
"""

import uuid
from datetime import datetime
from sqlalchemy import Column, String, DateTime, Enum, ForeignKey
import enum
from taxonomy.database import Base


class CategoryStatus(str, enum.Enum):
    """Category status enumeration."""
    active = "active"
    inactive = "inactive"


class Category(Base):
    """Category model with hierarchical support."""

    __tablename__ = "categories"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    name = Column(String(100), nullable=False, index=True)
    parent_id = Column(String(36), ForeignKey("categories.id"), nullable=True, index=True)
    status = Column(Enum(CategoryStatus), default=CategoryStatus.active, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<Category {self.id} {self.name!r} parent={self.parent_id} {self.status.value if self.status else None}>"
