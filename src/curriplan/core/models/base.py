"""
SQLAlchemy Base Model

Every level of the hierarchy is a ``HierarchyNode``: a UUID-keyed row with a
name, a stored objective list, and creation/update timestamps. Levels add
their parent foreign key and their own text columns.
"""

from __future__ import annotations

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import DateTime, String, Text, event, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class HierarchyNode(Base):
    """Columns shared by all seven levels.

    Ids are generated in-process, so a child's foreign key is known before
    any statement runs. ``created_at`` defines sibling order in the tree.
    """

    __abstract__ = True

    id: Mapped[UUID] = mapped_column(primary_key=True, default=uuid4, comment="UUID primary key")
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    learning_objectives: Mapped[str | None] = mapped_column(
        Text, nullable=True, comment="JSON array of objective strings"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        server_default=func.now(),
        nullable=False,
        index=True,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )


@event.listens_for(HierarchyNode, "init", propagate=True)
def receive_init(target, args, kwargs):  # type: ignore[no-untyped-def]
    """Fill id and timestamps on in-memory nodes the way an insert would."""
    if "id" not in kwargs:
        target.id = uuid4()
    now = utcnow()
    if "created_at" not in kwargs:
        target.created_at = now
    if "updated_at" not in kwargs:
        target.updated_at = now
