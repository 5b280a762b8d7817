"""
Generic Hierarchy Repository

Single-row create/update/delete for any level, plus the flat reads the tree
assembler consumes. Every write is its own committed statement.
"""

from __future__ import annotations

import logging
from typing import Any
from uuid import UUID, uuid4

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from curriplan.core.errors import ServiceError

from .levels import LEVELS, Level
from .tree import TreeRows

logger = logging.getLogger(__name__)


async def create_node(db: AsyncSession, level: Level, data: dict[str, Any]) -> dict[str, Any]:
    """Insert one row with a fresh id and echo it back."""
    node_id = uuid4()
    values = level.create_values(data)
    try:
        await db.execute(insert(level.model).values(id=node_id, **values))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error adding {level.name}: {e}")
        raise ServiceError(f"Failed to add {level.name}", e) from e

    logger.debug(f"Created {level.name} {node_id}")
    return level.echo(node_id, values)


async def update_node(
    db: AsyncSession, level: Level, node_id: UUID, data: dict[str, Any]
) -> dict[str, Any]:
    """Full-replace update. Unknown ids affect zero rows and are not an error."""
    values = level.update_values(data)
    try:
        result = await db.execute(
            update(level.model).where(level.model.id == node_id).values(**values)
        )
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error updating {level.name}: {e}")
        raise ServiceError(f"Failed to update {level.name}", e) from e

    logger.debug(f"Updated {level.name} {node_id} ({result.rowcount} rows)")
    return level.echo(node_id, values)


async def delete_node(db: AsyncSession, level: Level, node_id: UUID) -> dict[str, str]:
    """Delete by id. Unknown ids succeed silently."""
    try:
        await db.execute(delete(level.model).where(level.model.id == node_id))
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Error deleting {level.name}: {e}")
        raise ServiceError(f"Failed to delete {level.name}", e) from e

    logger.debug(f"Deleted {level.name} {node_id}")
    return {"message": f"{level.label} deleted successfully"}


async def load_tree_rows(db: AsyncSession) -> TreeRows:
    """Read all seven tables, each ordered by creation time."""
    try:
        rows = []
        for level in LEVELS:
            result = await db.execute(select(level.model).order_by(level.model.created_at))
            rows.append(list(result.scalars().all()))
    except SQLAlchemyError as e:
        logger.error(f"Error fetching curriculum data: {e}")
        raise ServiceError("Failed to fetch curriculum data", e) from e

    return TreeRows(*rows)
