"""
Bulk Curriculum Importer

Materializes nested curriculum documents into the seven tables.

The whole import runs on one pooled connection in autocommit mode, held
from the first insert to the last. Each node is inserted depth-first with a
freshly generated id before any of its children, and is durable as soon as
its statement returns. A failure anywhere inside one
curriculum document stops that document only: rows already committed for it
stay, the error is recorded under the curriculum's name, and the next
document is processed.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from typing import Any
from uuid import UUID, uuid4

from pydantic import ValidationError
from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from curriplan.core.errors import ImportValidationError, ServiceError
from curriplan.core.schemas import CurriculumImport, ImportResultsSchema

from .levels import CURRICULUM, LEVELS, Level, child_of

logger = logging.getLogger(__name__)


def extract_documents(payload: Any) -> list[Any]:
    """Pull the ``curriculums`` list out of an upload body.

    Raises:
        ImportValidationError: If the body is not an object or ``curriculums``
            is absent or not a list.
    """
    if isinstance(payload, dict):
        documents = payload.get("curriculums")
        if isinstance(documents, list):
            return documents
    raise ImportValidationError()


class CurriculumImporter:
    """Runs one bulk import over a single connection checked out of ``engine``."""

    def __init__(self, engine: AsyncEngine):
        self.engine = engine
        self.created: Counter[str] = Counter()
        self.errors: list[str] = []

    async def run(self, documents: Sequence[Any]) -> ImportResultsSchema:
        """Import every document, isolating failures per curriculum.

        Raises:
            ServiceError: If no database connection can be acquired; nothing
                is inserted in that case.
        """
        conn = self.engine.connect()
        try:
            await conn.start()
        except SQLAlchemyError as e:
            logger.error(f"Error uploading curriculum: {e}")
            raise ServiceError("Failed to upload curriculum", e) from e

        try:
            await conn.execution_options(isolation_level="AUTOCOMMIT")
            for raw in documents:
                await self._import_document(conn, raw)
        finally:
            await conn.close()

        results = self.results()
        logger.info(
            f"Curriculum upload completed: {results.curriculums_created} curriculums, "
            f"{len(results.errors)} failed"
        )
        return results

    async def _import_document(self, conn: AsyncConnection, raw: Any) -> None:
        name = raw.get("name") if isinstance(raw, dict) else None
        try:
            document = CurriculumImport.model_validate(raw)
            await self._insert_subtree(conn, CURRICULUM, document, None)
        except (SQLAlchemyError, ValidationError) as e:
            # Autocommit: rows inserted before the failure are already durable.
            await conn.rollback()
            reason = getattr(e, "orig", None) or e
            logger.error(f"Error processing curriculum {name}: {reason}")
            self.errors.append(f'Failed to process curriculum "{name}": {reason}')

    async def _insert_subtree(
        self, conn: AsyncConnection, level: Level, document: Any, parent_id: UUID | None
    ) -> None:
        node_id = uuid4()
        await conn.execute(
            insert(level.model).values(id=node_id, **level.import_values(document, parent_id))
        )
        self.created[level.plural] += 1

        child = child_of(level)
        if child is None:
            return
        for child_document in getattr(document, child.plural) or []:
            await self._insert_subtree(conn, child, child_document, node_id)

    def results(self) -> ImportResultsSchema:
        counts = {f"{level.plural}_created": self.created[level.plural] for level in LEVELS}
        return ImportResultsSchema(**counts, errors=list(self.errors))
