"""
Curriculum Tree Endpoints

Read the whole hierarchy as one nested document, and bulk-import nested
curriculum documents.
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from typing import Any

from fastapi import APIRouter, Body, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from curriplan.core.database import get_db
from curriplan.core.schemas import CurriculumTreeResponse, ImportResponse
from curriplan.hierarchy import CurriculumImporter, assemble_tree, extract_documents
from curriplan.hierarchy.repository import load_tree_rows

router = APIRouter(tags=["Curriculum"])


@router.get("/curriculums", response_model=CurriculumTreeResponse)
async def list_curriculums(db: AsyncSession = Depends(get_db)) -> CurriculumTreeResponse:
    """Return every curriculum with its full nested subtree.

    Siblings are ordered by creation time at every level.
    """
    rows = await load_tree_rows(db)
    return CurriculumTreeResponse(curriculums=assemble_tree(rows))


@router.post(
    "/curriculum/upload",
    response_model=ImportResponse,
    status_code=status.HTTP_201_CREATED,
)
async def upload_curriculum(
    payload: Any = Body(None), db: AsyncSession = Depends(get_db)
) -> ImportResponse:
    """Bulk-import nested curriculum documents.

    Body: ``{"curriculums": [...]}``. A failing document is reported in
    ``results.errors`` and does not stop the rest of the batch. The import
    runs on one connection from the session's engine; the session itself
    never checks one out.
    """
    documents = extract_documents(payload)
    results = await CurriculumImporter(db.bind).run(documents)
    return ImportResponse(message="Curriculum upload completed", results=results)
