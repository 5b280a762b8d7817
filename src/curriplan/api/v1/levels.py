"""
Hierarchy CRUD Endpoints

One router per level, all built from the same factory:

    POST   /{plural}             create (server generates the id)
    PUT    /{plural}/{node_id}   full-replace update
    DELETE /{plural}/{node_id}   delete
"""
# ruff: noqa: B008 - FastAPI Depends in function defaults is standard pattern

from typing import Any
from uuid import UUID

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from curriplan.core.database import get_db
from curriplan.core.schemas import (
    ActivityCreate,
    ActivityUpdate,
    BookCreate,
    BookUpdate,
    CamelModel,
    CurriculumCreate,
    CurriculumUpdate,
    DeleteResponse,
    GradeCreate,
    GradeUpdate,
    LessonCreate,
    LessonUpdate,
    StageCreate,
    StageUpdate,
    UnitCreate,
    UnitUpdate,
)
from curriplan.hierarchy import repository
from curriplan.hierarchy.levels import ACTIVITY, BOOK, CURRICULUM, GRADE, LESSON, STAGE, UNIT, Level


def build_level_router(
    level: Level, create_schema: type[CamelModel], update_schema: type[CamelModel]
) -> APIRouter:
    """Create the create/update/delete router for one level."""
    router = APIRouter(prefix=f"/{level.plural}", tags=[level.label])

    @router.post("", status_code=status.HTTP_201_CREATED, name=f"create_{level.name}")
    async def create_node(
        payload: create_schema, db: AsyncSession = Depends(get_db)  # type: ignore[valid-type]
    ) -> dict[str, Any]:
        """Create a node under an existing parent."""
        return await repository.create_node(db, level, payload.model_dump())

    @router.put("/{node_id}", name=f"update_{level.name}")
    async def update_node(
        node_id: UUID,
        payload: update_schema,  # type: ignore[valid-type]
        db: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        """Replace every mutable field; omitted fields are cleared."""
        return await repository.update_node(db, level, node_id, payload.model_dump())

    @router.delete("/{node_id}", response_model=DeleteResponse, name=f"delete_{level.name}")
    async def delete_node(node_id: UUID, db: AsyncSession = Depends(get_db)) -> dict[str, str]:
        """Delete a node. Unknown ids are not an error."""
        return await repository.delete_node(db, level, node_id)

    return router


routers = [
    build_level_router(CURRICULUM, CurriculumCreate, CurriculumUpdate),
    build_level_router(GRADE, GradeCreate, GradeUpdate),
    build_level_router(BOOK, BookCreate, BookUpdate),
    build_level_router(UNIT, UnitCreate, UnitUpdate),
    build_level_router(LESSON, LessonCreate, LessonUpdate),
    build_level_router(STAGE, StageCreate, StageUpdate),
    build_level_router(ACTIVITY, ActivityCreate, ActivityUpdate),
]
