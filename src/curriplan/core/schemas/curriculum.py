"""
Curriculum Pydantic Schemas

Request and response models for the curriculum API. All JSON field names
are camelCase (``learningObjectives``, ``totalTime``, ``curriculumId``).
"""

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema exposing snake_case attributes under camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Single-row write schemas (one per level)
# ============================================================================


class CurriculumUpdate(CamelModel):
    """Full-replace update of a curriculum."""

    name: str
    description: str | None = None
    learning_objectives: list[str] | None = None
    duration: str | None = None


class CurriculumCreate(CurriculumUpdate):
    """Schema for creating a curriculum (root level, no parent)."""


class GradeUpdate(CamelModel):
    """Full-replace update of a grade."""

    name: str
    learning_objectives: list[str] | None = None
    duration: str | None = None


class GradeCreate(GradeUpdate):
    curriculum_id: UUID


class BookUpdate(CamelModel):
    name: str
    learning_objectives: list[str] | None = None
    duration: str | None = None


class BookCreate(BookUpdate):
    grade_id: UUID


class UnitUpdate(CamelModel):
    """Units report their time extent as ``totalTime``."""

    name: str
    learning_objectives: list[str] | None = None
    total_time: str | None = None


class UnitCreate(UnitUpdate):
    book_id: UUID


class LessonUpdate(CamelModel):
    name: str
    learning_objectives: list[str] | None = None
    duration: str | None = None


class LessonCreate(LessonUpdate):
    unit_id: UUID


class StageUpdate(CamelModel):
    name: str
    learning_objectives: list[str] | None = None
    duration: str | None = None


class StageCreate(StageUpdate):
    lesson_id: UUID


class ActivityUpdate(CamelModel):
    name: str
    type: str | None = None
    learning_objectives: list[str] | None = None
    duration: str | None = None


class ActivityCreate(ActivityUpdate):
    stage_id: UUID


class DeleteResponse(BaseModel):
    message: str


# ============================================================================
# Nested tree (GET /curriculums)
# ============================================================================


class ActivityNodeSchema(CamelModel):
    id: UUID
    name: str
    type: str | None = None
    learning_objectives: list[str] = Field(default_factory=list)
    duration: str | None = None
    standard_codes: list[str] = Field(default_factory=list)


class StageNodeSchema(CamelModel):
    id: UUID
    name: str
    learning_objectives: list[str] = Field(default_factory=list)
    duration: str | None = None
    activities: list[ActivityNodeSchema] = Field(default_factory=list)


class LessonNodeSchema(CamelModel):
    id: UUID
    name: str
    learning_objectives: list[str] = Field(default_factory=list)
    duration: str | None = None
    standard_codes: list[str] = Field(default_factory=list)
    stages: list[StageNodeSchema] = Field(default_factory=list)


class UnitNodeSchema(CamelModel):
    id: UUID
    name: str
    learning_objectives: list[str] = Field(default_factory=list)
    total_time: str | None = None
    lessons: list[LessonNodeSchema] = Field(default_factory=list)


class BookNodeSchema(CamelModel):
    id: UUID
    name: str
    learning_objectives: list[str] = Field(default_factory=list)
    duration: str | None = None
    units: list[UnitNodeSchema] = Field(default_factory=list)


class GradeNodeSchema(CamelModel):
    id: UUID
    name: str
    learning_objectives: list[str] = Field(default_factory=list)
    duration: str | None = None
    books: list[BookNodeSchema] = Field(default_factory=list)


class CurriculumNodeSchema(CamelModel):
    """A fully nested curriculum.

    ``standards`` is reserved and always empty; nothing stores it yet.
    """

    id: UUID
    name: str
    description: str | None = None
    learning_objectives: list[str] = Field(default_factory=list)
    duration: str | None = None
    standards: list[dict[str, Any]] = Field(default_factory=list)
    grades: list[GradeNodeSchema] = Field(default_factory=list)


class CurriculumTreeResponse(BaseModel):
    curriculums: list[CurriculumNodeSchema]
