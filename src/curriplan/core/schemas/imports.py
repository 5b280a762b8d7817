"""
Bulk Import Schemas

Documents accepted by ``POST /curriculum/upload`` and the result it returns.
Every field is optional and scalar values are loosely typed: numbers are
taken as text and objective lists are stored as given. A document that is
missing a required column fails at insert time and is reported per
curriculum, not rejected up front.
"""

from typing import Any

from pydantic import ConfigDict, Field

from .curriculum import CamelModel


class ImportModel(CamelModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True)


class ActivityImport(ImportModel):
    name: str | None = None
    type: str | None = None
    learning_objectives: Any = None
    duration: str | None = None


class StageImport(ImportModel):
    name: str | None = None
    learning_objectives: Any = None
    duration: str | None = None
    activities: list[ActivityImport] | None = None


class LessonImport(ImportModel):
    name: str | None = None
    learning_objectives: Any = None
    duration: str | None = None
    stages: list[StageImport] | None = None


class UnitImport(ImportModel):
    """Unit documents usually carry ``duration``; ``totalTime`` is accepted too."""

    name: str | None = None
    learning_objectives: Any = None
    duration: str | None = None
    total_time: str | None = None
    lessons: list[LessonImport] | None = None


class BookImport(ImportModel):
    name: str | None = None
    units: list[UnitImport] | None = None


class GradeImport(ImportModel):
    name: str | None = None
    books: list[BookImport] | None = None


class CurriculumImport(ImportModel):
    """One bulk import document: a curriculum and its nested subtree."""

    name: str | None = None
    description: str | None = None
    grades: list[GradeImport] | None = None


class ImportResultsSchema(CamelModel):
    curriculums_created: int = 0
    grades_created: int = 0
    books_created: int = 0
    units_created: int = 0
    lessons_created: int = 0
    stages_created: int = 0
    activities_created: int = 0
    errors: list[str] = Field(default_factory=list)


class ImportResponse(CamelModel):
    message: str
    results: ImportResultsSchema
