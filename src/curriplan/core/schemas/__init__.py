"""Pydantic schemas for API validation."""

from .curriculum import (
    ActivityCreate,
    ActivityNodeSchema,
    ActivityUpdate,
    BookCreate,
    BookNodeSchema,
    BookUpdate,
    CamelModel,
    CurriculumCreate,
    CurriculumNodeSchema,
    CurriculumTreeResponse,
    CurriculumUpdate,
    DeleteResponse,
    GradeCreate,
    GradeNodeSchema,
    GradeUpdate,
    LessonCreate,
    LessonNodeSchema,
    LessonUpdate,
    StageCreate,
    StageNodeSchema,
    StageUpdate,
    UnitCreate,
    UnitNodeSchema,
    UnitUpdate,
)
from .imports import (
    ActivityImport,
    BookImport,
    CurriculumImport,
    GradeImport,
    ImportResponse,
    ImportResultsSchema,
    LessonImport,
    StageImport,
    UnitImport,
)

__all__ = [
    "CamelModel",
    # Writes
    "CurriculumCreate",
    "CurriculumUpdate",
    "GradeCreate",
    "GradeUpdate",
    "BookCreate",
    "BookUpdate",
    "UnitCreate",
    "UnitUpdate",
    "LessonCreate",
    "LessonUpdate",
    "StageCreate",
    "StageUpdate",
    "ActivityCreate",
    "ActivityUpdate",
    "DeleteResponse",
    # Tree
    "CurriculumTreeResponse",
    "CurriculumNodeSchema",
    "GradeNodeSchema",
    "BookNodeSchema",
    "UnitNodeSchema",
    "LessonNodeSchema",
    "StageNodeSchema",
    "ActivityNodeSchema",
    # Bulk import
    "CurriculumImport",
    "GradeImport",
    "BookImport",
    "UnitImport",
    "LessonImport",
    "StageImport",
    "ActivityImport",
    "ImportResultsSchema",
    "ImportResponse",
]
