"""
Hierarchy Level Descriptors

The seven levels differ only in table, parent key, and which text columns
they carry. One ``Level`` entry per kind drives the generic repository, the
CRUD routers, the tree assembler, and the bulk importer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from pydantic.alias_generators import to_camel

from curriplan.core.models import (
    Activity,
    Book,
    Curriculum,
    Grade,
    HierarchyNode,
    Lesson,
    Stage,
    Unit,
)

from .objectives import decode_objectives, encode_objectives


@dataclass(frozen=True)
class Level:
    """Metadata for one level of the curriculum hierarchy.

    Attributes:
        name: Singular name ('grade').
        plural: Table name and JSON children key ('grades').
        model: SQLAlchemy model class.
        parent_column: Foreign key column to the parent level (None for the root).
        text_fields: Mutable text columns besides ``name`` and objectives.
        import_columns: Columns filled from a bulk import document, each with
            the document attributes to read it from (first non-empty wins).
        import_objectives: Whether bulk import stores learning objectives.
    """

    name: str
    plural: str
    model: type[HierarchyNode]
    parent_column: str | None
    text_fields: tuple[str, ...]
    import_columns: tuple[tuple[str, tuple[str, ...]], ...] = ()
    import_objectives: bool = False

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def parent_key(self) -> str | None:
        """camelCase request/response key of the parent id ('curriculumId')."""
        return to_camel(self.parent_column) if self.parent_column else None

    def create_values(self, data: dict[str, Any]) -> dict[str, Any]:
        """Column values for a new row; omitted text fields default to ''."""
        values: dict[str, Any] = {
            "name": data["name"],
            "learning_objectives": encode_objectives(data.get("learning_objectives")),
        }
        for field in self.text_fields:
            values[field] = data.get(field) or ""
        if self.parent_column:
            values[self.parent_column] = data[self.parent_column]
        return values

    def update_values(self, data: dict[str, Any]) -> dict[str, Any]:
        """Column values for a full-replace update; omitted text fields become NULL."""
        values: dict[str, Any] = {
            "name": data.get("name") or None,
            "learning_objectives": encode_objectives(data.get("learning_objectives")),
        }
        for field in self.text_fields:
            values[field] = data.get(field) or None
        return values

    def import_values(self, document: Any, parent_id: UUID | None) -> dict[str, Any]:
        """Column values for a row created by the bulk importer."""
        values: dict[str, Any] = {"name": document.name}
        if self.import_objectives:
            values["learning_objectives"] = encode_objectives(document.learning_objectives)
        for column, sources in self.import_columns:
            values[column] = next(
                (getattr(document, source) for source in sources if getattr(document, source)),
                "",
            )
        if self.parent_column:
            values[self.parent_column] = parent_id
        return values

    def echo(self, node_id: UUID, values: dict[str, Any]) -> dict[str, Any]:
        """Client representation of a row written with ``values``."""
        body: dict[str, Any] = {"id": node_id}
        if self.parent_column and self.parent_column in values:
            body[self.parent_key] = values[self.parent_column]
        body["name"] = values["name"]
        body["learningObjectives"] = decode_objectives(values.get("learning_objectives"))
        for field in self.text_fields:
            body[to_camel(field)] = values.get(field)
        return body


CURRICULUM = Level(
    name="curriculum",
    plural="curriculums",
    model=Curriculum,
    parent_column=None,
    text_fields=("description", "duration"),
    import_columns=(("description", ("description",)),),
)
GRADE = Level(
    name="grade",
    plural="grades",
    model=Grade,
    parent_column="curriculum_id",
    text_fields=("duration",),
)
BOOK = Level(
    name="book",
    plural="books",
    model=Book,
    parent_column="grade_id",
    text_fields=("duration",),
)
UNIT = Level(
    name="unit",
    plural="units",
    model=Unit,
    parent_column="book_id",
    text_fields=("total_time",),
    import_columns=(("total_time", ("duration", "total_time")),),
    import_objectives=True,
)
LESSON = Level(
    name="lesson",
    plural="lessons",
    model=Lesson,
    parent_column="unit_id",
    text_fields=("duration",),
    import_columns=(("duration", ("duration",)),),
    import_objectives=True,
)
STAGE = Level(
    name="stage",
    plural="stages",
    model=Stage,
    parent_column="lesson_id",
    text_fields=("duration",),
    import_columns=(("duration", ("duration",)),),
    import_objectives=True,
)
ACTIVITY = Level(
    name="activity",
    plural="activities",
    model=Activity,
    parent_column="stage_id",
    text_fields=("type", "duration"),
    import_columns=(("type", ("type",)), ("duration", ("duration",))),
    import_objectives=True,
)

# Root first; each level's children live at the next index.
LEVELS: tuple[Level, ...] = (CURRICULUM, GRADE, BOOK, UNIT, LESSON, STAGE, ACTIVITY)


def child_of(level: Level) -> Level | None:
    """The level directly below ``level``, or None for activities."""
    index = LEVELS.index(level)
    return LEVELS[index + 1] if index + 1 < len(LEVELS) else None
