"""
Unit Tests for hierarchy level descriptors.
"""

from uuid import uuid4

import pytest

from curriplan.core.schemas import (
    ActivityImport,
    BookImport,
    CurriculumImport,
    GradeImport,
    LessonImport,
    UnitImport,
)
from curriplan.hierarchy import LEVELS, child_of
from curriplan.hierarchy.levels import ACTIVITY, BOOK, CURRICULUM, GRADE, LESSON, STAGE, UNIT


class TestLevelTable:
    def test_levels_in_hierarchy_order(self) -> None:
        assert [level.plural for level in LEVELS] == [
            "curriculums",
            "grades",
            "books",
            "units",
            "lessons",
            "stages",
            "activities",
        ]

    def test_child_of(self) -> None:
        assert child_of(CURRICULUM) is GRADE
        assert child_of(STAGE) is ACTIVITY
        assert child_of(ACTIVITY) is None

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (CURRICULUM, None),
            (GRADE, "curriculumId"),
            (BOOK, "gradeId"),
            (UNIT, "bookId"),
            (LESSON, "unitId"),
            (STAGE, "lessonId"),
            (ACTIVITY, "stageId"),
        ],
    )
    def test_parent_keys(self, level, expected) -> None:
        assert level.parent_key == expected

    def test_table_names_match_plural(self) -> None:
        for level in LEVELS:
            assert level.model.__tablename__ == level.plural


class TestCreateAndUpdateValues:
    def test_create_applies_defaults(self) -> None:
        parent_id = uuid4()

        values = GRADE.create_values({"name": "G1", "curriculum_id": parent_id})

        assert values == {
            "name": "G1",
            "learning_objectives": "[]",
            "duration": "",
            "curriculum_id": parent_id,
        }

    def test_update_clears_omitted_fields(self) -> None:
        values = UNIT.update_values({"name": "Unit 1"})

        assert values == {"name": "Unit 1", "learning_objectives": "[]", "total_time": None}

    def test_update_never_touches_parent(self) -> None:
        values = ACTIVITY.update_values({"name": "Quiz", "stage_id": uuid4(), "type": "game"})

        assert "stage_id" not in values
        assert values["type"] == "game"

    def test_echo_uses_camel_case(self) -> None:
        node_id, parent_id = uuid4(), uuid4()
        values = UNIT.create_values(
            {"name": "U", "book_id": parent_id, "learning_objectives": ["a"], "total_time": "2h"}
        )

        body = UNIT.echo(node_id, values)

        assert body == {
            "id": node_id,
            "bookId": parent_id,
            "name": "U",
            "learningObjectives": ["a"],
            "totalTime": "2h",
        }


class TestImportValues:
    def test_curriculum_imports_name_and_description(self) -> None:
        document = CurriculumImport(name="C", description="About C")

        assert CURRICULUM.import_values(document, None) == {"name": "C", "description": "About C"}

    def test_grade_and_book_import_name_only(self) -> None:
        parent_id = uuid4()
        grade = GradeImport.model_validate(
            {"name": "G", "learningObjectives": ["ignored"], "duration": "1 year"}
        )
        book = BookImport.model_validate({"name": "B", "duration": "ignored"})

        assert GRADE.import_values(grade, parent_id) == {"name": "G", "curriculum_id": parent_id}
        assert BOOK.import_values(book, parent_id) == {"name": "B", "grade_id": parent_id}

    def test_unit_duration_is_stored_as_total_time(self) -> None:
        parent_id = uuid4()
        unit = UnitImport.model_validate(
            {"name": "U", "learningObjectives": ["x", "y"], "duration": "4 weeks"}
        )

        assert UNIT.import_values(unit, parent_id) == {
            "name": "U",
            "learning_objectives": '["x", "y"]',
            "total_time": "4 weeks",
            "book_id": parent_id,
        }

    def test_unit_accepts_total_time_key(self) -> None:
        unit = UnitImport.model_validate({"name": "U", "totalTime": "6 weeks"})

        assert UNIT.import_values(unit, uuid4())["total_time"] == "6 weeks"

    def test_deep_levels_default_missing_metadata(self) -> None:
        lesson = LessonImport(name="L")
        activity = ActivityImport(name="A")

        lesson_values = LESSON.import_values(lesson, uuid4())
        activity_values = ACTIVITY.import_values(activity, uuid4())

        assert lesson_values["learning_objectives"] == "[]"
        assert lesson_values["duration"] == ""
        assert activity_values["type"] == ""
        assert activity_values["duration"] == ""
