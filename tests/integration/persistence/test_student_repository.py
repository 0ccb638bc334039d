"""Integration tests for StudentRepositorySQLAlchemy."""

from collections.abc import Sequence
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from roster.domain.students import (
    Grade,
    GradeInput,
    Student,
    StudentEmailAlreadyExistsError,
    StudentNotFoundError,
    TransactionFailedError,
)
from roster.infrastructure.persistence.sqlalchemy.models import (
    GradeModel,
    StudentModel,
)
from roster.infrastructure.persistence.sqlalchemy.repositories import (
    StudentRepositorySQLAlchemy,
)


class FailingGradeInsertRepository(StudentRepositorySQLAlchemy):
    """Fails after the old grades were deleted, before new ones are written."""

    def _insert_grades(self, model: StudentModel, grades: Sequence[Grade]):
        raise RuntimeError("disk full")


class CompetingUpdateRepository(StudentRepositorySQLAlchemy):
    """Another session replaces the grades right after this one loads the record."""

    def __init__(self, session, session_maker, competing_grades):
        super().__init__(session)
        self._session_maker = session_maker
        self._competing_grades = competing_grades
        self._competed = False

    async def _find_model_by_id(self, student_id, refresh=False):
        model = await super()._find_model_by_id(student_id, refresh)
        if refresh and not self._competed:
            self._competed = True
            async with self._session_maker() as other:
                await StudentRepositorySQLAlchemy(other).update(
                    student_id,
                    {},
                    grades=self._competing_grades,
                )
        return model


class NullSubjectGradeRepository(StudentRepositorySQLAlchemy):
    """Writes a grade row that violates a NOT NULL column."""

    def _insert_grades(self, model: StudentModel, grades: Sequence[Grade]):
        model.grades.append(
            GradeModel(
                id=uuid4(),
                student_id=model.id,
                subject=None,
                value=1.0,
                position=0,
            )
        )


def _student(email: str = "juan@example.com", **overrides) -> Student:
    fields = {
        "name": "Juan Perez",
        "email": email,
        "gender": "Male",
        "subjects": ["Math", "History"],
        "age": 20,
        "grades": [GradeInput("Math", 9.5), GradeInput("History", 7.0)],
    }
    fields.update(overrides)
    return Student.create(**fields)


async def _grade_rows(session, student_id) -> list[tuple[str, float]]:
    result = await session.execute(
        select(GradeModel.subject, GradeModel.value)
        .where(GradeModel.student_id == student_id)
        .order_by(GradeModel.position),
    )
    return [tuple(row) for row in result.all()]


class TestCreate:
    @pytest.mark.asyncio
    async def test_create_stores_student_and_grades(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)

        stored = await repo.create(_student())

        assert stored.nickname == "juan_perez20"
        assert stored.subjects == ["Math", "History"]
        assert [(g.subject, g.value) for g in stored.grades] == [
            ("Math", 9.5),
            ("History", 7.0),
        ]

    @pytest.mark.asyncio
    async def test_create_without_age_derives_nickname_from_name(
        self,
        test_db_session,
    ):
        repo = StudentRepositorySQLAlchemy(test_db_session)

        stored = await repo.create(_student(name="Ana", age=None, grades=[]))

        assert stored.nickname == "ana"
        assert stored.age is None
        assert stored.grades == []

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        await repo.create(_student())

        with pytest.raises(StudentEmailAlreadyExistsError):
            await repo.create(_student(name="Other Person"))

        count = await test_db_session.scalar(
            select(func.count()).select_from(StudentModel),
        )
        assert count == 1


class TestFind:
    @pytest.mark.asyncio
    async def test_find_missing_returns_none(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)

        assert await repo.find_by_id(uuid4()) is None

    @pytest.mark.asyncio
    async def test_find_loads_grades_in_fresh_session(
        self,
        test_db_session,
        test_session_maker,
    ):
        created = await StudentRepositorySQLAlchemy(test_db_session).create(_student())

        async with test_session_maker() as session:
            found = await StudentRepositorySQLAlchemy(session).find_by_id(created.id)

        assert found is not None
        assert found.email == "juan@example.com"
        assert [g.subject for g in found.grades] == ["Math", "History"]


class TestUpdate:
    @pytest.mark.asyncio
    async def test_supplied_grades_replace_the_whole_set(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        created = await repo.create(_student())

        updated = await repo.update(
            created.id,
            {},
            grades=[GradeInput("Art", 6.0)],
        )

        assert [(g.subject, g.value) for g in updated.grades] == [("Art", 6.0)]
        assert await _grade_rows(test_db_session, created.id) == [("Art", 6.0)]

    @pytest.mark.asyncio
    async def test_empty_grade_list_removes_all_grades(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        created = await repo.create(_student())

        updated = await repo.update(created.id, {}, grades=[])

        assert updated.grades == []
        assert await _grade_rows(test_db_session, created.id) == []

    @pytest.mark.asyncio
    async def test_absent_grades_are_left_untouched(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        created = await repo.create(_student())

        updated = await repo.update(created.id, {"age": 21})

        assert updated.age == 21
        assert updated.nickname == "juan_perez21"
        assert [g.id for g in updated.grades] == [g.id for g in created.grades]

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        created = await repo.create(_student())

        updated = await repo.update(created.id, {"subjects": ["Art"]})

        assert updated.subjects == ["Art"]
        assert updated.name == "Juan Perez"
        assert updated.email == "juan@example.com"

    @pytest.mark.asyncio
    async def test_update_missing_student_raises_not_found(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)

        with pytest.raises(StudentNotFoundError):
            await repo.update(uuid4(), {"age": 30}, grades=[])

    @pytest.mark.asyncio
    async def test_update_to_taken_email_is_rejected(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        await repo.create(_student("taken@example.com", name="Ana"))
        created = await repo.create(_student())

        with pytest.raises(StudentEmailAlreadyExistsError):
            await repo.update(created.id, {"email": "taken@example.com"})

        found = await repo.find_by_id(created.id)
        assert found.email == "juan@example.com"

    @pytest.mark.asyncio
    async def test_failure_mid_update_rolls_back_everything(
        self,
        test_db_session,
        test_session_maker,
    ):
        created = await StudentRepositorySQLAlchemy(test_db_session).create(_student())
        failing = FailingGradeInsertRepository(test_db_session)

        with pytest.raises(TransactionFailedError):
            await failing.update(
                created.id,
                {"name": "Changed Name"},
                grades=[GradeInput("Art", 1.0)],
            )

        async with test_session_maker() as session:
            found = await StudentRepositorySQLAlchemy(session).find_by_id(created.id)
            rows = await _grade_rows(session, created.id)

        assert found.name == "Juan Perez"
        assert found.nickname == "juan_perez20"
        assert rows == [("Math", 9.5), ("History", 7.0)]

    @pytest.mark.asyncio
    async def test_replacement_removes_grades_committed_after_load(
        self,
        test_db_session,
        test_session_maker,
    ):
        created = await StudentRepositorySQLAlchemy(test_db_session).create(_student())
        repo = CompetingUpdateRepository(
            test_db_session,
            test_session_maker,
            competing_grades=[GradeInput("Physics", 8.0)],
        )

        updated = await repo.update(
            created.id,
            {},
            grades=[GradeInput("Art", 6.0)],
        )

        assert [(g.subject, g.value) for g in updated.grades] == [("Art", 6.0)]
        async with test_session_maker() as session:
            assert await _grade_rows(session, created.id) == [("Art", 6.0)]

    @pytest.mark.asyncio
    async def test_other_constraint_violation_is_not_reported_as_duplicate_email(
        self,
        test_db_session,
    ):
        created = await StudentRepositorySQLAlchemy(test_db_session).create(_student())
        repo = NullSubjectGradeRepository(test_db_session)

        with pytest.raises(TransactionFailedError) as exc_info:
            await repo.update(created.id, {}, grades=[GradeInput("Art", 1.0)])

        assert "grades.subject" in exc_info.value.details["reason"]
        assert await _grade_rows(test_db_session, created.id) == [
            ("Math", 9.5),
            ("History", 7.0),
        ]

    @pytest.mark.asyncio
    async def test_session_is_usable_after_rollback(self, test_db_session):
        created = await StudentRepositorySQLAlchemy(test_db_session).create(_student())
        failing = FailingGradeInsertRepository(test_db_session)
        with pytest.raises(TransactionFailedError):
            await failing.update(created.id, {}, grades=[])

        updated = await StudentRepositorySQLAlchemy(test_db_session).update(
            created.id,
            {"age": 22},
        )

        assert updated.age == 22
        assert len(updated.grades) == 2


class TestRemove:
    @pytest.mark.asyncio
    async def test_remove_deletes_student_and_its_grades(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        created = await repo.create(_student())

        await repo.remove(created.id)

        assert await repo.find_by_id(created.id) is None
        assert await _grade_rows(test_db_session, created.id) == []

    @pytest.mark.asyncio
    async def test_remove_missing_student_raises_not_found(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)

        with pytest.raises(StudentNotFoundError):
            await repo.remove(uuid4())

    @pytest.mark.asyncio
    async def test_delete_all_returns_number_of_students(self, test_db_session):
        repo = StudentRepositorySQLAlchemy(test_db_session)
        await repo.create(_student("a@example.com"))
        await repo.create(_student("b@example.com"))

        removed = await repo.delete_all()

        assert removed == 2
        grade_count = await test_db_session.scalar(
            select(func.count()).select_from(GradeModel),
        )
        assert grade_count == 0
