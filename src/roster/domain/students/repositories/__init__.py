from roster.domain.students.repositories.student_repository import StudentRepository

__all__ = ["StudentRepository"]
