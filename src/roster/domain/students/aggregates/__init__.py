from roster.domain.students.aggregates.student import Student

__all__ = ["Student"]
