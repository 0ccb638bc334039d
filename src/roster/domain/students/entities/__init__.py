from roster.domain.students.entities.grade import Grade

__all__ = ["Grade"]
