from class_attendance.catalog.repository import (
    InMemoryCourseRepository,
    InMemoryStudentRepository,
    resolve_student_name,
)
from class_attendance.core.enums import CourseType


def test_mock_roster_and_courses():
    students = InMemoryStudentRepository()
    courses = InMemoryCourseRepository()

    assert len(students.list_all()) == 5
    assert courses.get_by_id("3").course_type == CourseType.HYBRID
    assert courses.get_by_id("99") is None


def test_resolve_student_name():
    students = InMemoryStudentRepository()

    assert resolve_student_name(students, "4") == "David Martínez"
    assert resolve_student_name(students, "404") == "Unknown student"
    assert resolve_student_name(students, "") == "Unknown student"
