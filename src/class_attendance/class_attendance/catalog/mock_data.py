"""In-memory demo roster and course list."""

from __future__ import annotations

from ..core.enums import CourseType
from .model import Course, Student

MOCK_STUDENTS: tuple[Student, ...] = (
    Student(student_id="1", name="Ana García", email="ana.garcia@university.edu", student_code="EST001"),
    Student(student_id="2", name="Carlos Rodríguez", email="carlos.rodriguez@university.edu", student_code="EST002"),
    Student(student_id="3", name="María López", email="maria.lopez@university.edu", student_code="EST003"),
    Student(student_id="4", name="David Martínez", email="david.martinez@university.edu", student_code="EST004"),
    Student(student_id="5", name="Sofia Hernández", email="sofia.hernandez@university.edu", student_code="EST005"),
)

MOCK_COURSES: tuple[Course, ...] = (
    Course(
        course_id="1",
        name="Mathematics I",
        code="MAT101",
        course_type=CourseType.ONSITE,
        faculty="Engineering",
        program="Systems",
    ),
    Course(
        course_id="2",
        name="Web Programming",
        code="PRG201",
        course_type=CourseType.REMOTE,
        faculty="Engineering",
        program="Systems",
    ),
    Course(
        course_id="3",
        name="Databases",
        code="BDD301",
        course_type=CourseType.HYBRID,
        faculty="Engineering",
        program="Systems",
    ),
    Course(
        course_id="4",
        name="Medieval History",
        code="HIS101",
        course_type=CourseType.ONSITE,
        faculty="Humanities",
        program="History",
    ),
    Course(
        course_id="5",
        name="Digital Literature",
        code="LIT201",
        course_type=CourseType.REMOTE,
        faculty="Humanities",
        program="Literature",
    ),
)
