"""Example: drive an attendance session directly (without Flask).

Controllers are a thin layer; the behavior lives in the session and its subscribers.
"""

from class_attendance.attendance.session import AttendanceSession
from class_attendance.catalog.repository import InMemoryCourseRepository, InMemoryStudentRepository
from class_attendance.common.logging import configure_logging


def main():
    configure_logging("INFO")
    attendance = AttendanceSession(InMemoryStudentRepository(), InMemoryCourseRepository())
    attendance.mount()

    attendance.select_course("3")
    attendance.select_date("2025-03-03")
    for _ in range(3):
        attendance.change_status("1", "absent")
    attendance.mark_all_present()

    print(attendance.render().to_dict())
    print(attendance.notifications())
    print([str(a) for a in attendance.alerts()])
    print(attendance.save().message)
    print(attendance.observer_stats())

    attendance.unmount()


if __name__ == "__main__":
    main()
