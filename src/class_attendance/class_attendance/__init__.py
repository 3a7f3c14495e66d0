"""Class Attendance package.

Feature modules (catalog, events, notifications, variants, attendance) are
kept free of Flask; the controller layer is a thin adapter over the
attendance session.
"""
