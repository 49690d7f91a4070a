"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STUDENTS_COLLECTION = "students"
ATTENDANCE_COLLECTION = "attendances"

DEFAULT_API_PREFIX = "/api"
DEFAULT_API_URL = "http://localhost:5000/api"

STUDENT_DELETED_MESSAGE = "Student deleted"
ATTENDANCE_DELETED_MESSAGE = "Attendance deleted"

ISO_DATE_FORMAT = "%Y-%m-%d"
