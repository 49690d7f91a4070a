"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; the rules live in the services.
"""

import importlib

from config import get_settings_module

from src.student_attendance.student_attendance.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for record in container.attendance_service.list_attendance()[:5]:
        print(record.to_dict())
    print(container.stats_service.summary().to_dict())


if __name__ == "__main__":
    main()
