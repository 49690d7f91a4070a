"""Print the attendance view the way the frontend shows it.

Usage: python scripts/report.py [--query jo] [--status present] [--url http://localhost:5000/api]
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from src.student_attendance.student_attendance.client.api import AttendanceApiClient
from src.student_attendance.student_attendance.client.cache import AttendanceStore
from src.student_attendance.student_attendance.client.filters import resolve_student


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--query", default="")
    parser.add_argument("--status", default="all", choices=["all", "present", "absent"])
    parser.add_argument("--url", default=None)
    parser.add_argument("--demo", action="store_true", help="fall back to demo data when the API is down")
    args = parser.parse_args()

    store = AttendanceStore(AttendanceApiClient(args.url), use_demo_fallback=args.demo)
    store.load()

    students_by_id = {s.id: s for s in store.students}
    view = store.attendance_view(args.query, args.status)
    for record in view:
        student = resolve_student(record, students_by_id)
        who = f"{student.name} ({student.roll_number})" if student else "Unknown student"
        print(f"{record.date.isoformat()}  {record.status.value:<8} {who}")

    stats = store.stats()
    print(
        f"Showing {len(view)} of {stats.total} records | present={stats.present} "
        f"absent={stats.absent} rate={stats.rate}%" + (" [demo data]" if store.is_demo else "")
    )


if __name__ == "__main__":
    main()
