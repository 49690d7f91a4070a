from __future__ import annotations

import sys
from pathlib import Path

import importlib

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.student_attendance.student_attendance.container import build_container
from src.student_attendance.student_attendance.database.bootstrap import ensure_indexes, list_collections


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(db_config=db_config)
    indexes = ensure_indexes(container.conn)
    collections = list_collections(container.conn)
    print(
        f"OK: Indexes ready ({', '.join(indexes)}) -> "
        f"{db_config.get('uri')}/{db_config.get('database')} (collections={len(collections)})"
    )


if __name__ == "__main__":
    main()
