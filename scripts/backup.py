"""Backup database.

Note: This script needs `mongodump` (MongoDB Database Tools) on PATH.
Without it, export the collections with MongoDB Compass instead.
"""

from __future__ import annotations

import importlib
import subprocess
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = settings.DB_CONFIG

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"{db['database']}_{ts}.archive.gz"

    cmd = [
        "mongodump",
        f"--uri={db['uri']}",
        f"--db={db['database']}",
        f"--archive={out_file}",
        "--gzip",
    ]

    try:
        subprocess.run(cmd, stderr=subprocess.PIPE, check=True)
        print(f"OK: Backup created: {out_file}")
    except FileNotFoundError:
        raise SystemExit("`mongodump` not found. Install MongoDB Database Tools or export with Compass.")


if __name__ == "__main__":
    main()
