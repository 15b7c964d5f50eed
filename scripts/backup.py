"""Backup the wage data.

Note: for the mysql backend this prefers `mysqldump` (if installed); for the json
backend the data files are copied.
"""

from __future__ import annotations

import shutil
import subprocess
from datetime import datetime
from pathlib import Path

from wage_dashboard.main import load_settings


def main() -> None:
    settings = load_settings()

    out_dir = Path(__file__).resolve().parents[1] / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")

    if getattr(settings, "STORAGE_BACKEND", "json") != "mysql":
        target = out_dir / f"wage_data_{ts}"
        shutil.copytree(settings.DATA_DIR, target)
        print(f"OK: Backup created: {target}")
        return

    db = settings.DB_CONFIG
    out_file = out_dir / f"wage_db_{ts}.sql"
    cmd = [
        "mysqldump",
        f"-h{db['host']}",
        f"-P{db.get('port', 3306)}",
        f"-u{db['user']}",
        f"-p{db['password']}",
        db["database"],
    ]

    try:
        with out_file.open("wb") as f:
            subprocess.run(cmd, stdout=f, stderr=subprocess.PIPE, check=True)
        print(f"OK: Backup created: {out_file}")
    except FileNotFoundError:
        raise SystemExit("`mysqldump` not found. Install the MySQL client tools or back up with Workbench.")


if __name__ == "__main__":
    main()
