"""Backup the persisted subject snapshot to a timestamped JSON file."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendify.attendify.container import build_kv_store


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store = build_kv_store(settings)
    snapshot = store.get(getattr(settings, "STORAGE_KEY", "attendance-data"))
    if snapshot is None:
        raise SystemExit("Nothing to back up: no snapshot stored yet.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"attendify_{datetime.now().strftime('%Y%m%d_%H%M%S')}.json"
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
