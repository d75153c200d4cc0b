from __future__ import annotations

import importlib
import sys
from pathlib import Path

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from dotenv import load_dotenv

from checkin_system.database.connection import DBConfig
from checkin_system.database.bootstrap import seed_demo_students
from checkin_system.settings import get_settings_module


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    added = seed_demo_students(db_config)
    print(f"OK: Seeded {added} demo students -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
