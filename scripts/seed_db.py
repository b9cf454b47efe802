from __future__ import annotations

import importlib

from client_records.config import get_settings_module
from client_records.database.bootstrap import SEED_PATH, apply_seed_sql
from client_records.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)
    apply_seed_sql(db_config, seed_path=SEED_PATH)
    print(f"OK: Seeded sample clients -> {DBConfig.from_dict(db_config).describe()}")


if __name__ == "__main__":
    main()
