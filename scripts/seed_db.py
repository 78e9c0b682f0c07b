from __future__ import annotations

import importlib

from config import get_settings_module

from hrms.container import build_container
from hrms.database.bootstrap import ensure_demo_users


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    container = build_container(db_config=db_config, backend=getattr(settings, "DB_BACKEND", "mysql"))
    created = ensure_demo_users(container)

    print(
        f"OK: Seeded {created} demo user(s) -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
