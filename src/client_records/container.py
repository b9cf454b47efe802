from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .clients.mysql_client_repository import MySQLClientRepository
from .clients.repository import ClientRepository
from .clients.service import ClientService
from .core.constants import DEFAULT_PAGE_SIZE, DEFAULT_UPLOAD_DIR
from .database.connection import DatabaseConnection, DBConfig
from .uploads.storage import LocalPhotoStorage


@dataclass(frozen=True)
class Container:
    clients_repo: ClientRepository
    client_service: ClientService
    photo_storage: LocalPhotoStorage
    conn: Optional[DatabaseConnection] = None


def build_container(
    *,
    db_config: dict,
    upload_dir: str | Path = DEFAULT_UPLOAD_DIR,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    clients_repo = MySQLClientRepository(conn)
    return Container(
        clients_repo=clients_repo,
        client_service=ClientService(clients_repo, page_size=page_size),
        photo_storage=LocalPhotoStorage(upload_dir),
        conn=conn,
    )
