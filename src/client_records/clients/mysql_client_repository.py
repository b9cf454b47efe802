from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Sequence

from ..common.pagination import Page
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Client
from .repository import ClientRepository

_COLUMNS = "id, name, surname, email, created_at, photo"


def _to_client(row: Dict[str, Any]) -> Client:
    return Client(
        id=int(row["id"]),
        name=row["name"],
        surname=row["surname"],
        email=row["email"],
        created_at=row.get("created_at"),
        photo=row.get("photo"),
    )


class MySQLClientRepository(ClientRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_by_id(self, client_id: int) -> Optional[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM clients WHERE id=%s", (int(client_id),))
            row = fetchone(cur)
            return _to_client(row) if row else None

    def find_all(self) -> Sequence[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM clients ORDER BY id")
            return [_to_client(r) for r in fetchall(cur)]

    def find_page(self, *, page_index: int, page_size: int) -> Page[Client]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT COUNT(*) AS total FROM clients")
            total = int((fetchone(cur) or {}).get("total", 0))
            cur.execute(
                f"SELECT {_COLUMNS} FROM clients ORDER BY id LIMIT %s OFFSET %s",
                (int(page_size), int(page_index) * int(page_size)),
            )
            items = [_to_client(r) for r in fetchall(cur)]
        return Page(items=items, number=int(page_index), size=int(page_size), total_elements=total)

    def save(self, client: Client) -> Client:
        with db_cursor(self._conn_factory) as (_, cur):
            if client.id is None:
                cur.execute(
                    """
                    INSERT INTO clients(name, surname, email, created_at, photo)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (client.name, client.surname, client.email, client.created_at, client.photo),
                )
                return replace(client, id=int(cur.lastrowid))

            # id and created_at are never rewritten
            cur.execute(
                """
                UPDATE clients
                SET name=%s, surname=%s, email=%s, photo=%s
                WHERE id=%s
                """,
                (client.name, client.surname, client.email, client.photo, int(client.id)),
            )
            return client

    def delete_by_id(self, client_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM clients WHERE id=%s", (int(client_id),))
            return cur.rowcount > 0
