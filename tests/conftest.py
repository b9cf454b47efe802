from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from client_records.clients.model import Client
from client_records.clients.service import ClientService
from client_records.common.pagination import Page
from client_records.container import Container
from client_records.main import create_app
from client_records.uploads.storage import LocalPhotoStorage


class InMemoryClients:
    """Dict-backed stand-in for MySQLClientRepository."""

    def __init__(self):
        self._rows: dict[int, Client] = {}
        self._next_id = 1
        self.calls: list[str] = []

    def add(self, **fields) -> Client:
        fields.setdefault("created_at", datetime(2024, 1, 1, 9, 0, 0))
        client = replace(Client(**fields), id=self._next_id)
        self._rows[client.id] = client
        self._next_id += 1
        return client

    def find_by_id(self, client_id: int) -> Optional[Client]:
        self.calls.append("find_by_id")
        return self._rows.get(int(client_id))

    def find_all(self):
        self.calls.append("find_all")
        return [self._rows[k] for k in sorted(self._rows)]

    def find_page(self, *, page_index: int, page_size: int) -> Page[Client]:
        self.calls.append("find_page")
        ordered = [self._rows[k] for k in sorted(self._rows)]
        start = page_index * page_size
        return Page(
            items=ordered[start:start + page_size],
            number=page_index,
            size=page_size,
            total_elements=len(ordered),
        )

    def save(self, client: Client) -> Client:
        self.calls.append("save")
        if client.id is None:
            client = replace(client, id=self._next_id)
            self._next_id += 1
        self._rows[client.id] = client
        return client

    def delete_by_id(self, client_id: int) -> bool:
        self.calls.append("delete_by_id")
        return self._rows.pop(int(client_id), None) is not None


@pytest.fixture
def clients_repo() -> InMemoryClients:
    return InMemoryClients()


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def container(clients_repo, upload_dir) -> Container:
    return Container(
        clients_repo=clients_repo,
        client_service=ClientService(clients_repo, page_size=5),
        photo_storage=LocalPhotoStorage(upload_dir),
    )


@pytest.fixture
def app(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def flashes(client):
    """Read pending flash messages without consuming them."""

    def read() -> list[tuple[str, str]]:
        with client.session_transaction() as sess:
            return [tuple(f) for f in sess.get("_flashes", [])]

    return read
