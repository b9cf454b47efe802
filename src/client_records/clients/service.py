from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.pagination import Page
from ..core.constants import DEFAULT_PAGE_SIZE
from .model import Client
from .repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Use case: manage client records. Delegates straight to the repository."""

    def __init__(self, clients: ClientRepository, *, page_size: int = DEFAULT_PAGE_SIZE):
        self._clients = clients
        self._page_size = page_size

    def list_all(self) -> Sequence[Client]:
        return self._clients.find_all()

    def list_page(self, page_index: int, page_size: Optional[int] = None) -> Page[Client]:
        if page_index < 0:
            raise ValueError(f"page_index must not be negative, got {page_index}")
        return self._clients.find_page(page_index=page_index, page_size=page_size or self._page_size)

    def get_by_id(self, client_id: int) -> Optional[Client]:
        return self._clients.find_by_id(client_id)

    def save(self, client: Client) -> Client:
        if client.is_new:
            client = replace(client, created_at=now_local())
        saved = self._clients.save(client)
        logger.info("Saved client id=%s (%s)", saved.id, "created" if client.is_new else "updated")
        return saved

    def delete_by_id(self, client_id: int) -> None:
        if self._clients.delete_by_id(client_id):
            logger.info("Deleted client id=%s", client_id)
