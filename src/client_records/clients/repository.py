from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..common.pagination import Page
from .model import Client


class ClientRepository(Protocol):
    """Repository interface for Client.

    Note: the service layer depends on this interface, never on a concrete database.
    """

    def find_by_id(self, client_id: int) -> Optional[Client]:
        raise NotImplementedError

    def find_all(self) -> Sequence[Client]:
        raise NotImplementedError

    def find_page(self, *, page_index: int, page_size: int) -> Page[Client]:
        raise NotImplementedError

    def save(self, client: Client) -> Client:
        """Insert when ``client.id`` is None, update otherwise."""
        raise NotImplementedError

    def delete_by_id(self, client_id: int) -> bool:
        raise NotImplementedError
