from __future__ import annotations

from typing import Any, MutableMapping, Optional

from ..common.datetime_utils import from_iso, to_iso
from ..core.constants import EDIT_BUFFER_SESSION_KEY
from .model import Client


class EditBuffer:
    """Session-scoped slot holding the client being created or edited.

    Filled by the form GET, read back by the form POST, cleared once the
    submit succeeds. Each user session gets its own slot.
    """

    def __init__(self, session: MutableMapping[str, Any], key: str = EDIT_BUFFER_SESSION_KEY):
        self._session = session
        self._key = key

    def hold(self, client: Client) -> None:
        self._session[self._key] = {
            "id": client.id,
            "name": client.name,
            "surname": client.surname,
            "email": client.email,
            "created_at": to_iso(client.created_at),
            "photo": client.photo,
        }

    def current(self) -> Optional[Client]:
        data = self._session.get(self._key)
        if not data:
            return None
        return Client(
            id=data.get("id"),
            name=data.get("name") or "",
            surname=data.get("surname") or "",
            email=data.get("email") or "",
            created_at=from_iso(data.get("created_at")),
            photo=data.get("photo"),
        )

    def clear(self) -> None:
        self._session.pop(self._key, None)
