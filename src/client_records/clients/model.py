from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Client:
    """Domain entity: a client record.

    ``id`` and ``created_at`` are assigned on first save and never change afterwards.
    """

    id: Optional[int] = None
    name: str = ""
    surname: str = ""
    email: str = ""
    created_at: Optional[datetime] = None
    photo: Optional[str] = None

    @property
    def is_new(self) -> bool:
        return self.id is None

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}".strip()
