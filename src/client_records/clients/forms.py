from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Mapping

from ..common.validators import require_non_empty
from ..core.exceptions import ValidationError
from .model import Client

_REQUIRED = (
    ("name", "El nombre"),
    ("surname", "El apellido"),
    ("email", "El email"),
)


@dataclass(frozen=True)
class ClientForm:
    """User-editable fields of a client, as posted by ``form.html``."""

    name: str = ""
    surname: str = ""
    email: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, str]) -> "ClientForm":
        return cls(
            name=(data.get("name") or "").strip(),
            surname=(data.get("surname") or "").strip(),
            email=(data.get("email") or "").strip(),
        )

    def validate(self) -> Dict[str, str]:
        """Return field name -> message for every invalid field."""
        errors: Dict[str, str] = {}
        for field_name, label in _REQUIRED:
            try:
                require_non_empty(getattr(self, field_name), field_name, label)
            except ValidationError as e:
                errors[e.field or field_name] = str(e)
        return errors

    def apply_to(self, client: Client) -> Client:
        return replace(client, name=self.name, surname=self.surname, email=self.email)
