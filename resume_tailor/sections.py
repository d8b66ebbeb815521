"""Value objects passed between the cleanup, redaction and pipeline steps."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Dict, Mapping, Optional


@dataclass(frozen=True)
class Section:
    """A titled block of resume text such as "Experience" or "Skills"."""

    title: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"title": self.title, "content": self.content}


# Python attribute name -> wire key
_PERSONAL_INFO_KEYS = {
    "full_name": "fullName",
    "email": "email",
    "phone": "phone",
    "location": "location",
    "linkedin": "linkedin",
}


@dataclass(frozen=True)
class PersonalInfo:
    """Contact details shown in a resume header. Every field is optional."""

    full_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    location: Optional[str] = None
    linkedin: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> "PersonalInfo":
        """Build from a mapping using either wire keys or attribute names.

        Non-string values are treated as absent.
        """

        values: Dict[str, Optional[str]] = {}
        for attribute, key in _PERSONAL_INFO_KEYS.items():
            value = data.get(key, data.get(attribute))
            values[attribute] = value if isinstance(value, str) else None
        return cls(**values)

    def to_dict(self) -> Dict[str, str]:
        """Serialise present fields only, using wire keys."""

        return {
            _PERSONAL_INFO_KEYS[field.name]: getattr(self, field.name)
            for field in fields(self)
            if getattr(self, field.name) is not None
        }
