"""Domain value objects for the festival CMS.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass

from app.domain.exceptions import ValidationException

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


@dataclass(frozen=True)
class RegistrantIdentity:
    """Identity fields used by the registration dedup gate.

    Whitespace is trimmed; values are otherwise compared exactly. An empty
    phone means "not provided" and does not take part in matching.
    """

    name: str
    email: str
    phone: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", (self.name or "").strip())
        object.__setattr__(self, "email", (self.email or "").strip())
        object.__setattr__(self, "phone", (self.phone or "").strip())
        if not self.name:
            raise ValidationException("Name is required", field="name")
        if not _EMAIL_RE.match(self.email):
            raise ValidationException("A valid email address is required", field="email")

    @property
    def has_phone(self) -> bool:
        """Whether phone takes part in duplicate matching."""
        return bool(self.phone)
