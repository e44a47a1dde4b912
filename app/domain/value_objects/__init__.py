"""Domain value objects and shared value types."""

from app.domain.value_objects.core import RegistrantIdentity

__all__ = [
    "RegistrantIdentity",
]
