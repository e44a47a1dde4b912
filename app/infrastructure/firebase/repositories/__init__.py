"""Firestore-backed repository implementations."""

from app.infrastructure.firebase.repositories.admin_repo_firestore import (
    FirestoreAdminRepository,
)
from app.infrastructure.firebase.repositories.content_repo_firestore import (
    FirestoreContentRepository,
)
from app.infrastructure.firebase.repositories.registration_repo_firestore import (
    FirestoreRegistrationRepository,
)
from app.infrastructure.firebase.repositories.version_repo_firestore import (
    FirestoreVersionRepository,
)

__all__ = [
    "FirestoreAdminRepository",
    "FirestoreContentRepository",
    "FirestoreRegistrationRepository",
    "FirestoreVersionRepository",
]
