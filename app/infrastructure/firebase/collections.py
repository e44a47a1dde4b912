"""Firestore collection names (schema-in-code).

Firestore has no DDL or migrations. Collections are created automatically
when you first write a document. Use these constants so collection names
stay consistent and act as the single source of truth for the "schema".

Example:
    from app.infrastructure.firebase.client import get_firestore_client
    from app.infrastructure.firebase.collections import COLLECTION_CONTENT

    db = get_firestore_client()
    if db:
        snapshot = await db.collection(COLLECTION_CONTENT).document("home_page").get()
"""

# Six singleton page documents keyed by ContentId
COLLECTION_CONTENT = "content"

# Append-only audit trail of content writes
COLLECTION_CONTENT_VERSIONS = "content_versions"

# Attendee leads from the public form and admin adds
COLLECTION_REGISTRATIONS = "registrations"

# Admin allow-list, keyed by Firebase Auth uid
COLLECTION_ADMINS = "admins"
