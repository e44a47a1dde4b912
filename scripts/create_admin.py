"""Create an admin: Firebase Authentication account plus admins/{uid} record.

Usage:
    python -m scripts.create_admin <email> <password> <name> [admin|editor]
Requires Firestore credentials and FIREBASE_WEB_API_KEY.
All imports use app.*.
"""

import asyncio
import sys

import httpx

from app.application.services.auth_service import AuthService
from app.core.config import get_settings
from app.domain.enums import AdminRole
from app.domain.exceptions import CMSException
from app.infrastructure.firebase import close_firebase, get_firestore_client, init_firebase
from app.infrastructure.firebase.identity_toolkit import FirebaseIdentityProvider
from app.infrastructure.firebase.repositories import FirestoreAdminRepository
from app.infrastructure.security.jwt import JWTTokenService
from app.shared.telemetry.logging import setup_logging


async def main() -> None:
    """Create the admin; exit 1 on missing configuration or provider error."""
    if len(sys.argv) < 4:
        print(
            "Usage: python -m scripts.create_admin <email> <password> <name> [admin|editor]",
            file=sys.stderr,
        )
        sys.exit(1)
    email, password, name = sys.argv[1], sys.argv[2], sys.argv[3]
    try:
        role = AdminRole(sys.argv[4]) if len(sys.argv) > 4 else AdminRole.ADMIN
    except ValueError:
        print(f"Unknown role: {sys.argv[4]} (use admin or editor)", file=sys.stderr)
        sys.exit(1)

    settings = get_settings()
    setup_logging()
    api_key = settings.firebase_web_api_key.get_secret_value() if settings.firebase_web_api_key else ""
    if not api_key:
        print("FIREBASE_WEB_API_KEY not set", file=sys.stderr)
        sys.exit(1)
    async with httpx.AsyncClient(timeout=30.0) as http_client:
        if not init_firebase(http_client=http_client):
            print("Firestore not configured", file=sys.stderr)
            sys.exit(1)
        service = AuthService(
            FirebaseIdentityProvider(api_key, http_client),
            FirestoreAdminRepository(get_firestore_client()),
            JWTTokenService(),
        )
        try:
            admin = await service.create_admin(email, password, name, role)
        except CMSException as e:
            print(f"Could not create admin: {e.message}", file=sys.stderr)
            sys.exit(1)
        finally:
            await close_firebase()
    print(f"Created admin: {admin.id} ({admin.email}, role={admin.role})")


if __name__ == "__main__":
    asyncio.run(main())
