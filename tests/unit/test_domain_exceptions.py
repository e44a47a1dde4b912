"""Unit tests for domain exceptions and their HTTP status mapping."""

from app.core.exception_handlers import _ERROR_CODE_STATUS
from app.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    CMSException,
    ContentWriteException,
    EmailDeliveryException,
    IdentityProviderError,
    ResourceNotFoundException,
    ServiceNotConfiguredException,
    ValidationException,
)


def test_cms_exception_defaults_error_code_to_class_name() -> None:
    exc = CMSException("boom")
    assert exc.error_code == "CMSException"
    assert exc.to_dict() == {"error": "CMSException", "message": "boom", "details": {}}


def test_validation_exception_carries_field() -> None:
    exc = ValidationException("Name is required", field="name")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "name"}
    assert ValidationException("bad").details == {}


def test_resource_not_found_custom_message() -> None:
    exc = ResourceNotFoundException("registrations", "*", message="No registrations to export")
    assert exc.message == "No registrations to export"
    assert exc.details["resource_type"] == "registrations"
    assert ResourceNotFoundException("artist", "7").message == "artist not found: 7"


def test_content_write_exception_names_document() -> None:
    exc = ContentWriteException("lineup_page", "permission denied")
    assert exc.message == "Failed to save lineup_page: permission denied"
    assert exc.details == {"content_id": "lineup_page"}


def test_service_not_configured_hint() -> None:
    exc = ServiceNotConfiguredException("Firestore", "set FIREBASE_SERVICE_ACCOUNT_KEY")
    assert exc.message == "Firestore is not configured (set FIREBASE_SERVICE_ACCOUNT_KEY)"
    assert ServiceNotConfiguredException("Resend").message == "Resend is not configured"


def test_identity_provider_error_keeps_code() -> None:
    exc = IdentityProviderError("EMAIL_EXISTS")
    assert exc.code == "EMAIL_EXISTS"
    assert exc.details == {"code": "EMAIL_EXISTS"}


def test_every_error_code_maps_to_a_status() -> None:
    """Each domain error code has an explicit HTTP status."""
    codes = {
        ValidationException("x").error_code: 400,
        AuthenticationException().error_code: 401,
        AuthorizationException().error_code: 403,
        ResourceNotFoundException("a", "b").error_code: 404,
        ContentWriteException("home_page", "x").error_code: 502,
        EmailDeliveryException("x").error_code: 502,
        IdentityProviderError("X").error_code: 502,
        ServiceNotConfiguredException("x").error_code: 503,
    }
    for code, status in codes.items():
        assert _ERROR_CODE_STATUS[code] == status
