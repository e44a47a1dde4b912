"""Unit tests for RegistrantIdentity and domain enums."""

import pytest

from app.domain.enums import ContentId, ContentType
from app.domain.exceptions import ValidationException
from app.domain.value_objects import RegistrantIdentity


def test_identity_trims_whitespace() -> None:
    identity = RegistrantIdentity(name="  Kenny  ", email=" kenny@example.com ", phone=" 619 ")
    assert identity.name == "Kenny"
    assert identity.email == "kenny@example.com"
    assert identity.phone == "619"
    assert identity.has_phone


def test_blank_phone_does_not_take_part_in_matching() -> None:
    assert not RegistrantIdentity(name="Kenny", email="k@example.com", phone="   ").has_phone


def test_name_required() -> None:
    with pytest.raises(ValidationException) as exc_info:
        RegistrantIdentity(name="   ", email="k@example.com")
    assert exc_info.value.details["field"] == "name"


@pytest.mark.parametrize("email", ["", "kenny", "kenny@", "kenny@example", "ken ny@example.com"])
def test_malformed_email_rejected(email: str) -> None:
    with pytest.raises(ValidationException) as exc_info:
        RegistrantIdentity(name="Kenny", email=email)
    assert exc_info.value.details["field"] == "email"


def test_content_ids_are_fixed() -> None:
    assert ContentId.values() == [
        "site_metadata",
        "home_page",
        "lineup_page",
        "schedule_page",
        "tickets_page",
        "navigation",
    ]


def test_content_type_tags() -> None:
    assert ContentId.SITE_METADATA.content_type == ContentType.METADATA
    assert ContentId.HOME.content_type == ContentType.HOME
    assert ContentId.NAVIGATION.content_type.value == "navigation"
