"""Domain layer: enums, exceptions, value objects, and ordering rules.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import (
    AdminRole,
    ArtistCategory,
    BindingState,
    ContentId,
    ContentType,
    MonitoringStatus,
    MoveDirection,
    OrderedList,
    RegistrationStatus,
)
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
from app.domain.value_objects import RegistrantIdentity

__all__ = [
    # Enums
    "AdminRole",
    "ArtistCategory",
    "BindingState",
    "ContentId",
    "ContentType",
    "MonitoringStatus",
    "MoveDirection",
    "OrderedList",
    "RegistrationStatus",
    # Exceptions
    "AuthenticationException",
    "AuthorizationException",
    "CMSException",
    "ContentWriteException",
    "EmailDeliveryException",
    "IdentityProviderError",
    "ResourceNotFoundException",
    "ServiceNotConfiguredException",
    "ValidationException",
    # Value objects
    "RegistrantIdentity",
]
