"""Application services for identity management."""

from roster_identity.application.services.access_policy import AccessPolicy
from roster_identity.application.services.authentication_service import (
    AuthenticationService,
)

__all__ = ["AccessPolicy", "AuthenticationService"]
