"""Domain services."""

from .authentication_service import AuthenticationService
from .base import Service
from .domain_helper import DomainHelper
from .federated_authn_service import FederatedAuthnProvider, FederatedAuthnService
from .jwt_service import JWTService
from .platform_service import PlatformService

__all__ = [
    "AuthenticationService",
    "DomainHelper",
    "FederatedAuthnProvider",
    "FederatedAuthnService",
    "JWTService",
    "PlatformService",
    "Service",
]
