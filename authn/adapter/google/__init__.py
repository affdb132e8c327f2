"""Google authn adapter."""

from .client import (
    GoogleAuthnError,
    GoogleAuthnProvider,
    MockGoogleAuthnProvider,
    RealGoogleAuthnProvider,
)

__all__ = [
    "GoogleAuthnError",
    "GoogleAuthnProvider",
    "MockGoogleAuthnProvider",
    "RealGoogleAuthnProvider",
]
