"""Adapter layer errors."""


class AdapterError(Exception):
    """Base error for calls to systems outside this service."""


class ProviderError(AdapterError):
    """An identity provider refused or failed an authentication step.

    Raised for anything from network failures to rejected ID tokens; the
    user-facing outcome is the same failed sign-in.
    """
