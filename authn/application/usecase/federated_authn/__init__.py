"""Federated authentication use cases."""

from .claim import FederatedClaimUseCase
from .login import FederatedLoginUseCase
from .redirect_url import GetRedirectUrlUseCase

__all__ = ["FederatedClaimUseCase", "FederatedLoginUseCase", "GetRedirectUrlUseCase"]
