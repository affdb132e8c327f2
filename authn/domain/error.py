"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PreconditionFailedError(DomainError):
    """Raised when a required piece of state is missing."""

    def __init__(self, message: str):
        super().__init__(message)


class UnsupportedProviderError(DomainError):
    """Raised when no federated provider is registered under a name."""

    def __init__(self, provider_name: object):
        self.provider_name = getattr(provider_name, "value", provider_name)
        super().__init__(f"Unsupported provider: {self.provider_name}")
