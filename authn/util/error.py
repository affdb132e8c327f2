"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Required system configuration is missing or invalid.

    Signals a deployment defect rather than a caller error.
    """

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"System property {key} is not set")
