"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for domain entities.

    Entities are immutable; updates go through ``model_copy(update=...)``
    and are persisted with the owning repository's ``save``.
    """

    model_config = ConfigDict(frozen=True)
