"""Base class for value objects."""

from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """Base class for all value objects.

    Value objects are frozen and compared by value. Unknown fields are
    rejected so provider payloads can't leak extra keys into the domain.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
