"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a production and a mock implementation
Component = Literal["google", "persistence"]


class ProviderBase(Provider):
    """Dishka provider tagged for mock/production selection.

    A provider class with subclasses is a swappable component named by
    ``__mock_component__``; each subclass sets ``__is_mock__``. A provider
    without subclasses is used as-is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
