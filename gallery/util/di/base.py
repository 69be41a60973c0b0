"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components the test container can swap for in-process fakes
Component = Literal["auth_provider", "persistence"]


class ProviderBase(Provider):
    """Base for all gallery DI providers.

    Attributes:
        __mock_component__: Component this provider belongs to, None when it
            is concrete and never swapped
        __is_mock__: Marks the in-process implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
