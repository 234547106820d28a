"""Provider base class and component selection."""

from typing import ClassVar, Literal

from dishka import Provider

# Swappable infrastructure components. Tests replace these with mocks.
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider in the container.

    A provider class with subclasses is a component: its subclasses are the
    interchangeable implementations, told apart by ``__is_mock__``. A provider
    without subclasses is always used as-is.

    Attributes:
        __mock_component__: Component name, set on component base classes only
        __is_mock__: True on the test implementation of a component
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def is_component(cls) -> bool:
        return bool(cls.__subclasses__())

    @classmethod
    def implementation(cls, use_mock: bool = False) -> type["ProviderBase"]:
        """Pick the provider class to instantiate for this base.

        Raises:
            ValueError: If the component has no implementation of that kind.
                Mock implementations exist only once the test suite has
                imported them.
        """
        if not cls.is_component():
            return cls

        for subclass in cls.__subclasses__():
            if subclass.__is_mock__ == use_mock:
                return subclass

        kind = "mock" if use_mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
