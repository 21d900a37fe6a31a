"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests replace with in-memory fakes
Component = Literal["persistence", "cache", "mailer"]


class ProviderBase(Provider):
    """Common parent of every provider in the container.

    A component's abstract provider sets ``__mock_component__``; its
    implementations subclass it and mark themselves with ``__is_mock__``.
    Layer providers (config, domain, application) leave both at their
    defaults and are always used as is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
