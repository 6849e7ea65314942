from pydantic import Field

from .base import BaseCommand, BaseDomainState, BaseEvent


class LightState(BaseDomainState):
    """State of a multi-attribute light."""

    brightness: int | None = Field(default=None)
    """Brightness between 0..100."""

    rgb: list[int] | None = Field(default=None)
    """The rgb color value as [r, g, b]."""

    temperature: int | None = Field(default=None)
    """The color temperature."""

    scene: str | None = Field(default=None)
    """The active scene name."""


class LightCommand(BaseCommand):
    brightness: int | None = Field(default=None)
    rgb: list[int] | None = Field(default=None)
    temperature: int | None = Field(default=None)
    scene: str | None = Field(default=None)


class LightEvent(BaseEvent):
    brightness: int | None = Field(default=None)
    rgb: list[int] | None = Field(default=None)
    temperature: int | None = Field(default=None)
    scene: str | None = Field(default=None)
