from .base import BaseCommand, BaseDomainState, BaseEvent
from .light import LightCommand, LightEvent, LightState
from .switch import SwitchCommand, SwitchEvent, SwitchState

__all__ = [
    "BaseCommand",
    "BaseDomainState",
    "BaseEvent",
    "LightCommand",
    "LightEvent",
    "LightState",
    "SwitchCommand",
    "SwitchEvent",
    "SwitchState",
]
