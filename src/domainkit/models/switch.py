from .base import BaseCommand, BaseDomainState, BaseEvent


class SwitchState(BaseDomainState):
    """State of a binary on/off switch."""


class SwitchCommand(BaseCommand):
    """Representation of a switch command, either 'turn_on' or 'turn_off'."""


class SwitchEvent(BaseEvent):
    """Representation of a switch event, either 'turn_on' or 'turn_off'."""
