from domainkit.const import ACTION_TURN_OFF, ACTION_TURN_ON
from domainkit.domain import DeviceDomain, DomainStore
from domainkit.models.switch import SwitchCommand, SwitchEvent, SwitchState
from domainkit.schema import ActionSpec, DomainSchema

DOMAIN = "switch"

SwitchDomain = DeviceDomain[SwitchState, SwitchCommand, SwitchEvent]


class SwitchStore(DomainStore[SwitchState, SwitchCommand, SwitchEvent]):
    """Store for a binary switch entity."""

    def turn_on(self) -> SwitchState:
        return self.apply_command(ACTION_TURN_ON)

    def turn_off(self) -> SwitchState:
        return self.apply_command(ACTION_TURN_OFF)


SWITCH_SCHEMA = DomainSchema(
    name=DOMAIN,
    state_class=SwitchState,
    command_class=SwitchCommand,
    event_class=SwitchEvent,
    actions=(
        ActionSpec(ACTION_TURN_ON, sets={"power": True}),
        ActionSpec(ACTION_TURN_OFF, sets={"power": False}),
    ),
    store_class=SwitchStore,
)
