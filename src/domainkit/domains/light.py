from domainkit.const import ACTION_TURN_OFF, ACTION_TURN_ON
from domainkit.domain import DeviceDomain, DomainStore
from domainkit.models.light import LightCommand, LightEvent, LightState
from domainkit.schema import ActionSpec, DomainSchema, FieldSpec

DOMAIN = "light"

ACTION_SET_BRIGHTNESS = "set_brightness"
ACTION_SET_RGB = "set_rgb"
ACTION_SET_TEMPERATURE = "set_temperature"
ACTION_SET_SCENE = "set_scene"

BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX = 100

LightDomain = DeviceDomain[LightState, LightCommand, LightEvent]


class LightStore(DomainStore[LightState, LightCommand, LightEvent]):
    """Store for a light entity, with one helper per light intent."""

    def turn_on(self) -> LightState:
        return self.apply_command(ACTION_TURN_ON)

    def turn_off(self) -> LightState:
        return self.apply_command(ACTION_TURN_OFF)

    def set_brightness(self, value: int) -> LightState:
        return self.apply_command(ACTION_SET_BRIGHTNESS, brightness=value)

    def set_rgb(self, r: int, g: int, b: int) -> LightState:
        return self.apply_command(ACTION_SET_RGB, rgb=[r, g, b])

    def set_temperature(self, value: int) -> LightState:
        return self.apply_command(ACTION_SET_TEMPERATURE, temperature=value)

    def set_scene(self, scene: str) -> LightState:
        return self.apply_command(ACTION_SET_SCENE, scene=scene)


LIGHT_SCHEMA = DomainSchema(
    name=DOMAIN,
    state_class=LightState,
    command_class=LightCommand,
    event_class=LightEvent,
    actions=(
        ActionSpec(ACTION_TURN_ON, sets={"power": True}),
        ActionSpec(ACTION_TURN_OFF, sets={"power": False}),
        ActionSpec(
            ACTION_SET_BRIGHTNESS,
            fields=(FieldSpec("brightness", "int", required=True, min=BRIGHTNESS_MIN, max=BRIGHTNESS_MAX),),
        ),
        ActionSpec(ACTION_SET_RGB, fields=(FieldSpec("rgb", "[]int", required=True, length=3),)),
        ActionSpec(ACTION_SET_TEMPERATURE, fields=(FieldSpec("temperature", "int", required=True),)),
        ActionSpec(ACTION_SET_SCENE, fields=(FieldSpec("scene", "string", required=True, non_empty=True),)),
    ),
    store_class=LightStore,
)
