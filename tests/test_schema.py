import pytest

from domainkit import FieldConstraintError, MissingFieldError
from domainkit.domains import LightDomain, SwitchDomain
from domainkit.schema import ActionDescriptor, FieldDescriptor, FieldSpec


class TestFieldSpec:
    def test_optional_absent_field_passes(self) -> None:
        FieldSpec("brightness", "int").check("set_brightness", None)

    def test_required_absent_field_fails(self) -> None:
        with pytest.raises(MissingFieldError, match="brightness required for set_brightness"):
            FieldSpec("brightness", "int", required=True).check("set_brightness", None)

    def test_length_is_named_in_requirement(self) -> None:
        with pytest.raises(MissingFieldError, match=r"rgb\[3\] required for set_rgb"):
            FieldSpec("rgb", "[]int", required=True, length=3).check("set_rgb", None)

    @pytest.mark.parametrize(("value", "ok"), [(-1, False), (0, True), (100, True), (101, False)])
    def test_bounds_are_inclusive(self, value: int, ok: bool) -> None:
        spec = FieldSpec("brightness", "int", required=True, min=0, max=100)
        if ok:
            spec.check("set_brightness", value)
        else:
            with pytest.raises(FieldConstraintError):
                spec.check("set_brightness", value)

    def test_constraint_error_is_a_missing_field_error(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            FieldSpec("rgb", "[]int", length=3).check("set_rgb", [1])

        assert isinstance(exc_info.value, FieldConstraintError)
        assert exc_info.value.constraint == "must have exactly 3 components"


def test_light_descriptor(light_domain: LightDomain) -> None:
    descriptor = light_domain.describe()

    assert descriptor.domain == "light"
    assert [a.action for a in descriptor.commands] == [
        "turn_on",
        "turn_off",
        "set_brightness",
        "set_rgb",
        "set_temperature",
        "set_scene",
    ]
    assert descriptor.events == descriptor.commands

    by_action = {a.action: a for a in descriptor.commands}
    assert by_action["turn_on"] == ActionDescriptor(action="turn_on")
    assert by_action["set_brightness"].fields == [
        FieldDescriptor(name="brightness", type="int", required=True, min=0, max=100)
    ]
    assert by_action["set_rgb"].fields == [FieldDescriptor(name="rgb", type="[]int", required=True)]
    assert by_action["set_temperature"].fields == [FieldDescriptor(name="temperature", type="int", required=True)]
    assert by_action["set_scene"].fields == [FieldDescriptor(name="scene", type="string", required=True)]


def test_switch_descriptor(switch_domain: SwitchDomain) -> None:
    descriptor = switch_domain.describe()

    assert descriptor.domain == "switch"
    assert descriptor.commands == [ActionDescriptor(action="turn_on"), ActionDescriptor(action="turn_off")]
    assert descriptor.events == descriptor.commands


def test_descriptor_serializes_for_tooling(light_domain: LightDomain) -> None:
    data = light_domain.describe().model_dump(exclude_none=True)

    brightness = data["commands"][2]
    assert brightness == {
        "action": "set_brightness",
        "fields": [{"name": "brightness", "type": "int", "required": True, "min": 0, "max": 100}],
    }
