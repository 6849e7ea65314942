"""Merge, persistence and effective-state behaviour of the generic domain store."""

import logging

import pytest

from domainkit import LIGHT_SCHEMA, DecodeError, DeviceDomain, EncodeError, Entity, FieldConstraintError
from domainkit.domains import LightDomain, LightStore
from domainkit.models import LightCommand, LightEvent, LightState


def test_same_command_twice_is_idempotent(light_store: LightStore, light_entity: Entity) -> None:
    cmd = LightCommand(type="set_rgb", rgb=[9, 8, 7])

    light_store.set_desired_from_command(cmd)
    once = light_entity.data.desired
    light_store.set_desired_from_command(cmd)

    assert light_entity.data.desired == once


def test_unrelated_commands_merge(light_store: LightStore) -> None:
    light_store.set_desired_from_command(LightCommand(type="set_brightness", brightness=50))
    light_store.set_desired_from_command(LightCommand(type="set_rgb", rgb=[1, 2, 3]))

    state = light_store.desired()
    assert state.brightness == 50
    assert state.rgb == [1, 2, 3]


def test_command_only_applies_fields_of_its_action(light_store: LightStore) -> None:
    light_store.set_desired_from_command(LightCommand(type="turn_on", brightness=99, scene="ignored"))

    assert light_store.desired() == LightState(power=True)


def test_stored_rgb_is_a_copy(light_store: LightStore) -> None:
    rgb = [1, 2, 3]
    state = light_store.set_desired_from_command(LightCommand(type="set_rgb", rgb=rgb))

    assert state.rgb == rgb
    assert state.rgb is not rgb


def test_partial_event_keeps_other_reported_attributes(light_store: LightStore, light_entity: Entity) -> None:
    light_entity.data.reported = b'{"power":true,"rgb":[10,10,10]}'

    light_store.set_reported_from_event(LightEvent(type="set_brightness", brightness=80))

    assert light_store.reported() == LightState(power=True, rgb=[10, 10, 10], brightness=80)


def test_event_without_value_is_a_no_op_for_that_attribute(light_store: LightStore, light_entity: Entity) -> None:
    """An event that doesn't report an attribute must not reset it to zero."""
    light_entity.data.reported = b'{"power":true,"brightness":30}'

    light_store.set_reported_from_event(LightEvent(type="set_brightness"))

    assert light_store.reported().brightness == 30


def test_event_value_of_zero_is_applied(light_store: LightStore, light_entity: Entity) -> None:
    light_entity.data.reported = b'{"power":true,"brightness":30}'

    light_store.set_reported_from_event(LightEvent(type="set_brightness", brightness=0))

    assert light_store.reported().brightness == 0


@pytest.mark.parametrize(
    "events",
    [
        [LightEvent(type="turn_on")],
        [LightEvent(type="set_scene", scene="relax"), LightEvent(type="set_temperature", temperature=4000)],
        [LightEvent(type="turn_on"), LightEvent(type="set_rgb", rgb=[3, 2, 1]), LightEvent(type="turn_off")],
    ],
)
def test_effective_equals_reported_after_events(
    light_store: LightStore, light_entity: Entity, events: list[LightEvent]
) -> None:
    for evt in events:
        light_store.set_reported_from_event(evt)
        assert light_entity.data.effective == light_entity.data.reported
        assert light_store.effective() == light_store.reported()


def test_effective_is_overwritten_from_reported(light_store: LightStore, light_entity: Entity) -> None:
    light_entity.data.effective = b'{"power":false,"scene":"stale"}'

    light_store.set_reported_from_event(LightEvent(type="turn_on"))

    assert light_store.effective() == LightState(power=True)


def test_rejected_command_leaves_all_state_untouched(light_store: LightStore, light_entity: Entity) -> None:
    light_store.set_brightness(20)
    light_store.set_reported_from_event(LightEvent(type="turn_on"))
    before = light_entity.data.model_copy()

    with pytest.raises(FieldConstraintError):
        light_store.set_desired_from_command(LightCommand(type="set_rgb", rgb=[1, 2]))

    assert light_entity.data == before


def test_parse_and_validate_do_not_touch_entity(light_store: LightStore, light_entity: Entity) -> None:
    light_store.ensure_default_actions()
    before = light_entity.model_copy(deep=True)

    domain = light_store.domain
    cmd = domain.parse_command(b'{"type": "set_scene", "scene": "night"}')
    evt = domain.parse_event(b'{"type": "set_scene", "scene": "night"}')
    domain.validate_command(cmd)
    domain.validate_event(evt)

    assert light_entity == before


def test_reading_malformed_blob_raises(light_store: LightStore, light_entity: Entity) -> None:
    light_entity.data.desired = b"not json"

    with pytest.raises(DecodeError, match="Unable to decode light state"):
        light_store.desired()


def test_update_on_malformed_blob_starts_from_empty_state(
    light_store: LightStore, light_entity: Entity, caplog: pytest.LogCaptureFixture
) -> None:
    light_entity.data.reported = b'{"power": "maybe"}'

    with caplog.at_level(logging.WARNING, logger="domainkit"):
        state = light_store.set_reported_from_event(LightEvent(type="set_scene", scene="night"))

    assert state == LightState(scene="night")
    assert "unreadable" in caplog.text


def test_unknown_stored_attributes_are_ignored(light_store: LightStore, light_entity: Entity) -> None:
    light_entity.data.desired = b'{"power":true,"hue":120}'

    assert light_store.desired() == LightState(power=True)


class TestSyncAvailableActions:
    def test_available_actions_ignored_by_default(self, light_store: LightStore, light_entity: Entity) -> None:
        light_store.ensure_default_actions()
        before = list(light_entity.actions)

        light_store.set_reported_from_event(LightEvent(type="turn_on", available_actions=["turn_on"]))

        assert light_entity.actions == before

    def test_available_actions_replace_entity_actions_when_enabled(self, light_entity: Entity) -> None:
        store = DeviceDomain(LIGHT_SCHEMA, sync_available_actions=True).bind(light_entity)
        store.ensure_default_actions()

        store.set_reported_from_event(LightEvent(type="turn_on", available_actions=["turn_on", "turn_off"]))

        assert light_entity.actions == ["turn_on", "turn_off"]
        assert store.supports("set_rgb") is False

    def test_unknown_available_actions_are_dropped(
        self, light_entity: Entity, caplog: pytest.LogCaptureFixture
    ) -> None:
        store = DeviceDomain(LIGHT_SCHEMA, sync_available_actions=True).bind(light_entity)

        with caplog.at_level(logging.WARNING, logger="domainkit"):
            store.set_reported_from_event(LightEvent(type="turn_on", available_actions=["turn_on", "disco"]))

        assert light_entity.actions == ["turn_on"]
        assert "disco" in caplog.text

    def test_only_unknown_available_actions_keep_existing_list(self, light_entity: Entity) -> None:
        store = DeviceDomain(LIGHT_SCHEMA, sync_available_actions=True).bind(light_entity)
        light_entity.actions = ["turn_on"]

        store.set_reported_from_event(LightEvent(type="turn_on", available_actions=["disco"]))

        assert light_entity.actions == ["turn_on"]


def test_unserializable_state_raises_encode_error(light_domain: LightDomain) -> None:
    state = LightState.model_construct(power=False, brightness=object())

    with pytest.raises(EncodeError, match="Unable to encode light state"):
        light_domain.encode_state(state)


def test_repeated_available_actions_are_collapsed(light_entity: Entity) -> None:
    store = DeviceDomain(LIGHT_SCHEMA, sync_available_actions=True).bind(light_entity)

    store.set_reported_from_event(
        LightEvent(type="turn_on", available_actions=["turn_on", "turn_off", "turn_on", "turn_off"])
    )

    assert light_entity.actions == ["turn_on", "turn_off"]
