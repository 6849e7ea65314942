import pytest

from domainkit import LIGHT_SCHEMA, SWITCH_SCHEMA, DeviceDomain, Entity
from domainkit.domains import LightDomain, LightStore, SwitchDomain, SwitchStore


@pytest.fixture
def switch_domain() -> SwitchDomain:
    return DeviceDomain(SWITCH_SCHEMA)


@pytest.fixture
def light_domain() -> LightDomain:
    return DeviceDomain(LIGHT_SCHEMA)


@pytest.fixture
def switch_entity() -> Entity:
    return Entity(id="switch.kitchen", domain="switch")


@pytest.fixture
def light_entity() -> Entity:
    return Entity(id="light.living_room", domain="light")


@pytest.fixture
def switch_store(switch_domain: SwitchDomain, switch_entity: Entity) -> SwitchStore:
    store = switch_domain.bind(switch_entity)
    assert isinstance(store, SwitchStore)
    return store


@pytest.fixture
def light_store(light_domain: LightDomain, light_entity: Entity) -> LightStore:
    store = light_domain.bind(light_entity)
    assert isinstance(store, LightStore)
    return store
