import logging

from .bootstrap import create_registry, startup
from .config import DomainKitConfig
from .domain import DeviceDomain, DomainStore
from .domains import LIGHT_SCHEMA, SWITCH_SCHEMA, LightStore, SwitchStore
from .entity import CommandEnvelope, Entity, EntityData, EventEnvelope
from .exceptions import (
    DecodeError,
    DomainKitError,
    DomainNotRegisteredError,
    DomainValidationError,
    EncodeError,
    FieldConstraintError,
    MissingFieldError,
    UnsupportedActionError,
)
from .registry import DomainRegistry
from .schema import ActionSpec, DomainDescriptor, DomainSchema, FieldSpec

logging.getLogger("domainkit").addHandler(logging.NullHandler())

__all__ = [
    "LIGHT_SCHEMA",
    "SWITCH_SCHEMA",
    "ActionSpec",
    "CommandEnvelope",
    "DecodeError",
    "DeviceDomain",
    "DomainDescriptor",
    "DomainKitConfig",
    "DomainKitError",
    "DomainNotRegisteredError",
    "DomainRegistry",
    "DomainSchema",
    "DomainStore",
    "DomainValidationError",
    "EncodeError",
    "Entity",
    "EntityData",
    "EventEnvelope",
    "FieldConstraintError",
    "FieldSpec",
    "LightStore",
    "MissingFieldError",
    "SwitchStore",
    "UnsupportedActionError",
    "create_registry",
    "startup",
]
