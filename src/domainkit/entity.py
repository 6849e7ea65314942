"""Boundary types shared with the hosting entity platform.

The platform owns entity records and their persistence. These models only
describe the fields the device domains read and overwrite: the action list and
the three state blobs.
"""

from pydantic import BaseModel, ConfigDict, Field


class EntityData(BaseModel):
    """The opaque JSON state blobs stored on an entity."""

    desired: bytes = Field(default=b"")
    """Target state, written from commands."""

    reported: bytes = Field(default=b"")
    """Last state the device claimed, written from events."""

    effective: bytes = Field(default=b"")
    """State treated as ground truth, always a copy of reported."""


class Entity(BaseModel):
    """A platform-owned entity record."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(default="")
    """The platform identifier of the entity."""

    domain: str = Field(default="")
    """The device domain the entity belongs to, e.g. 'switch' or 'light'."""

    actions: list[str] = Field(default_factory=list)
    """Actions this entity instance supports, may be a subset of its domain's actions."""

    data: EntityData = Field(default_factory=EntityData)
    """Desired, reported and effective state blobs."""


class CommandEnvelope(BaseModel):
    """A command as delivered by the platform, with an undecoded payload."""

    model_config = ConfigDict(frozen=True)

    entity_id: str = Field(default="")
    payload: bytes


class EventEnvelope(BaseModel):
    """An event as delivered by the platform, with an undecoded payload."""

    model_config = ConfigDict(frozen=True)

    entity_id: str = Field(default="")
    payload: bytes
