from pydantic import BaseModel, ConfigDict, Field, field_validator


class BaseDomainState(BaseModel):
    """Attribute snapshot of a device, decoded from one of an entity's state blobs.

    Optional attributes are `None` until something sets them, and are omitted from the
    encoded form.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    power: bool = Field(default=False)
    """Whether the device is on."""


class BaseCommand(BaseModel):
    """A user or automation intent addressed to a device.

    Payload fields default to `None`, meaning "not supplied", which is distinct from a
    supplied zero or empty value.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, strict=True)

    type: str = Field(default="")
    """The action type, e.g. 'turn_on'. A missing or null type fails validation, not decoding."""

    @field_validator("type", mode="before")
    @classmethod
    def _null_type_as_empty(cls, value):
        return "" if value is None else value

    def to_payload(self) -> bytes:
        """Encode as a JSON payload, omitting fields that were not supplied."""
        return self.model_dump_json(exclude_none=True).encode()


class BaseEvent(BaseCommand):
    """Telemetry reported by a device. Fields left as `None` were not reported."""

    available_actions: list[str] | None = Field(default=None)
    """Actions the device currently claims to support."""

    cause: str | None = Field(default=None)
    """Human-readable reason for the change."""
