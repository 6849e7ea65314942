"""Generic validate/merge engine shared by every device domain.

A `DeviceDomain` is built from a `DomainSchema` and knows how to parse, validate and
describe that domain's commands and events. Binding it to an entity yields a
`DomainStore`, which owns all reads and writes of the entity's desired, reported and
effective state blobs.

Example:
    ```python
    domain = DeviceDomain(LIGHT_SCHEMA)
    store = domain.bind(entity)
    store.ensure_default_actions()

    cmd = domain.parse_command(b'{"type": "set_brightness", "brightness": 50}')
    store.set_desired_from_command(cmd)
    ```

Nothing here locks. Callers that deliver commands and events for the same entity
concurrently must serialize them before calling in.
"""

import typing
from logging import getLogger
from typing import Generic, TypeVar, cast

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from domainkit.entity import CommandEnvelope, Entity, EventEnvelope
from domainkit.exceptions import DecodeError, EncodeError, UnsupportedActionError
from domainkit.models import BaseCommand, BaseDomainState, BaseEvent

if typing.TYPE_CHECKING:
    from domainkit.schema import ActionSpec, DomainDescriptor, DomainSchema

StateT = TypeVar("StateT", bound=BaseDomainState)
"""Represents a specific state type, e.g. LightState or SwitchState."""

CommandT = TypeVar("CommandT", bound=BaseCommand)
EventT = TypeVar("EventT", bound=BaseEvent)

LOGGER = getLogger(__name__)


class DeviceDomain(Generic[StateT, CommandT, EventT]):
    """Parses, validates and describes the commands and events of one device domain."""

    schema: "DomainSchema"
    """The declarative schema driving this domain."""

    sync_available_actions: bool
    """Whether events carrying `available_actions` replace the entity's action list."""

    def __init__(self, schema: "DomainSchema", *, sync_available_actions: bool = False) -> None:
        self.schema = schema
        self.sync_available_actions = sync_available_actions

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name!r}>"

    @property
    def name(self) -> str:
        """The unique type identifier of the domain, e.g. 'light'."""
        return self.schema.name

    def supported_actions(self) -> list[str]:
        """Return the domain's action names in schema order."""
        return self.schema.action_names

    def describe(self) -> "DomainDescriptor":
        """Build the schema descriptor published for external discovery.

        Commands and events share the same action list.
        """
        from domainkit.schema import DomainDescriptor

        actions = [spec.describe() for spec in self.schema.actions]
        return DomainDescriptor(domain=self.name, commands=actions, events=list(actions))

    def parse_command(self, raw: bytes | str | CommandEnvelope) -> CommandT:
        """Decode a command payload and validate it.

        Raises:
            DecodeError: If the payload is not well-formed for this domain.
            DomainValidationError: If the decoded command fails validation.
        """
        if isinstance(raw, CommandEnvelope):
            raw = raw.payload

        try:
            cmd = self.schema.command_class.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(self.name, "command", e) from e

        cmd = cast("CommandT", cmd)
        self.validate_command(cmd)
        return cmd

    def parse_event(self, raw: bytes | str | EventEnvelope) -> EventT:
        """Decode an event payload and validate it.

        Raises:
            DecodeError: If the payload is not well-formed for this domain.
            UnsupportedActionError: If the event's type is not a known action.
        """
        if isinstance(raw, EventEnvelope):
            raw = raw.payload

        try:
            evt = self.schema.event_class.model_validate_json(raw)
        except ValidationError as e:
            raise DecodeError(self.name, "event", e) from e

        evt = cast("EventT", evt)
        self.validate_event(evt)
        return evt

    def validate_command(self, cmd: CommandT) -> "ActionSpec":
        """Check the command's action and every field that action requires.

        Returns:
            The matched action spec.

        Raises:
            UnsupportedActionError: If the command's type is not a known action.
            MissingFieldError: If a required field is absent or violates a constraint.
        """
        spec = self.schema.get_action(cmd.type)
        if spec is None:
            raise UnsupportedActionError(self.name, cmd.type, "command")

        spec.validate(cmd)
        return spec

    def validate_event(self, evt: EventT) -> "ActionSpec":
        """Check the event's action only.

        Events are observations and may be partial, so field presence is not enforced.

        Raises:
            UnsupportedActionError: If the event's type is not a known action.
        """
        spec = self.schema.get_action(evt.type)
        if spec is None:
            raise UnsupportedActionError(self.name, evt.type, "event")
        return spec

    def decode_state(self, raw: bytes) -> StateT:
        """Decode a stored state blob. An empty blob decodes to a zero-valued state.

        Raises:
            DecodeError: If a non-empty blob is malformed.
        """
        if not raw:
            return cast("StateT", self.schema.state_class())

        try:
            return cast("StateT", self.schema.state_class.model_validate_json(raw))
        except ValidationError as e:
            raise DecodeError(self.name, "state", e) from e

    def encode_state(self, state: StateT) -> bytes:
        """Encode a state, omitting attributes that were never set.

        Raises:
            EncodeError: If the state cannot be serialized.
        """
        try:
            return state.model_dump_json(exclude_none=True).encode()
        except PydanticSerializationError as e:
            raise EncodeError(f"Unable to encode {self.name} state: {e}") from e

    def bind(self, entity: Entity) -> "DomainStore[StateT, CommandT, EventT]":
        """Bind a store for this domain to an entity."""
        return self.schema.store_class(self, entity)


class DomainStore(Generic[StateT, CommandT, EventT]):
    """Mediates reads and writes of one entity's desired, reported and effective state.

    Every write reads the current state, merges only the attributes the action touches
    and replaces the whole blob.
    """

    domain: DeviceDomain[StateT, CommandT, EventT]
    entity: Entity

    def __init__(self, domain: DeviceDomain[StateT, CommandT, EventT], entity: Entity) -> None:
        self.domain = domain
        self.entity = entity

    def __repr__(self) -> str:
        return f"<{type(self).__name__} domain={self.domain.name!r} entity={self.entity.id!r}>"

    def ensure_default_actions(self) -> None:
        """Fill the entity's action list with the domain's actions if it is empty."""
        if not self.entity.actions:
            self.entity.actions = self.domain.supported_actions()
            LOGGER.debug("Set default actions for entity '%s': %s", self.entity.id, self.entity.actions)

    def supports(self, action: str) -> bool:
        """Whether this entity instance is configured to support the action."""
        return action in self.entity.actions

    def desired(self) -> StateT:
        return self.domain.decode_state(self.entity.data.desired)

    def reported(self) -> StateT:
        return self.domain.decode_state(self.entity.data.reported)

    def effective(self) -> StateT:
        return self.domain.decode_state(self.entity.data.effective)

    def apply_command(self, action: str, **fields: object) -> StateT:
        """Build a command for this domain from keyword fields and merge it into desired state.

        Raises:
            DecodeError: If a field value has the wrong type for the command model.
            DomainValidationError: If the command fails validation.
        """
        try:
            cmd = self.domain.schema.command_class(type=action, **fields)
        except ValidationError as e:
            raise DecodeError(self.domain.name, "command", e) from e

        return self.set_desired_from_command(cast("CommandT", cmd))

    def set_desired_from_command(self, cmd: CommandT) -> StateT:
        """Validate a command and merge it into desired state.

        Returns:
            The new desired state.

        Raises:
            DomainValidationError: If the command fails validation, leaving state untouched.
            EncodeError: If the merged state cannot be serialized.
        """
        spec = self.domain.validate_command(cmd)

        state = self._read_for_update(self.entity.data.desired, "desired")
        state = state.model_copy(update=spec.state_updates(cmd))
        self.entity.data.desired = self.domain.encode_state(state)

        LOGGER.debug("Entity '%s' desired state updated by '%s': %r", self.entity.id, cmd.type, state)
        return state

    def set_reported_from_event(self, evt: EventT) -> StateT:
        """Validate an event, merge the attributes it reports into reported state and copy
        the result to effective state.

        Returns:
            The new reported (and effective) state.

        Raises:
            UnsupportedActionError: If the event's type is not a known action, leaving state untouched.
            EncodeError: If the merged state cannot be serialized.
        """
        spec = self.domain.validate_event(evt)

        state = self._read_for_update(self.entity.data.reported, "reported")
        state = state.model_copy(update=spec.state_updates(evt))
        blob = self.domain.encode_state(state)
        self.entity.data.reported = blob
        self.entity.data.effective = blob

        if self.domain.sync_available_actions and evt.available_actions:
            self._sync_actions(evt.available_actions)

        LOGGER.debug("Entity '%s' reported state updated by '%s': %r", self.entity.id, evt.type, state)
        return state

    def _read_for_update(self, raw: bytes, channel: str) -> StateT:
        try:
            return self.domain.decode_state(raw)
        except DecodeError as e:
            LOGGER.warning(
                "Stored %s state for entity '%s' is unreadable, starting from an empty state: %s",
                channel,
                self.entity.id,
                e,
            )
            return cast("StateT", self.domain.schema.state_class())

    def _sync_actions(self, available: list[str]) -> None:
        known = set(self.domain.supported_actions())
        dropped = [a for a in available if a not in known]
        if dropped:
            LOGGER.warning(
                "Ignoring unknown %s actions reported by entity '%s': %s", self.domain.name, self.entity.id, dropped
            )

        actions = list(dict.fromkeys(a for a in available if a in known))
        if actions:
            self.entity.actions = actions
