"""Declarative action schemas and the descriptors published for discovery.

A device domain is described entirely as data: an ordered tuple of `ActionSpec`
values, each naming the state assignments the action makes and the payload fields
it carries. The generic engine in `domainkit.domain` derives validation, merging
and descriptors from these specs.

Example:
    ```python
    ActionSpec(
        action="set_brightness",
        fields=(FieldSpec(name="brightness", type="int", required=True, min=0, max=100),),
    )
    ```
"""

import typing
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from domainkit.exceptions import FieldConstraintError, MissingFieldError

if typing.TYPE_CHECKING:
    from domainkit.domain import DomainStore
    from domainkit.models import BaseCommand, BaseDomainState, BaseEvent

FieldType = Literal["int", "[]int", "string", "bool"]
"""Type tags used in field descriptors."""


class FieldDescriptor(BaseModel):
    """Describes one payload field of an action for external tooling."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: FieldType
    required: bool = Field(default=False)
    min: int | None = Field(default=None)
    max: int | None = Field(default=None)


class ActionDescriptor(BaseModel):
    """Describes one action and its payload fields."""

    model_config = ConfigDict(frozen=True)

    action: str
    fields: list[FieldDescriptor] = Field(default_factory=list)


class DomainDescriptor(BaseModel):
    """Self-describing schema of a device domain, published through the registry."""

    model_config = ConfigDict(frozen=True)

    domain: str
    commands: list[ActionDescriptor] = Field(default_factory=list)
    events: list[ActionDescriptor] = Field(default_factory=list)


@dataclass(frozen=True)
class FieldSpec:
    """A payload field carried by an action, and the constraints a command must meet."""

    name: str
    type: FieldType
    required: bool = False
    min: int | None = None
    max: int | None = None
    length: int | None = None
    """Exact number of components for list fields."""
    non_empty: bool = False
    """Reject empty strings as if the field were absent."""

    def requirement(self) -> str:
        if self.length is not None:
            return f"{self.name}[{self.length}]"
        return self.name

    def check(self, action: str, value: Any) -> None:
        """Check a command value against this field's constraints.

        Raises:
            MissingFieldError: If the field is required and absent, or required, non-empty and empty.
            FieldConstraintError: If the value violates a bound or length constraint.
        """
        if value is None:
            if self.required:
                raise MissingFieldError(action, self.name, self.requirement())
            return

        if self.non_empty and value == "":
            raise MissingFieldError(action, self.name, self.requirement())

        if self.length is not None and len(value) != self.length:
            raise FieldConstraintError(action, self.name, f"must have exactly {self.length} components")

        if self.min is not None and value < self.min:
            raise FieldConstraintError(action, self.name, f"must be >= {self.min}")

        if self.max is not None and value > self.max:
            raise FieldConstraintError(action, self.name, f"must be <= {self.max}")

    def describe(self) -> FieldDescriptor:
        return FieldDescriptor(name=self.name, type=self.type, required=self.required, min=self.min, max=self.max)


@dataclass(frozen=True)
class ActionSpec:
    """One supported action of a device domain."""

    action: str
    fields: tuple[FieldSpec, ...] = ()
    """Payload fields copied into state under the same name when present."""
    sets: Mapping[str, Any] = field(default_factory=dict)
    """Constant state assignments, e.g. `{"power": True}` for turn_on."""

    def validate(self, payload: "BaseCommand") -> None:
        for spec in self.fields:
            spec.check(self.action, getattr(payload, spec.name, None))

    def state_updates(self, payload: "BaseCommand | BaseEvent") -> dict[str, Any]:
        """Return the state attributes this action changes, skipping absent fields."""
        updates: dict[str, Any] = dict(self.sets)
        for spec in self.fields:
            value = getattr(payload, spec.name, None)
            if value is None:
                continue
            updates[spec.name] = list(value) if isinstance(value, list) else value
        return updates

    def describe(self) -> ActionDescriptor:
        return ActionDescriptor(action=self.action, fields=[f.describe() for f in self.fields])


@dataclass(frozen=True)
class DomainSchema:
    """Everything the generic engine needs to know about one device domain."""

    name: str
    state_class: type["BaseDomainState"]
    command_class: type["BaseCommand"]
    event_class: type["BaseEvent"]
    actions: tuple[ActionSpec, ...]
    store_class: type["DomainStore"]

    def get_action(self, action: str) -> ActionSpec | None:
        for spec in self.actions:
            if spec.action == action:
                return spec
        return None

    @property
    def action_names(self) -> list[str]:
        return [spec.action for spec in self.actions]
