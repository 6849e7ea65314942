from .light import LIGHT_SCHEMA, LightDomain, LightStore
from .switch import SWITCH_SCHEMA, SwitchDomain, SwitchStore

BUILTIN_SCHEMAS = {schema.name: schema for schema in (SWITCH_SCHEMA, LIGHT_SCHEMA)}
"""Built-in device schemas keyed by domain name."""

__all__ = [
    "BUILTIN_SCHEMAS",
    "LIGHT_SCHEMA",
    "SWITCH_SCHEMA",
    "LightDomain",
    "LightStore",
    "SwitchDomain",
    "SwitchStore",
]
