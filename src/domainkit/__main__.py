"""Print the schema descriptors of the enabled device domains as JSON.

    python -m domainkit --enabled-domains '["light"]'
"""

import sys

from pydantic import Field, TypeAdapter

from domainkit.bootstrap import startup
from domainkit.config import DomainKitConfig
from domainkit.schema import DomainDescriptor

DESCRIPTORS_ADAPTER = TypeAdapter(dict[str, DomainDescriptor])


class CliConfig(DomainKitConfig):
    model_config = DomainKitConfig.model_config.copy() | {
        "cli_parse_args": True,
        "cli_prog_name": "domainkit",
        "cli_kebab_case": True,
        "cli_implicit_flags": True,
    }

    indent: int = Field(default=2)
    """Indentation of the JSON output."""


def main() -> int:
    config = CliConfig()
    registry = startup(config)
    output = DESCRIPTORS_ADAPTER.dump_json(registry.descriptors(), indent=config.indent, exclude_none=True)
    sys.stdout.write(output.decode() + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
