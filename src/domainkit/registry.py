"""Registry of device domains for schema discovery.

The registry is an ordinary object built during application start-up (see
`domainkit.bootstrap.create_registry`), not populated as a side effect of importing
domain modules. External tooling reads descriptors from it to generate documentation
or UI. The validate/merge engine never consults it.

Example:
    ```python
    registry = DomainRegistry()
    registry.register(DeviceDomain(LIGHT_SCHEMA))

    descriptor = registry.get("light").describe()
    ```
"""

from logging import getLogger
from typing import Any

from domainkit.domain import DeviceDomain
from domainkit.exceptions import DomainNotRegisteredError
from domainkit.schema import DomainDescriptor

LOGGER = getLogger(__name__)


class DomainRegistry:
    """Registry mapping domain names to their device domains."""

    def __init__(self) -> None:
        self._domains: dict[str, DeviceDomain[Any, Any, Any]] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._domains

    def __len__(self) -> int:
        return len(self._domains)

    def register(self, domain: DeviceDomain[Any, Any, Any]) -> None:
        """Register a device domain under its name.

        A later registration for the same name replaces the earlier one.

        Args:
            domain: The device domain to register.
        """
        existing = self._domains.get(domain.name)
        if existing is domain:
            return

        if existing is not None:
            LOGGER.warning("Overriding original device domain %r for name '%s' with %r", existing, domain.name, domain)

        LOGGER.debug("Registering device domain for name '%s'", domain.name)
        self._domains[domain.name] = domain

    def get(self, name: str) -> DeviceDomain[Any, Any, Any]:
        """Get the device domain registered for a name.

        Raises:
            DomainNotRegisteredError: If no domain is registered for the name.
        """
        try:
            return self._domains[name]
        except KeyError:
            raise DomainNotRegisteredError(name) from None

    def all_domains(self) -> list[str]:
        """Get all registered domain names, sorted."""
        return sorted(self._domains.keys())

    def descriptors(self) -> dict[str, DomainDescriptor]:
        """Get the schema descriptor of every registered domain, keyed by name."""
        return {name: self._domains[name].describe() for name in self.all_domains()}

    @property
    def count(self) -> int:
        """The number of registered domains."""
        return len(self._domains)

    def clear(self) -> None:
        """Remove all registered domains."""
        self._domains.clear()
