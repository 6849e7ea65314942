from logging import getLogger

from domainkit.config import DomainKitConfig
from domainkit.domain import DeviceDomain
from domainkit.domains import BUILTIN_SCHEMAS
from domainkit.logging_ import enable_logging
from domainkit.registry import DomainRegistry

LOGGER = getLogger(__name__)


def create_registry(config: DomainKitConfig) -> DomainRegistry:
    """Build a registry holding a device domain for every enabled built-in schema.

    Args:
        config: The configuration naming the domains and their options.

    Returns:
        A populated DomainRegistry.
    """
    registry = DomainRegistry()
    for name in config.enabled_domains:
        registry.register(DeviceDomain(BUILTIN_SCHEMAS[name], sync_available_actions=config.sync_available_actions))

    LOGGER.info("Registered %d device domains: %s", registry.count, ", ".join(registry.all_domains()))
    return registry


def startup(config: DomainKitConfig | None = None) -> DomainRegistry:
    """Set up logging and build the domain registry for an application.

    Args:
        config: The configuration to use, loaded from the environment when omitted.
    """
    config = config or DomainKitConfig()
    enable_logging(config.log_level)
    return create_registry(config)
