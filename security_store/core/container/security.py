"""Security configuration source factory."""

from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from security_store.application.security_configuration_source import (
        SecurityConfigurationSource,
    )


@lru_cache()
def get_security_configuration_source() -> "SecurityConfigurationSource":
    """Get the security configuration source singleton (app-scoped).

    The source is subscribed to the event bus, so publishing
    ApplicationInitialized starts it and ApplicationStopping stops it.

    Returns:
        SecurityConfigurationSource (not started).

    Usage:
        source = get_security_configuration_source()
        await get_event_bus().publish(ApplicationInitialized())
        configuration = source.load_configuration()
    """
    from security_store.application.security_configuration_source import (
        SecurityConfigurationSource,
    )
    from security_store.core.container.events import get_event_bus
    from security_store.core.container.infrastructure import (
        get_database,
        get_logger,
        get_security_defaults,
    )

    source = SecurityConfigurationSource(
        database=get_database(),
        defaults=get_security_defaults(),
        logger=get_logger(),
    )
    source.subscribe(get_event_bus())
    return source
