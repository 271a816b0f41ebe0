"""Application layer - bootstrap, configuration facade and source."""

from security_store.application.bootstrap import (
    BootstrapReport,
    SecurityBootstrap,
    SecurityStores,
)
from security_store.application.security_configuration import SecurityConfiguration
from security_store.application.security_configuration_source import (
    SecurityConfigurationSource,
)

__all__ = [
    "BootstrapReport",
    "SecurityBootstrap",
    "SecurityConfiguration",
    "SecurityConfigurationSource",
    "SecurityStores",
]
