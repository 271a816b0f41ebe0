"""Lifecycle-managed owner of the security stores.

Startup:
    start() -> do_start() -> SecurityBootstrap.run()
    On success the source is STARTED and facades may be used. On failure the
    source is FAILED, no store is registered and every facade call raises
    NotStartedError.

Shutdown:
    stop() -> do_stop() resets store registration so a later start()
    re-checks storage (seeding only tables that are empty by then).

The source can be driven directly or through the event bus: subscribe()
binds start() to ApplicationInitialized and stop() to ApplicationStopping.
"""

from security_store.application.bootstrap import (
    BootstrapReport,
    SecurityBootstrap,
    SecurityStores,
)
from security_store.application.security_configuration import SecurityConfiguration
from security_store.core.lifecycle import LifecycleSupport
from security_store.domain.events import ApplicationInitialized, ApplicationStopping
from security_store.domain.protocols.event_bus_protocol import EventBusProtocol
from security_store.domain.protocols.logger_protocol import LoggerProtocol
from security_store.domain.protocols.security_defaults_protocol import (
    SecurityDefaultsProtocol,
)
from security_store.infrastructure.persistence.database import Database


class SecurityConfigurationSource(LifecycleSupport):
    """Bootstraps the security stores and hands out configuration facades.

    Args:
        database: Database shared by bootstrap and facades.
        defaults: Baseline records for empty stores.
        logger: Structured logger.
        stores: Record stores (fresh instances when omitted).

    Example:
        >>> source = SecurityConfigurationSource(
        ...     database=database, defaults=StaticSecurityDefaults(), logger=logger
        ... )
        >>> await source.start()
        >>> configuration = source.load_configuration()
        >>> await configuration.get_users()
    """

    def __init__(
        self,
        *,
        database: Database,
        defaults: SecurityDefaultsProtocol,
        logger: LoggerProtocol,
        stores: SecurityStores | None = None,
    ) -> None:
        super().__init__()
        self._database = database
        self._logger = logger.bind(component="security_configuration_source")
        self._stores = stores or SecurityStores()
        self._bootstrap = SecurityBootstrap(
            database=database,
            stores=self._stores,
            defaults=defaults,
            logger=self._logger,
        )
        self._configuration: SecurityConfiguration | None = None
        self._last_report: BootstrapReport | None = None

    @property
    def stores(self) -> SecurityStores:
        """Record stores owned by this source."""
        return self._stores

    @property
    def last_report(self) -> BootstrapReport | None:
        """Report of the most recent successful bootstrap, if any."""
        return self._last_report

    async def do_start(self) -> None:
        self._logger.info("security_configuration_source_starting")
        self._last_report = await self._bootstrap.run()
        self._logger.info("security_configuration_source_started")

    async def do_stop(self) -> None:
        for store in self._stores.all():
            store.reset()
        self._logger.info("security_configuration_source_stopped")

    def get_configuration(self) -> SecurityConfiguration | None:
        """Facade produced by the last load_configuration() call, if any."""
        return self._configuration

    def load_configuration(self) -> SecurityConfiguration:
        """Create a fresh facade over this source's stores.

        Loading never touches storage; the facade checks the lifecycle gate
        on every call instead.

        Returns:
            New SecurityConfiguration, also kept for get_configuration().
        """
        self._configuration = SecurityConfiguration(
            database=self._database,
            stores=self._stores,
            lifecycle=self,
            logger=self._logger,
        )
        return self._configuration

    def subscribe(self, event_bus: EventBusProtocol) -> None:
        """Start and stop with the application.

        Args:
            event_bus: Bus publishing application lifecycle events.
        """
        event_bus.subscribe(ApplicationInitialized, self.handle_initialized)
        event_bus.subscribe(ApplicationStopping, self.handle_stopping)

    async def handle_initialized(self, event: ApplicationInitialized) -> None:
        await self.start()

    async def handle_stopping(self, event: ApplicationStopping) -> None:
        await self.stop()
