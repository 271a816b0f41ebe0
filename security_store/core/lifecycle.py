"""Start/stop lifecycle support for long-lived components.

Subclasses implement do_start()/do_stop(); callers use start()/stop() and
gate their operations with ensure_started().

Usage:
    class Store(LifecycleSupport):
        async def do_start(self) -> None:
            await self._bootstrap.run()

    store = Store()
    await store.start()
    store.ensure_started()  # raises NotStartedError before start()
"""

import asyncio

from security_store.core.enums import LifecycleState
from security_store.core.errors import NotStartedError


class LifecycleSupport:
    """Base class providing a guarded start/stop state machine.

    start() and stop() are serialized by a lock, so concurrent callers
    observe at most one do_start()/do_stop() in flight. A do_start() failure
    leaves the component in FAILED; it can be started again later.

    Attributes:
        state: Current LifecycleState.
    """

    def __init__(self) -> None:
        self._state = LifecycleState.NEW
        self._lifecycle_lock = asyncio.Lock()

    @property
    def state(self) -> LifecycleState:
        """Current lifecycle state."""
        return self._state

    @property
    def is_started(self) -> bool:
        """True while the component is STARTED."""
        return self._state is LifecycleState.STARTED

    @property
    def component_name(self) -> str:
        """Name used in NotStartedError messages."""
        return type(self).__name__

    async def start(self) -> None:
        """Start the component.

        No-op when already started.

        Raises:
            Exception: Whatever do_start() raised; state becomes FAILED.
        """
        async with self._lifecycle_lock:
            if self._state is LifecycleState.STARTED:
                return
            self._state = LifecycleState.STARTING
            try:
                await self.do_start()
            except BaseException:
                self._state = LifecycleState.FAILED
                raise
            self._state = LifecycleState.STARTED

    async def stop(self) -> None:
        """Stop the component. No-op unless started."""
        async with self._lifecycle_lock:
            if self._state is not LifecycleState.STARTED:
                return
            self._state = LifecycleState.STOPPING
            try:
                await self.do_stop()
            finally:
                self._state = LifecycleState.STOPPED

    def ensure_started(self) -> None:
        """Raise unless the component is STARTED.

        Raises:
            NotStartedError: If the lifecycle gate is closed.
        """
        if self._state is not LifecycleState.STARTED:
            raise NotStartedError(self.component_name, self._state)

    async def do_start(self) -> None:
        """Component-specific start logic (override)."""

    async def do_stop(self) -> None:
        """Component-specific stop logic (override)."""
