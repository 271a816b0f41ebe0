"""Lifecycle exceptions.

Unlike DomainError these ARE raised: using a component outside its started
state is a programming error that is fatal to the call.
"""

from security_store.core.enums import LifecycleState


class NotStartedError(RuntimeError):
    """Component used while its lifecycle gate is closed.

    Attributes:
        component: Name of the component that was used.
        state: Lifecycle state at the time of the call.
    """

    def __init__(self, component: str, state: LifecycleState) -> None:
        self.component = component
        self.state = state
        super().__init__(f"{component} is not started (state: {state.value})")
