"""Core enums package.

Usage:
    from security_store.core.enums import ErrorCode, Environment, LifecycleState
"""

from security_store.core.enums.environment import Environment
from security_store.core.enums.error_code import ErrorCode
from security_store.core.enums.lifecycle_state import LifecycleState

__all__ = ["ErrorCode", "Environment", "LifecycleState"]
