"""Lifecycle states for start/stop managed components."""

from enum import Enum


class LifecycleState(str, Enum):
    """States of a LifecycleSupport component.

    Transitions:
        NEW -> STARTING -> STARTED -> STOPPING -> STOPPED
        STARTING -> FAILED (do_start raised)
        STOPPED/FAILED -> STARTING (restart)
    """

    NEW = "new"
    STARTING = "starting"
    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"
    FAILED = "failed"
