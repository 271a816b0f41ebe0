"""Runtime environment types.

Used by Settings and the container to pick environment-specific behavior
(log rendering, database defaults).
"""

from enum import Enum


class Environment(str, Enum):
    """Runtime environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
