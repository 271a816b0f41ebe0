"""Default security data providers."""

from security_store.infrastructure.defaults.file_defaults import (
    FileSecurityDefaults,
    SecurityDefaultsDocument,
)
from security_store.infrastructure.defaults.static_defaults import (
    StaticSecurityDefaults,
)

__all__ = [
    "FileSecurityDefaults",
    "SecurityDefaultsDocument",
    "StaticSecurityDefaults",
]
