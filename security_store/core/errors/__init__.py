"""Core errors package.

Usage:
    from security_store.core.errors import NotFoundError, ConcurrentModificationError
"""

from security_store.core.errors.common_errors import (
    ConcurrentModificationError,
    DuplicateKeyError,
    NotFoundError,
)
from security_store.core.errors.domain_error import DomainError
from security_store.core.errors.lifecycle_error import NotStartedError

__all__ = [
    "DomainError",
    "NotFoundError",
    "ConcurrentModificationError",
    "DuplicateKeyError",
    "NotStartedError",
]
