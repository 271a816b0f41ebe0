"""Error classes returned by the security configuration.

Every error names the kind of record involved ("User", "Role", "Privilege",
"User-role mapping") and its identity, so callers can log or react.

Error Types:
- NotFoundError: update against a record that does not exist
- ConcurrentModificationError: version mismatch or storage-level conflict
- DuplicateKeyError: add against an identity that already exists

Usage:
    from security_store.core.errors import NotFoundError
    from security_store.core.enums import ErrorCode
    from security_store.core.result import Failure

    return Failure(error=NotFoundError(
        code=ErrorCode.ROLE_NOT_FOUND,
        message="Role 'nx-admin' not found",
        resource_type="Role",
        resource_id="nx-admin",
    ))
"""

from dataclasses import dataclass

from security_store.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Record not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of record (User, Role, ...).
        resource_id: Identity of the record that was not found.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConcurrentModificationError(DomainError):
    """Record updated by another writer since the caller last read it.

    Raised for an explicit version mismatch as well as for a conflict
    detected by the storage layer during the physical write. Never retried
    by the store; retry policy belongs to the caller.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of record in conflict.
        resource_id: Identity of the record in conflict.
        details: Additional context (expected/actual version when known).
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class DuplicateKeyError(DomainError):
    """Record identity already exists.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Kind of record.
        resource_id: Identity that already exists.
        details: Additional context (constraint error from storage).
    """

    resource_type: str
    resource_id: str
