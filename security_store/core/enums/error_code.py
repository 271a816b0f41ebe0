"""Machine-readable error codes.

Error codes follow ENTITY_REASON naming and travel inside DomainError
instances returned by the security configuration facade.
"""

from enum import Enum


class ErrorCode(Enum):
    """Security store error codes."""

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    ROLE_NOT_FOUND = "role_not_found"
    PRIVILEGE_NOT_FOUND = "privilege_not_found"
    USER_ROLE_MAPPING_NOT_FOUND = "user_role_mapping_not_found"

    # Conflict errors
    CONCURRENT_MODIFICATION = "concurrent_modification"
    DUPLICATE_KEY = "duplicate_key"
