"""Persistent security model store.

Users, roles, privileges and user/role mappings with optimistic concurrency
control and one-time bootstrap of default records.
"""

__version__ = "0.1.0"
