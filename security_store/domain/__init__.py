"""Domain layer - Pure business logic.

This layer contains the security entities, protocols (ports) and domain
events. The domain layer has NO dependencies on any framework or
infrastructure - it is pure Python.

Structure:
- entities/: User, Role, Privilege, UserRoleMapping
- enums/: Domain enumerations
- protocols/: Ports implemented by infrastructure adapters
- events/: Application lifecycle events
"""
