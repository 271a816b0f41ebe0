"""Infrastructure layer - adapters implementing domain protocols.

Structure:
- persistence/: SQLAlchemy models, database manager and record stores
- defaults/: Default security data providers
- logging/: structlog adapter
- events/: Event bus adapter
"""
