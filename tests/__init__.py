"""Test suite for the security store.

Test structure:
- unit/: Unit tests - isolated logic with mocked collaborators
- integration/: Integration tests - real SQLite database through aiosqlite
"""
