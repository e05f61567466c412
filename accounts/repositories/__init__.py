"""
Persistence adapters.

Services depend on the repository methods, never on SQLAlchemy sessions.
"""
