"""
Database models package.

Exports:
  - SessionModel: Session ORM model

Dependencies: sqlalchemy, chat_backend.boundary.db.base
System role: Database model definitions for domain entities
"""

from chat_backend.boundary.db.models.session_model import SessionModel

__all__ = ["SessionModel"]
