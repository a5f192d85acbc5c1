"""SQLAlchemy models exposed by the backend."""
from .base import Base, ExternalBase
from .employee import Employee
from .user import User

__all__ = ["Base", "Employee", "ExternalBase", "User"]
