"""
Database base module - imports all models for Alembic migration detection.

The imports appear unused, but registering every model on Base.metadata is
what lets autogenerate see them.
"""

from app.projects.models.project import Project, ProjectLink, Version
from app.transactions.models.transaction import Transaction

__all__ = [
    "Project",
    "ProjectLink",
    "Version",
    "Transaction",
]
