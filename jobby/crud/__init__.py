"""
CRUD operations (Create, Read, Update, Delete) for database models.

This layer provides a clean separation between API routes and database operations,
following the Repository pattern.
"""

from jobby.crud import user, job, feedback

__all__ = ["user", "job", "feedback"]
