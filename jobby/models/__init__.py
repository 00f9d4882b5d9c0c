"""
Database models package.
"""

from jobby.models.user import User
from jobby.models.job import Job
from jobby.models.feedback import Feedback

__all__ = ["User", "Job", "Feedback"]
