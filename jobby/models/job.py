import uuid
from sqlalchemy import Column, String, Float, DateTime, JSON, Uuid, func
from sqlalchemy.dialects.postgresql import JSONB
from jobby.core.database import Base

# Nested documents are stored as JSONB on PostgreSQL and plain JSON elsewhere
JSONDocument = JSON().with_variant(JSONB, "postgresql")


class Job(Base):
    """
    Job model representing a job posting in the catalog.

    `life_at_company` holds {"description", "image_url"} and `skills` holds a
    list of {"name", "image_url"} entries.
    """
    __tablename__ = "jobs"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    title = Column(String, nullable=False, index=True)
    company_logo_url = Column(String, nullable=True)
    rating = Column(Float, default=0, nullable=False)
    job_description = Column(String, nullable=False)
    location = Column(String, nullable=False)
    employment_type = Column(String, nullable=False)
    package_per_annum = Column(String, nullable=False)
    company_website_url = Column(String, default="", nullable=False)

    life_at_company = Column(JSONDocument, nullable=False, default=lambda: {"description": "", "image_url": ""})
    skills = Column(JSONDocument, nullable=False, default=list)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Job(id={self.id}, title='{self.title}')>"
