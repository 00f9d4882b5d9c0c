from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import datetime
from uuid import UUID


class LifeAtCompany(BaseModel):
    description: str = ""
    image_url: str = ""


class Skill(BaseModel):
    name: str = ""
    image_url: str = ""


class JobCreateRequest(BaseModel):
    """Schema for creating a job posting"""
    title: str = Field(..., min_length=1, max_length=200)
    company_logo_url: Optional[str] = None
    rating: float = 0
    job_description: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    employment_type: str = Field(..., min_length=1)
    package_per_annum: str = Field(..., min_length=1)
    company_website_url: str = ""
    life_at_company: LifeAtCompany = Field(default_factory=LifeAtCompany)
    skills: List[Skill] = Field(default_factory=list)


class JobSummaryResponse(BaseModel):
    """Summary projection used by the job list"""
    id: UUID
    title: str
    company_logo_url: Optional[str] = None
    rating: float
    job_description: str
    location: str
    employment_type: str
    package_per_annum: str

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class JobResponse(JobSummaryResponse):
    """Full job record"""
    company_website_url: str
    life_at_company: LifeAtCompany
    skills: List[Skill]
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class JobCreateResponse(BaseModel):
    message: str
    job: JobResponse


class JobBulkCreateResponse(BaseModel):
    message: str
    jobs: List[JobResponse]


class JobDeleteResponse(BaseModel):
    message: str
    job: JobResponse
