from pydantic import BaseModel


class BulkDeleteResponse(BaseModel):
    """Response for the delete-all endpoints."""
    message: str
    deletedCount: int
