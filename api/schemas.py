"""
Pydantic response models for the PC Catalog API
"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response model"""
    error: str


class HealthResponse(BaseModel):
    status: str
    components: int
    uptime: float
