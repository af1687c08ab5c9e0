"""
Pydantic schemas for user endpoints.
"""
from imagegen.schemas.common import CamelModel


class UserPublic(CamelModel):
    """Public user record."""
    id: str
    email: str
    credits: int


class MeResponse(CamelModel):
    """Schema for identity response."""
    success: bool = True
    user: UserPublic
