from typing import Optional

from pydantic import BaseModel

from .user_dto import UserResponse


class ApiResponse(BaseModel):
    """Envelope used for every auth response"""
    message: str
    data: Optional[UserResponse] = None
