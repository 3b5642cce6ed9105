from typing import Optional

from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    id: str
    name: str
    email: str
    image: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            image=user.image,
        )
