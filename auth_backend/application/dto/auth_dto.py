from typing import ClassVar, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class _RequiredFieldsRequest(BaseModel):
    """Base for auth requests whose string fields must be present and non-blank"""
    model_config = ConfigDict(extra="ignore")

    # (attribute, label) pairs, checked in order
    REQUIRED_FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = ()

    def missing_fields(self) -> List[str]:
        """Labels of required fields that are absent or whitespace-only"""
        missing = []
        for attribute, label in self.REQUIRED_FIELDS:
            value = getattr(self, attribute)
            if value is None or not value.strip():
                missing.append(label)
        return missing


class SignupRequest(_RequiredFieldsRequest):
    """DTO for user registration request"""
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    image: Optional[str] = None

    REQUIRED_FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("name", "Name"),
        ("email", "Email"),
        ("password", "Password"),
    )


class LoginRequest(_RequiredFieldsRequest):
    """DTO for user login request"""
    email: Optional[str] = None
    password: Optional[str] = None

    REQUIRED_FIELDS: ClassVar[Tuple[Tuple[str, str], ...]] = (
        ("email", "Email"),
        ("password", "Password"),
    )
