"""User profile API schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """User profile (read-only; profiles are managed by the auth provider)."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    tenant_id: str
    email: str
    full_name: str | None
    role: str
    is_active: bool
    avatar_url: str | None = None
