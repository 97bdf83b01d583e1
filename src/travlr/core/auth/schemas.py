"""Authentication schemas for token handling."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from travlr.core.constants import ACCESS_TOKEN_TYPE, Role


class TokenClaims(BaseModel):
    """Claims decoded from a JWT.

    Attributes:
        user_id: The user's UUID (``sub`` claim)
        email: The user's email
        name: The user's display name (access tokens only)
        role: The user's role (access tokens only)
        type: Token type, "access" or "refresh"
        exp: Token expiration time
    """

    model_config = ConfigDict(populate_by_name=True)

    user_id: UUID = Field(validation_alias="sub")
    email: str
    name: str | None = None
    role: Role | None = None
    type: str = ACCESS_TOKEN_TYPE
    exp: datetime

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN
