"""User database models."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travlr.core.constants import MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, Role
from travlr.core.database.base import AuditMixin, Base, TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin, AuditMixin):
    """User model representing an account of the admin console.

    Attributes:
        email: Unique, lower-cased email address
        name: Display name, copied into access token claims
        role: "user" or "admin"; gates write endpoints
        password_hash: Bcrypt-hashed password
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(MAX_EMAIL_LENGTH),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(20),
        default=Role.USER.value,
        nullable=False,
        index=True,
    )
    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )
    schema_version: Mapped[int] = mapped_column(
        Integer,
        default=1,
        nullable=False,
    )

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
