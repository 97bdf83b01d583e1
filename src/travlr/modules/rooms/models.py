"""Room database model."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travlr.core.constants import MAX_IMAGE_LENGTH, MAX_NAME_LENGTH
from travlr.core.database import (
    AuditMixin,
    Base,
    CodeMixin,
    JSONType,
    TimestampMixin,
    UUIDMixin,
)


class Room(Base, UUIDMixin, CodeMixin, TimestampMixin, AuditMixin):
    """A room type offered at a resort.

    Attributes:
        type: One of the RoomType values
        beds: Number of beds
        max_occupancy: Guests allowed, never fewer than beds
        price_per_night: Nightly rate in USD
        amenities: Free-form amenity labels
        available: Whether the room can currently be booked
        trip_id: Optional trip this room belongs to
    """

    __tablename__ = "rooms"
    __table_args__ = (
        Index("ix_rooms_available_type_price", "available", "type", "price_per_night"),
    )

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, index=True)
    type: Mapped[str] = mapped_column(String(20), nullable=False)
    beds: Mapped[int] = mapped_column(Integer, nullable=False)
    max_occupancy: Mapped[int] = mapped_column(Integer, nullable=False)
    price_per_night: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
    )
    image: Mapped[str] = mapped_column(String(MAX_IMAGE_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amenities: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    available: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, index=True
    )
    trip_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("trips.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Room(code={self.code}, type={self.type})>"
