"""Trip database model."""

from datetime import datetime

from sqlalchemy import DateTime, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travlr.core.constants import MAX_IMAGE_LENGTH, MAX_NAME_LENGTH
from travlr.core.database import AuditMixin, Base, CodeMixin, TimestampMixin, UUIDMixin


class Trip(Base, UUIDMixin, CodeMixin, TimestampMixin, AuditMixin):
    """A bookable trip package.

    Attributes:
        code: Unique upper-case trip code
        name: Trip title
        length: Duration in days
        start: Departure date and time
        resort: Resort or hotel name
        per_person: Price per person in USD
        image: Image URL or path
        description: Long-form description
    """

    __tablename__ = "trips"
    __table_args__ = (Index("ix_trips_start_resort", "start", "resort"),)

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, index=True)
    length: Mapped[int] = mapped_column(Integer, nullable=False)
    start: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    resort: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False)
    per_person: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False),
        nullable=False,
    )
    image: Mapped[str] = mapped_column(String(MAX_IMAGE_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Trip(code={self.code}, name={self.name})>"
