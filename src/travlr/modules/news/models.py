"""News article database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from travlr.core.constants import MAX_IMAGE_LENGTH, MAX_NAME_LENGTH, MAX_SUMMARY_LENGTH
from travlr.core.database import (
    AuditMixin,
    Base,
    CodeMixin,
    JSONType,
    TimestampMixin,
    UUIDMixin,
    utcnow,
)


class News(Base, UUIDMixin, CodeMixin, TimestampMixin, AuditMixin):
    """A news article or travel tip.

    Attributes:
        title: Headline
        category: One of the NewsCategory values
        author_id: User who wrote the article
        author_name: Author's name at the time of writing
        publish_date: Publication time; listings are ordered by it
        summary: Short excerpt, distinct from the content
        content: Full article body
        tags: Free-form labels
        featured: Highlighted on the landing page
        published: Visible in public listings
        trip_id: Optional trip the article promotes
    """

    __tablename__ = "news"
    __table_args__ = (
        Index("ix_news_published_publish_date", "published", "publish_date"),
        Index("ix_news_category_publish_date", "category", "publish_date"),
    )

    title: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, index=True)
    category: Mapped[str] = mapped_column(String(50), nullable=False)
    author_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    author_name: Mapped[str | None] = mapped_column(String(MAX_NAME_LENGTH), nullable=True)
    publish_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        index=True,
    )
    image: Mapped[str] = mapped_column(String(MAX_IMAGE_LENGTH), nullable=False)
    summary: Mapped[str] = mapped_column(String(MAX_SUMMARY_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    tags: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    featured: Mapped[bool] = mapped_column(
        Boolean, default=False, nullable=False, index=True
    )
    published: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, index=True
    )
    trip_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("trips.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<News(code={self.code}, title={self.title})>"
