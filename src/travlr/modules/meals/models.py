"""Meal database model."""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Numeric, String, Text
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


class Meal(Base, UUIDMixin, CodeMixin, TimestampMixin, AuditMixin):
    """A dish on a resort menu.

    Attributes:
        cuisine: Cuisine label, e.g. "Italian"
        meal_type: One of the MealType values
        price: Price in USD
        ingredients: Ingredient names
        allergens: Allergen names
        vegetarian: Contains no meat or fish
        vegan: Contains no animal products; implies vegetarian
        gluten_free: Contains no gluten
        available: Whether the meal is currently served
        trip_id: Optional trip this meal belongs to
    """

    __tablename__ = "meals"
    __table_args__ = (
        Index("ix_meals_available_type_cuisine", "available", "meal_type", "cuisine"),
    )

    name: Mapped[str] = mapped_column(String(MAX_NAME_LENGTH), nullable=False, index=True)
    cuisine: Mapped[str] = mapped_column(String(100), nullable=False)
    meal_type: Mapped[str] = mapped_column(String(20), nullable=False)
    price: Mapped[float] = mapped_column(Numeric(10, 2, asdecimal=False), nullable=False)
    image: Mapped[str] = mapped_column(String(MAX_IMAGE_LENGTH), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    ingredients: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    allergens: Mapped[list[str]] = mapped_column(JSONType, default=list, nullable=False)
    vegetarian: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    vegan: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    gluten_free: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    available: Mapped[bool] = mapped_column(
        Boolean, default=True, nullable=False, index=True
    )
    trip_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("trips.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<Meal(code={self.code}, name={self.name})>"
