"""Application-wide constants.

This module defines constants used throughout the application
to avoid magic numbers and ensure consistency.
"""

from enum import StrEnum
from typing import Literal


# Resource codes
MIN_CODE_LENGTH = 3
MAX_CODE_LENGTH = 20

# String field lengths
MAX_EMAIL_LENGTH = 255
MIN_NAME_LENGTH = 2
MAX_NAME_LENGTH = 200
MIN_TITLE_LENGTH = 3
MIN_NEWS_TITLE_LENGTH = 5
MAX_SUMMARY_LENGTH = 500
MAX_IMAGE_LENGTH = 500
MAX_IPV6_LENGTH = 45

# Password requirements
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 128
BCRYPT_ROUNDS = 12

# Pagination defaults
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100

# Token settings
ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"

# Secret key requirements
MIN_SECRET_KEY_LENGTH = 32
DEFAULT_INSECURE_SECRET = "change-me-in-production"

# Allowed values
RoomType = Literal["Single", "Double", "Twin", "Suite", "Deluxe", "Family"]
MealType = Literal["Breakfast", "Lunch", "Dinner", "Snack", "Dessert"]
NewsCategory = Literal[
    "Travel Tips",
    "Destination Guide",
    "Company News",
    "Special Offers",
    "Events",
    "General",
]


class Role(StrEnum):
    """User roles used for role-based access control."""

    USER = "user"
    ADMIN = "admin"
