"""Demo catalogue data for development databases."""

from datetime import timedelta
from typing import Any

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from travlr.core.database import utcnow
from travlr.modules.meals.repos import MealRepository
from travlr.modules.meals.schemas import MealCreate
from travlr.modules.meals.services import MealService
from travlr.modules.news.repos import NewsRepository
from travlr.modules.news.schemas import NewsCreate
from travlr.modules.news.services import NewsService
from travlr.modules.rooms.repos import RoomRepository
from travlr.modules.rooms.schemas import RoomCreate
from travlr.modules.rooms.services import RoomService
from travlr.modules.trips.repos import TripRepository
from travlr.modules.trips.schemas import TripCreate
from travlr.modules.trips.services import TripService
from travlr.modules.users.models import User


logger = structlog.get_logger()


def _trips() -> list[dict[str, Any]]:
    now = utcnow()
    return [
        {
            "code": "GALR210214",
            "name": "Gale Reef",
            "length": 4,
            "start": now + timedelta(days=30),
            "resort": "Emerald Bay, 3 stars",
            "perPerson": "799.00",
            "image": "images/reef1.jpg",
            "description": "Four nights of reef diving off the Emerald Bay coast.",
        },
        {
            "code": "DAWR210315",
            "name": "Dawson's Reef",
            "length": 4,
            "start": now + timedelta(days=60),
            "resort": "Blue Lagoon, 4 stars",
            "perPerson": "1,199.00",
            "image": "images/reef2.jpg",
            "description": "Guided snorkelling tours with lagoon-side accommodation.",
        },
        {
            "code": "CLAR210621",
            "name": "Claire's Reef",
            "length": 4,
            "start": now + timedelta(days=90),
            "resort": "Coral Sands, 5 stars",
            "perPerson": "$1,999.00",
            "image": "images/reef3.jpg",
            "description": "A luxury stay with private beach access and daily dives.",
        },
    ]


ROOMS: list[dict[str, Any]] = [
    {
        "code": "DLX01",
        "name": "Deluxe Ocean View",
        "type": "Deluxe",
        "beds": 2,
        "maxOccupancy": 4,
        "pricePerNight": "299.00",
        "image": "images/room1.jpg",
        "description": "Spacious deluxe room with ocean views and a private balcony.",
        "amenities": ["WiFi", "AC", "TV", "Mini Bar", "Safe", "Balcony"],
    },
    {
        "code": "STE01",
        "name": "Presidential Suite",
        "type": "Suite",
        "beds": 3,
        "maxOccupancy": 6,
        "pricePerNight": "599.00",
        "image": "images/room2.jpg",
        "description": "Suite with a separate living area and panoramic views.",
        "amenities": ["WiFi", "AC", "TV", "Mini Bar", "Jacuzzi", "Butler Service"],
    },
]

MEALS: list[dict[str, Any]] = [
    {
        "code": "MLT01",
        "name": "Mediterranean Feast",
        "cuisine": "Mediterranean",
        "mealType": "Dinner",
        "price": "45.00",
        "image": "images/meal1.jpg",
        "description": "Fresh seafood, grilled vegetables and aromatic herbs.",
        "ingredients": ["Fish", "Olive Oil", "Vegetables", "Herbs"],
        "allergens": ["Fish"],
    },
    {
        "code": "BRK01",
        "name": "Continental Breakfast",
        "cuisine": "International",
        "mealType": "Breakfast",
        "price": "25.00",
        "image": "images/meal2.jpg",
        "description": "Pastries, fresh fruit, yoghurt and coffee.",
        "ingredients": ["Bread", "Fruit", "Yoghurt", "Coffee"],
        "allergens": ["Gluten", "Dairy"],
        "vegetarian": True,
    },
]

NEWS: list[dict[str, Any]] = [
    {
        "code": "NEWS01",
        "title": "New Destinations for Summer",
        "category": "Company News",
        "image": "images/news1.jpg",
        "summary": "Three new reef resorts join the catalogue this summer.",
        "content": "We are adding Gale Reef, Dawson's Reef and Claire's Reef "
        "to our summer programme, each with guided dives and beach access.",
        "tags": ["destinations", "summer"],
        "featured": True,
    },
    {
        "code": "NEWS02",
        "title": "Travel Safety Tips",
        "category": "Travel Tips",
        "image": "images/news2.jpg",
        "summary": "How to stay safe and healthy on your next trip.",
        "content": "Keep copies of your documents, register with your embassy "
        "and check local health advice before you travel.",
        "tags": ["safety", "tips"],
    },
]


async def seed_catalogue(session: AsyncSession, author: User) -> dict[str, int]:
    """Insert the demo catalogue, skipping codes that already exist.

    Args:
        session: Open database session; the caller commits
        author: User credited with the demo news articles

    Returns:
        Number of rows inserted per resource
    """
    counts = {"trips": 0, "rooms": 0, "meals": 0, "news": 0}

    trips = TripService(TripRepository(session))
    for data in _trips():
        if await trips.repo.get_by_code(data["code"]) is None:
            await trips.create(TripCreate.model_validate(data))
            counts["trips"] += 1

    rooms = RoomService(RoomRepository(session))
    for data in ROOMS:
        if await rooms.repo.get_by_code(data["code"]) is None:
            await rooms.create(RoomCreate.model_validate(data))
            counts["rooms"] += 1

    meals = MealService(MealRepository(session))
    for data in MEALS:
        if await meals.repo.get_by_code(data["code"]) is None:
            await meals.create(MealCreate.model_validate(data))
            counts["meals"] += 1

    news = NewsService(NewsRepository(session))
    for data in NEWS:
        if await news.repo.get_by_code(data["code"]) is None:
            await news.create(
                NewsCreate.model_validate(data),
                author_id=author.id,
                author_name=author.name,
            )
            counts["news"] += 1

    logger.info("catalogue_seeded", **counts)
    return counts
