"""News module: articles, travel tips and announcements."""

from fastapi import APIRouter


router = APIRouter(prefix="/news", tags=["news"])

from travlr.modules.news import routes  # noqa: E402, F401
