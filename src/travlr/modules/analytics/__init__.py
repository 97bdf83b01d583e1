"""Analytics module: aggregate reports over trips, rooms and meals."""

from fastapi import APIRouter


router = APIRouter(prefix="/analytics", tags=["analytics"])

from travlr.modules.analytics import routes  # noqa: E402, F401
