"""Rooms module: room types available at resorts."""

from fastapi import APIRouter


router = APIRouter(prefix="/rooms", tags=["rooms"])

from travlr.modules.rooms import routes  # noqa: E402, F401
