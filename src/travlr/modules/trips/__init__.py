"""Trips module: the trip package catalogue."""

from fastapi import APIRouter


router = APIRouter(prefix="/trips", tags=["trips"])

from travlr.modules.trips import routes  # noqa: E402, F401
