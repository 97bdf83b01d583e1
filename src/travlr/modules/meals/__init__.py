"""Meals module: resort dining menus."""

from fastapi import APIRouter


router = APIRouter(prefix="/meals", tags=["meals"])

from travlr.modules.meals import routes  # noqa: E402, F401
