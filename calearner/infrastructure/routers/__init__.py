from fastapi import APIRouter

from . import lessons, preferences, purchases, session, tracks

routers: list[APIRouter] = [
    session.router,
    tracks.router,
    lessons.router,
    purchases.router,
    preferences.router,
]

__all__ = ["routers"]
