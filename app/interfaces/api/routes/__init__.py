from fastapi import FastAPI

from .permissions import router as permissions_router
from .roles import router as roles_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(users_router)
    app.include_router(roles_router)
    app.include_router(permissions_router)
