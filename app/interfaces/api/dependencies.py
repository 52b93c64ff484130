"""Shared dependencies for API routes."""

from fastapi import Request

from app.config import Settings


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""

    return request.app.state.settings


__all__ = ["get_app_settings"]
