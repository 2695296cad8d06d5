"""Entries API package."""

from bagelbot.api.entries.routes import router

__all__ = ["router"]
