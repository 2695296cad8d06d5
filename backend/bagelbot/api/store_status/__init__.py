"""Store status API package."""

from bagelbot.api.store_status.routes import router

__all__ = ["router"]
