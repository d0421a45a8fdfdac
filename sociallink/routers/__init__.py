"""Aggregate router exports."""
from .calls import router as calls_router
from .follows import router as follows_router
from .friends import router as friends_router
from .groups import router as groups_router
from .messages import router as messages_router
from .notifications import router as notifications_router
from .profiles import router as profiles_router
from .realtime import router as realtime_router

__all__ = [
    "calls_router",
    "follows_router",
    "friends_router",
    "groups_router",
    "messages_router",
    "notifications_router",
    "profiles_router",
    "realtime_router",
]
