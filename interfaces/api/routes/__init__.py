"""
REST API 路由

定义 REST API 端点。
"""

from interfaces.api.routes.messages import router as messages_router
from interfaces.api.routes.seed import router as seed_router
from interfaces.api.routes.users import router as users_router

__all__ = ["messages_router", "seed_router", "users_router"]
