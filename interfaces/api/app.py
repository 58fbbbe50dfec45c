"""
FastAPI 应用工厂

创建 FastAPI 应用，挂载 DI 容器和路由；应用关闭时释放持久化资源。
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from domain.common.exceptions import PersistenceReadException, StorageClosedException
from infrastructure.config.settings import Settings, get_settings
from infrastructure.containers import Bootstrap, bootstrap
from interfaces.api.errors import (
    http_exception_handler,
    storage_exception_handler,
    validation_exception_handler,
)
from interfaces.api.routes import messages_router, seed_router, users_router


def create_app(
    settings: Optional[Settings] = None,
    boot: Optional[Bootstrap] = None,
) -> FastAPI:
    """
    创建 FastAPI 应用

    Args:
        settings: 可选的配置，不提供时使用 get_settings()
        boot: 可选的已装配容器（测试时注入），不提供时按 settings 创建

    Returns:
        FastAPI 应用
    """
    settings = settings or get_settings()
    boot = boot or bootstrap(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            yield
        finally:
            boot.shutdown()

    app = FastAPI(
        title=settings.app_name,
        description="邮件中转服务 - 用户目录与邮件存储",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = boot.app
    app.state.bootstrap = boot

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(PersistenceReadException, storage_exception_handler)
    app.add_exception_handler(StorageClosedException, storage_exception_handler)

    app.include_router(users_router, prefix="/api")
    app.include_router(messages_router, prefix="/api")
    app.include_router(seed_router, prefix="/api")

    @app.get("/health")
    async def health():
        """健康检查"""
        return {"status": "healthy"}

    return app
