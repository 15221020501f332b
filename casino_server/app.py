"""
Casino USM 午餐预约后端服务 - 主应用入口
提供午餐预约系统的会话级API服务

主要功能模块：
- 可预约日期判定（至少提前48小时）
- 多日期暂存选择
- 预约批量创建、取消和查询
- 每周菜单查询
- 会话操作日志

技术栈：FastAPI + Pydantic，状态仅保存在内存中
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException
from contextlib import asynccontextmanager

from .core.exceptions import BaseApplicationError
from .core.error_handler import (
    application_error_handler,
    http_exception_handler,
    validation_exception_handler,
    general_exception_handler
)
from .core.session import session_store
from .config.settings import settings
from .api import api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """应用生命周期管理"""
    logger.info("%s %s started, lead time %sh", settings.api_title,
                settings.api_version, settings.lead_time_hours)

    yield

    logger.info("Shutting down, dropping %d sessions", len(session_store))
    session_store.clear()


def configure_logging() -> None:
    """按配置设置日志级别"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """创建FastAPI应用"""
    configure_logging()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        description="Casino USM 午餐预约系统API",
        debug=settings.debug,
        lifespan=lifespan
    )

    # 添加中间件
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 注册异常处理器
    app.add_exception_handler(BaseApplicationError, application_error_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    # 注册路由
    app.include_router(api_router, prefix=settings.api_prefix)

    # 健康检查
    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "version": settings.api_version,
            "sessions": len(session_store)
        }

    @app.get("/")
    async def root():
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "description": "Casino USM 午餐预约系统API"
        }

    return app

# 应用实例
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
