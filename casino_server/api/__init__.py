"""
API routes and endpoints.
"""

from fastapi import APIRouter
from .v1 import calendar, logs, menus, reservations, selection, session

api_router = APIRouter()

# 包含所有v1路由
api_router.include_router(calendar.router, prefix="/calendar", tags=["日历"])
api_router.include_router(selection.router, prefix="/selection", tags=["日期选择"])
api_router.include_router(reservations.router, prefix="/reservations", tags=["预约"])
api_router.include_router(menus.router, prefix="/menus", tags=["菜单"])
api_router.include_router(logs.router, prefix="/logs", tags=["日志"])
api_router.include_router(session.router, prefix="/session", tags=["会话"])
