"""
时钟依赖
所有与时间相关的计算都显式接收 now，由此处统一提供墙上时间
"""

from datetime import datetime
from zoneinfo import ZoneInfo
from ..config.settings import settings


def system_now() -> datetime:
    """食堂所在时区的当前时间"""
    return datetime.now(ZoneInfo(settings.timezone))


def get_now() -> datetime:
    """FastAPI依赖：一次请求内使用同一个 now"""
    return system_now()
