from pydantic_settings import BaseSettings
from typing import Optional
import os


class Settings(BaseSettings):
    # API配置
    api_title: str = "Casino USM API"
    api_version: str = "1.0.0"
    api_prefix: str = "/api/v1"

    # 预约规则
    lead_time_hours: int = 48  # 最少提前预约小时数
    timezone: str = "America/Santiago"
    calendar_max_days: int = 62

    # 会话上限：超出时淘汰最久未访问的会话，每个会话只保留最近的操作日志
    max_sessions: int = 1000
    max_session_logs: int = 500

    # 日志
    log_level: str = "INFO"

    # 开发模式
    debug: bool = False

    # 菜单数据文件，为空时使用包内 data/menus.json
    menu_file: Optional[str] = None

    class Config:
        env_file = ".env"
        case_sensitive = False


def load_settings(env: Optional[str] = None) -> Settings:
    """按运行环境加载配置，APP_ENV=development 时启用开发配置"""
    env = env or os.getenv("APP_ENV", "production")
    if env == "development":
        from .environments.development import DevelopmentSettings
        return DevelopmentSettings()
    return Settings()


# 全局设置实例
settings = load_settings()
