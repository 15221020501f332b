"""
自定义异常类
提供更精确的错误处理和异常信息
"""

from typing import Any, Dict, Optional


class BaseApplicationError(Exception):
    """应用基础异常类"""

    default_code: Optional[str] = None

    def __init__(
        self,
        message: str,
        error_code: str = None,
        details: Dict[str, Any] = None
    ):
        self.message = message
        self.error_code = error_code or self.default_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseApplicationError):
    """数据验证异常"""
    default_code = "VALIDATION_ERROR"


class BusinessLogicError(BaseApplicationError):
    """业务逻辑异常"""
    default_code = "BUSINESS_RULE_VIOLATION"


class InvalidRequestError(BusinessLogicError):
    """预约请求无效：未选择日期、日期不满足提前量或餐型未知"""
    default_code = "INVALID_REQUEST"


class NotFoundError(BaseApplicationError):
    """资源不存在"""
    default_code = "RESOURCE_NOT_FOUND"


class ReservationNotFoundError(NotFoundError):
    """预约不存在"""
    default_code = "RESERVATION_NOT_FOUND"


class MenuNotFoundError(NotFoundError):
    """菜单周次或日期不存在"""
    default_code = "MENU_NOT_FOUND"
