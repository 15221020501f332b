from typing import Any, Dict
from pydantic import BaseModel, Field

class ErrorResponse(BaseModel):
    """错误响应格式"""
    success: bool = Field(False, description="请求失败")
    error_code: str = Field(description="错误码")
    message: str = Field(description="错误消息")
    details: Dict[str, Any] = Field(default_factory=dict, description="错误详情")

    model_config = {
        "json_schema_extra": {
            "example": {
                "success": False,
                "error_code": "INVALID_REQUEST",
                "message": "预约需至少提前48小时",
                "details": {"ineligible_dates": ["2024-01-02"], "lead_time_hours": 48}
            }
        }
    }
