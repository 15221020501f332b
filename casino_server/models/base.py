"""
基础数据模型
定义通用的模型基类和常用字段
"""

from pydantic import BaseModel, ConfigDict, Field


class BaseEntity(BaseModel):
    """基础实体模型，创建后不可修改，状态变化通过生成新值实现"""

    model_config = ConfigDict(from_attributes=True, frozen=True)


class PaginationParams(BaseModel):
    """分页参数"""
    page: int = Field(default=1, ge=1, description="页码")
    size: int = Field(default=10, ge=1, le=100, description="每页大小")

    @property
    def offset(self) -> int:
        """计算偏移量"""
        return (self.page - 1) * self.size
