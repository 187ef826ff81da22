"""
转换选项数据模型
"""

from typing import Any, Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from slate_serializer.core.config import settings


class HtmlOptions(BaseModel):
    """HTML反序列化选项，四张分类表各自可选，缺省时使用默认表"""
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True, frozen=True)

    elements: Optional[Dict[str, Any]] = Field(
        default=None,
        description="标签（可拼接type属性）到节点类型的映射，值为字符串或 Label/Hook 规则"
    )
    block_elements: Optional[FrozenSet[str]] = Field(default=None, description="块级标签集合")
    inline_elements: Optional[FrozenSet[str]] = Field(default=None, description="行内标签集合")
    mark_elements: Optional[Dict[str, str]] = Field(default=None, description="标签到格式标记的映射")


class PlainOptions(BaseModel):
    """纯文本序列化选项"""
    model_config = ConfigDict(extra="ignore", frozen=True)

    delimiter: str = Field(
        default_factory=lambda: settings.plain_text_delimiter,
        description="节点之间的分隔符"
    )
