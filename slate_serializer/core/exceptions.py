"""
序列化异常定义
定义转换模块中使用的所有异常类型
"""

from typing import Any, Dict, Optional


class SerializerError(Exception):
    """
    序列化操作基础异常

    所有转换相关异常的基类。

    Attributes:
        message: 错误消息
        code: 错误码
        details: 错误详情
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class ConfigurationError(SerializerError):
    """分类表或选项配置错误"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="CONFIG_ERROR", details=details)


class UnmappedTypeError(SerializerError):
    """节点类型在序列化表中没有对应标签"""

    def __init__(self, node_type: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            f"节点类型 '{node_type}' 没有对应的HTML标签",
            code="NO_TAG_MAPPING",
            details=details
        )
        self.node_type = node_type


class InvalidDocumentError(SerializerError):
    """文档结构无效"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, code="INVALID_DOCUMENT", details=details)


class NestingDepthError(SerializerError):
    """文档嵌套过深"""

    def __init__(self, max_depth: int, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(
            f"嵌套深度超过限制 {max_depth}",
            code="NESTING_TOO_DEEP",
            details=details
        )
        self.max_depth = max_depth


__all__ = [
    'SerializerError',
    'ConfigurationError',
    'UnmappedTypeError',
    'InvalidDocumentError',
    'NestingDepthError',
]
