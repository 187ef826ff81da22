"""
统一日志管理模块
提供标准化的结构化日志记录功能
"""

import logging
import sys
from typing import Optional, Dict, Any

from slate_serializer.core.config import settings
from slate_serializer.core.log_messages import log_messages


class UnifiedLogger:
    """统一的日志记录器，提供结构化日志记录功能"""

    def __init__(self, name: str):
        """初始化日志记录器"""
        self.logger = logging.getLogger(name)
        self.name = name

    def _format_extra_data(self, **kwargs: Any) -> Dict[str, Any]:
        """格式化日志额外数据"""
        return log_messages.get_structured_data(
            log_module=self.name,
            **kwargs
        )

    def _render_message(self, message_template: str, **kwargs: Any) -> str:
        """
        渲染日志消息

        只有提供了格式化参数时才进行格式化，避免双重格式化问题；
        格式化失败时使用原始消息
        """
        if not kwargs:
            return message_template
        try:
            return log_messages.format_message(message_template, **kwargs)
        except (KeyError, ValueError, IndexError):
            return message_template

    def info(self, message_template: str, **kwargs: Any) -> None:
        """
        记录信息级别日志

        Args:
            message_template: 日志消息，可以是格式化模板或已格式化的字符串
            **kwargs: 格式化参数（可选）

        示例:
            logger.info("简单消息")
            logger.info("{operation} 完成", operation="解析")
        """
        message = self._render_message(message_template, **kwargs)
        self.logger.info(message, extra=self._format_extra_data(**kwargs))

    def error(self, message_template: str, exception: Optional[Exception] = None, **kwargs: Any) -> None:
        """
        记录错误级别日志

        Args:
            message_template: 日志消息，可以是格式化模板或已格式化的字符串
            exception: 异常对象（可选）
            **kwargs: 格式化参数（可选）
        """
        message = self._render_message(message_template, **kwargs)
        extra_data = self._format_extra_data(**kwargs)

        if exception:
            extra_data.update({
                "exception_type": type(exception).__name__,
                "exception_message": str(exception)
            })
            self.logger.error(message, extra=extra_data, exc_info=exception)
        else:
            self.logger.error(message, extra=extra_data)

    def warning(self, message_template: str, **kwargs: Any) -> None:
        """记录警告级别日志"""
        message = self._render_message(message_template, **kwargs)
        self.logger.warning(message, extra=self._format_extra_data(**kwargs))

    def debug(self, message_template: str, **kwargs: Any) -> None:
        """
        记录调试级别日志

        仅在 settings.app_debug 开启时输出
        """
        if settings.app_debug:
            message = self._render_message(message_template, **kwargs)
            self.logger.debug(message, extra=self._format_extra_data(**kwargs))

    def critical(self, message_template: str, **kwargs: Any) -> None:
        """记录严重错误级别日志"""
        message = self._render_message(message_template, **kwargs)
        self.logger.critical(message, extra=self._format_extra_data(**kwargs))


# 全局日志实例缓存
_loggers_cache: Dict[str, UnifiedLogger] = {}


def get_logger(name: str = __name__) -> UnifiedLogger:
    """
    获取统一的日志记录器

    Args:
        name: 日志记录器名称，默认为当前模块名

    Returns:
        UnifiedLogger实例
    """
    if name not in _loggers_cache:
        _loggers_cache[name] = UnifiedLogger(name)
    return _loggers_cache[name]


def setup_logging() -> None:
    """配置库日志输出（控制台），由调用方按需启用"""
    package_logger = logging.getLogger("slate_serializer")
    log_level = logging.DEBUG if settings.app_debug else getattr(logging, settings.log_level)
    package_logger.setLevel(log_level)

    # 清除现有的处理器
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(settings.log_format))
    package_logger.addHandler(console_handler)

    get_logger(__name__).info(log_messages.OPERATION_SUCCESS, operation_name="日志系统配置")
