"""
配置模块
包含序列化器所有配置信息
"""

from slate_serializer.core.config.config import MAX_NESTING_DEPTH_LIMIT, Settings, settings, get_settings

__all__ = ["MAX_NESTING_DEPTH_LIMIT", "Settings", "settings", "get_settings"]
