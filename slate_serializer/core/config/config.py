"""
应用配置管理模块
统一管理序列化器的运行配置，支持通过环境变量覆盖
"""

import logging

from pydantic import field_validator, ConfigDict
from pydantic_settings import BaseSettings

# 转换过程逐层递归，深度上限保证不超过解释器默认递归限制
MAX_NESTING_DEPTH_LIMIT = 256


class Settings(BaseSettings):
    """序列化器配置类 - 统一管理所有配置信息"""

    # ==================== 基础配置 ====================
    app_debug: bool = False

    # ==================== 日志配置 ====================
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # ==================== 转换配置 ====================
    # 文档树最大嵌套深度，超过时抛出 NestingDepthError
    max_nesting_depth: int = MAX_NESTING_DEPTH_LIMIT
    plain_text_delimiter: str = "\n"

    # ==================== 验证器 ====================
    @field_validator("max_nesting_depth")
    @classmethod
    def check_nesting_depth(cls, value: int) -> int:
        """嵌套深度必须在 1 到 MAX_NESTING_DEPTH_LIMIT 之间"""
        if not 0 < value <= MAX_NESTING_DEPTH_LIMIT:
            raise ValueError(f"max_nesting_depth 必须在 1 到 {MAX_NESTING_DEPTH_LIMIT} 之间")
        return value

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        """统一日志级别为大写并校验"""
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"未知的日志级别: {value}")
        return level

    model_config = ConfigDict(
        env_prefix="SLATE_SERIALIZER_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True
    )


def get_settings() -> Settings:
    """获取配置实例"""
    return Settings()


# 全局配置实例
settings = get_settings()
