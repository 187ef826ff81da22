"""
纯文本处理模块
提供文档树与纯文本之间的双向转换功能
"""

from .plain_parser import PlainTextParser
from .plain_converter import PlainTextConverter

__all__ = ['PlainTextParser', 'PlainTextConverter']
