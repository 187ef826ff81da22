"""
HTML处理模块
提供文档树与HTML之间的双向转换功能
"""

from .html_parser import HTMLParser
from .html_converter import HTMLConverter
from .tables import (
    ELEMENTS,
    BLOCK_ELEMENTS,
    INLINE_ELEMENTS,
    MARK_ELEMENTS,
    Label,
    Hook,
    ClassificationTables,
)

__all__ = [
    'HTMLConverter',
    'HTMLParser',
    'ELEMENTS',
    'BLOCK_ELEMENTS',
    'INLINE_ELEMENTS',
    'MARK_ELEMENTS',
    'Label',
    'Hook',
    'ClassificationTables',
]
