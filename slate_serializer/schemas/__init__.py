"""
数据模型模块
"""

from .document import (
    PARAGRAPH_TYPE,
    IMAGE_TYPE,
    TextLeaf,
    ElementNode,
    DocNode,
    Document,
    empty_paragraph,
    load_document,
    dump_document,
)
from .options import HtmlOptions, PlainOptions

__all__ = [
    'PARAGRAPH_TYPE',
    'IMAGE_TYPE',
    'TextLeaf',
    'ElementNode',
    'DocNode',
    'Document',
    'empty_paragraph',
    'load_document',
    'dump_document',
    'HtmlOptions',
    'PlainOptions',
]
