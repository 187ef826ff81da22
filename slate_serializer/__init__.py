"""
slate-serializer
HTML、纯文本与编辑器文档树之间的转换
"""

from slate_serializer.core.exceptions import (
    SerializerError,
    ConfigurationError,
    UnmappedTypeError,
    InvalidDocumentError,
    NestingDepthError,
)
from slate_serializer.core.html import Label, Hook
from slate_serializer.schemas import (
    TextLeaf,
    ElementNode,
    HtmlOptions,
    PlainOptions,
    load_document,
    dump_document,
)
from slate_serializer.serializers import Html, Plain

__all__ = [
    'Html',
    'Plain',
    'Label',
    'Hook',
    'TextLeaf',
    'ElementNode',
    'HtmlOptions',
    'PlainOptions',
    'load_document',
    'dump_document',
    'SerializerError',
    'ConfigurationError',
    'UnmappedTypeError',
    'InvalidDocumentError',
    'NestingDepthError',
]
