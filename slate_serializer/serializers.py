"""
序列化器入口模块
对外提供 HTML 与纯文本两种格式和文档树之间的转换
"""

from typing import Any, Dict, List, Optional, Union

from slate_serializer.core.html import HTMLConverter, HTMLParser
from slate_serializer.core.plain import PlainTextConverter, PlainTextParser
from slate_serializer.schemas.document import ElementNode
from slate_serializer.schemas.options import HtmlOptions, PlainOptions


class Html:
    """HTML 与文档树的双向转换，每次调用使用独立的分类表"""

    @staticmethod
    def deserializer(
        html: Optional[str],
        options: Optional[Union[HtmlOptions, Dict[str, Any]]] = None
    ) -> List[ElementNode]:
        """
        将HTML转换为文档树

        Args:
            html: HTML片段
            options: elements / block_elements / inline_elements / mark_elements 覆盖项

        Returns:
            List[ElementNode]: 文档树
        """
        return HTMLParser(options).parse_html_to_document(html)

    @staticmethod
    def serializer(value: Any) -> str:
        """将文档树转换为HTML，固定使用默认标签表"""
        return HTMLConverter().convert_to_html(value)


class Plain:
    """纯文本与文档树的双向转换"""

    @staticmethod
    def deserializer(text: Optional[str]) -> List[ElementNode]:
        """将纯文本转换为段落文档"""
        return PlainTextParser().parse_text_to_document(text)

    @staticmethod
    def serializer(
        value: Any,
        options: Optional[Union[PlainOptions, Dict[str, Any]]] = None
    ) -> str:
        """将文档树展平为纯文本"""
        return PlainTextConverter().convert_to_text(value, options)
