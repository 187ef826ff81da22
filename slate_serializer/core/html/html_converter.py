"""
HTML转换器模块
负责将文档树转换回HTML，始终使用默认分类表
"""

from typing import Any, Dict, Union

from slate_serializer.core.config import settings
from slate_serializer.core.exceptions import UnmappedTypeError
from slate_serializer.core.log_messages import log_messages
from slate_serializer.core.log_utils import get_logger
from slate_serializer.schemas.document import ElementNode, TextLeaf, load_document
from .tables import ELEMENTS

logger = get_logger(__name__)


class HTMLConverter:
    """文档树到HTML的转换器"""

    # 列表类型固定输出规范标签，不依赖反向查找的顺序
    FORCED_TAGS: Dict[str, str] = {
        'orderedList': 'ol',
        'unorderedList': 'ul',
    }

    def __init__(self):
        self.elements = ELEMENTS
        self.max_depth = settings.max_nesting_depth

    def convert_to_html(self, value: Any) -> str:
        """
        将文档转换为HTML

        格式标记不会还原为标签，非默认标签统一输出为表中第一个同类型标签

        Args:
            value: 节点列表，元素可以是模型或字典

        Returns:
            str: HTML字符串，输入不是列表时返回空字符串

        Raises:
            InvalidDocumentError: 节点结构无效
            NestingDepthError: 嵌套深度超过限制
            UnmappedTypeError: 节点类型没有对应标签
        """
        if not isinstance(value, (list, tuple)):
            logger.warning(
                log_messages.DOCUMENT_NOT_SEQUENCE,
                operation="convert_html_not_sequence",
                input_type=type(value).__name__
            )
            return ''

        logger.debug(log_messages.HTML_SERIALIZE_START, operation="convert_html_start", node_count=len(value))

        document = load_document(list(value), self.max_depth)
        html = ''.join(self._serialize_node(node) for node in document)

        logger.debug(log_messages.HTML_SERIALIZE_SUCCESS, operation="convert_html_complete", html_length=len(html))
        return html

    def resolve_tag(self, node_type: str) -> str:
        """
        根据节点类型反查HTML标签

        Args:
            node_type: 节点类型

        Returns:
            str: 标签名

        Raises:
            UnmappedTypeError: 默认表中没有该类型
        """
        forced = self.FORCED_TAGS.get(node_type)
        if forced:
            return forced

        for tag, mapped_type in self.elements.items():
            if mapped_type == node_type:
                return tag

        logger.error(
            log_messages.HTML_UNMAPPED_TYPE,
            operation="resolve_tag_failed",
            node_type=node_type
        )
        raise UnmappedTypeError(node_type)

    def _serialize_node(self, node: Union[ElementNode, TextLeaf]) -> str:
        if isinstance(node, TextLeaf):
            return node.text

        children = ''.join(self._serialize_node(child) for child in node.children)
        tag = self.resolve_tag(node.type)
        return f"<{tag}>{children}</{tag}>"
