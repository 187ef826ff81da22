"""
HTML解析器模块
负责将HTML片段转换为编辑器使用的文档树
"""

from typing import Any, Dict, List, Optional, Union

from bs4 import Tag
from bs4.element import PageElement

from slate_serializer.core.config import settings
from slate_serializer.core.exceptions import NestingDepthError
from slate_serializer.core.log_messages import log_messages
from slate_serializer.core.log_utils import get_logger
from slate_serializer.schemas.document import (
    IMAGE_TYPE,
    ElementNode,
    TextLeaf,
    empty_paragraph,
)
from slate_serializer.schemas.options import HtmlOptions
from .parsers import FragmentLoader, ElementClassifier, ChildKind
from .html_utils import extract_text, is_content
from .tables import ClassificationTables, ElementRule

logger = get_logger(__name__)


class HTMLParser:
    """
    HTML到文档树的解析器

    分类表在构造时确定且只读，同一实例可在多线程间共享
    """

    def __init__(self, options: Optional[Union[HtmlOptions, Dict[str, Any]]] = None):
        """
        初始化解析器

        Args:
            options: 分类表覆盖项，未提供的表使用默认值
        """
        self.tables = ClassificationTables.from_options(options)
        self.classifier = ElementClassifier(self.tables)
        self.fragment_loader = FragmentLoader()
        self.max_depth = settings.max_nesting_depth

    def parse_html_to_document(self, html: Optional[str]) -> List[ElementNode]:
        """
        解析HTML片段为文档树

        Args:
            html: HTML片段，为空时返回只含空段落的文档

        Returns:
            List[ElementNode]: 顶层节点列表

        Raises:
            NestingDepthError: 嵌套深度超过限制
        """
        if html is None or html == '':
            logger.debug(log_messages.HTML_EMPTY_INPUT, operation="parse_html_empty")
            return [empty_paragraph()]

        if not isinstance(html, str):
            logger.warning(
                log_messages.HTML_INVALID_INPUT,
                operation="parse_html_invalid",
                input_type=type(html).__name__
            )
            return [empty_paragraph()]

        logger.debug(log_messages.HTML_DESERIALIZE_START, operation="parse_html_start", html_length=len(html))

        document = [self.element_to_node(root) for root in self.fragment_loader.load(html)]

        logger.debug(
            log_messages.HTML_DESERIALIZE_SUCCESS,
            operation="parse_html_complete",
            node_count=len(document)
        )
        return document

    def element_to_node(self, element: Tag, depth: int = 1) -> ElementNode:
        """
        将块级元素转换为容器节点

        Args:
            element: BeautifulSoup元素
            depth: 当前嵌套深度

        Returns:
            ElementNode: 容器节点
        """
        self._check_depth(depth)
        rule = self.classifier.resolve_rule(element)

        children: List[Union[ElementNode, TextLeaf]] = []
        for child in element.contents:
            kind = self.classifier.classify(child)
            if kind is ChildKind.BLOCK:
                children.append(self.element_to_node(child, depth + 1))
            elif kind is ChildKind.INLINE:
                children.append(self.element_to_inline(child, depth + 1))
            elif kind is ChildKind.TEXT_RUN:
                children.extend(self.element_to_texts(child))

        return self._build_node(rule, children, element)

    def element_to_inline(self, element: Tag, depth: int = 1) -> ElementNode:
        """将行内元素转换为只含文本叶子的容器节点"""
        self._check_depth(depth)
        rule = self.classifier.resolve_rule(element)

        children: List[Union[ElementNode, TextLeaf]] = []
        for child in element.contents:
            children.extend(self.element_to_texts(child))

        return self._build_node(rule, children, element)

    def element_to_texts(self, node: PageElement) -> List[TextLeaf]:
        """
        将文本片段转换为叶子列表

        元素的每个直接子节点生成一个叶子，并带上该元素自身的格式标记；
        文本节点直接生成一个叶子
        """
        if isinstance(node, Tag):
            mark = self.classifier.resolve_mark(node)
            return [self.element_to_text(child, mark) for child in node.contents if is_content(child)]
        if not is_content(node):
            return []
        return [self.element_to_text(node)]

    def element_to_text(self, node: PageElement, outer_mark: Optional[str] = None) -> TextLeaf:
        """
        生成单个文本叶子

        Args:
            node: 元素或文本节点
            outer_mark: 外层元素的格式标记

        Returns:
            TextLeaf: 外层标记与节点自身标记叠加后的叶子
        """
        marks = {}
        for mark in (outer_mark, self.classifier.resolve_mark(node)):
            if mark:
                marks[mark] = True
        return TextLeaf(text=extract_text(node), **marks)

    def _build_node(
        self,
        rule: ElementRule,
        children: List[Union[ElementNode, TextLeaf]],
        element: Tag
    ) -> ElementNode:
        """组装节点，空容器补一个空文本叶子（图片除外），再应用规则钩子"""
        if not children and rule.type != IMAGE_TYPE:
            children.append(TextLeaf(text=''))
        node = ElementNode(type=rule.type, children=children)
        return rule.apply(node, element)

    def _check_depth(self, depth: int) -> None:
        if depth > self.max_depth:
            logger.error(
                log_messages.NESTING_TOO_DEEP,
                operation="parse_html_depth_exceeded",
                max_depth=self.max_depth
            )
            raise NestingDepthError(self.max_depth)
