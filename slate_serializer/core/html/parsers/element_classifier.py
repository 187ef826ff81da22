"""
元素分类器模块
负责根据分类表判断子节点种类、节点类型和格式标记
"""

from enum import Enum
from typing import Optional

from bs4 import Tag
from bs4.element import PageElement

from slate_serializer.core.html.html_utils import extract_text, is_blank, is_content, lookup_key
from slate_serializer.core.html.tables import ClassificationTables, ElementRule


class ChildKind(str, Enum):
    """子节点的转换方式"""
    BLOCK = "block"
    INLINE = "inline"
    TEXT_RUN = "text_run"
    SKIP = "skip"


class ElementClassifier:
    """基于分类表的元素分类器"""

    def __init__(self, tables: ClassificationTables):
        self.tables = tables

    def classify(self, node: PageElement) -> ChildKind:
        """
        判断子节点应如何转换

        Args:
            node: BeautifulSoup元素或文本节点

        Returns:
            ChildKind: 块级、行内、文本片段或跳过
        """
        if not is_content(node):
            return ChildKind.SKIP
        if isinstance(node, Tag):
            if node.name in self.tables.block_elements:
                return ChildKind.BLOCK
            if node.name in self.tables.inline_elements:
                return ChildKind.INLINE
        if is_blank(extract_text(node)):
            return ChildKind.SKIP
        return ChildKind.TEXT_RUN

    def resolve_rule(self, element: Tag) -> ElementRule:
        """查找元素对应的类型规则，找不到时回退到段落"""
        rule = self.tables.elements.get(lookup_key(element))
        if rule is not None:
            return rule
        return self.tables.paragraph_rule()

    def resolve_mark(self, node: PageElement) -> Optional[str]:
        """根据标签名查找格式标记，文本节点没有标记"""
        if not isinstance(node, Tag):
            return None
        return self.tables.mark_elements.get(node.name)
