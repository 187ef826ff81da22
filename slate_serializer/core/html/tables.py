"""
HTML分类表模块
定义标签到节点类型、块级/行内标签、格式标记的默认查找表，
以及每次转换使用的只读分类表上下文
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, FrozenSet, Mapping, Optional, Union

from bs4 import Tag
from pydantic import ValidationError

from slate_serializer.core.exceptions import ConfigurationError
from slate_serializer.schemas.document import ElementNode, PARAGRAPH_TYPE
from slate_serializer.schemas.options import HtmlOptions

# 默认标签到节点类型的查找表，顺序决定反向查找时的优先级
ELEMENTS: Dict[str, str] = {
    'a': 'link',
    'img': 'image',
    'li': 'listItem',
    'p': 'paragraph',
    'div': 'paragraph',
    'ol': 'orderedList',
    'ul': 'unorderedList',
    'table': 'table',
    'tbody': 'tbody',
    'tr': 'tr',
    'td': 'td',
    'text': 'text',
    'hr': 'hr',
    'figure': 'figure',
    'figcaption': 'figcaption',
}

BLOCK_ELEMENTS: FrozenSet[str] = frozenset({
    'figure', 'figcaption', 'hr', 'img', 'li', 'p', 'ol', 'ul', 'table', 'tbody', 'tr', 'td'
})

INLINE_ELEMENTS: FrozenSet[str] = frozenset({'a'})

MARK_ELEMENTS: Dict[str, str] = {
    'em': 'italic',
    'strong': 'strong',
    'u': 'underline',
}

# 默认段落标签，查找失败时回退到该表项
PARAGRAPH_TAG = 'p'


@dataclass(frozen=True)
class Label:
    """纯类型标签规则"""
    type: str

    def apply(self, node: ElementNode, element: Tag) -> ElementNode:
        return node


@dataclass(frozen=True)
class Hook:
    """
    带后处理钩子的规则

    transform 接收新建的节点和源元素，返回替换后的节点（模型或字典）
    """
    type: str
    transform: Callable[[ElementNode, Tag], Union[ElementNode, Dict[str, Any]]]

    def apply(self, node: ElementNode, element: Tag) -> ElementNode:
        result = self.transform(node, element)
        if isinstance(result, ElementNode):
            return result
        try:
            return ElementNode.model_validate(result)
        except ValidationError as e:
            raise ConfigurationError(
                f"元素钩子返回了无效节点: {self.type}",
                details={"errors": e.errors(include_url=False)}
            ) from e


ElementRule = Union[Label, Hook]


def as_rule(value: Any) -> ElementRule:
    """将分类表中的值统一为 Label 或 Hook"""
    if isinstance(value, (Label, Hook)):
        return value
    if isinstance(value, str):
        return Label(value)
    raise ConfigurationError(
        "元素规则必须是字符串、Label 或 Hook",
        details={"rule": repr(value)}
    )


@dataclass(frozen=True)
class ClassificationTables:
    """单次转换使用的只读分类表"""
    elements: Mapping[str, ElementRule]
    block_elements: FrozenSet[str]
    inline_elements: FrozenSet[str]
    mark_elements: Mapping[str, str]

    @classmethod
    def from_options(
        cls,
        options: Optional[Union[HtmlOptions, Dict[str, Any]]] = None
    ) -> "ClassificationTables":
        """
        根据选项构建分类表，未提供的表使用默认值

        Args:
            options: HtmlOptions 或等价字典

        Returns:
            ClassificationTables: 不可变的分类表

        Raises:
            ConfigurationError: 选项或规则无效
        """
        if options is None:
            options = HtmlOptions()
        elif isinstance(options, dict):
            try:
                options = HtmlOptions.model_validate(options)
            except ValidationError as e:
                raise ConfigurationError(
                    "HTML选项无效",
                    details={"errors": e.errors(include_url=False)}
                ) from e
        elif not isinstance(options, HtmlOptions):
            raise ConfigurationError(
                "HTML选项必须是 HtmlOptions 或字典",
                details={"options_type": type(options).__name__}
            )

        elements = options.elements if options.elements is not None else ELEMENTS
        mark_elements = options.mark_elements if options.mark_elements is not None else MARK_ELEMENTS

        if 'text' in mark_elements.values():
            raise ConfigurationError("格式标记不能命名为 text", details={"mark_elements": dict(mark_elements)})

        return cls(
            elements=MappingProxyType({str(key): as_rule(value) for key, value in elements.items()}),
            block_elements=frozenset(
                options.block_elements if options.block_elements is not None else BLOCK_ELEMENTS
            ),
            inline_elements=frozenset(
                options.inline_elements if options.inline_elements is not None else INLINE_ELEMENTS
            ),
            mark_elements=MappingProxyType(dict(mark_elements)),
        )

    def paragraph_rule(self) -> ElementRule:
        """段落回退规则"""
        return self.elements.get(PARAGRAPH_TAG) or Label(PARAGRAPH_TYPE)
