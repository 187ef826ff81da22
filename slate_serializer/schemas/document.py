"""
文档树数据模型
编辑器使用的富文本文档结构：容器节点与文本叶子节点

加载和导出都逐层遍历文档，每次只让 pydantic 处理单个节点，
嵌套深度只受 max_nesting_depth 限制
"""

from typing import Annotated, Any, Dict, List, Optional, Sequence, Tuple, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, TypeAdapter, ValidationError

from slate_serializer.core.config import settings
from slate_serializer.core.exceptions import InvalidDocumentError, NestingDepthError
from slate_serializer.core.log_messages import log_messages
from slate_serializer.core.log_utils import get_logger

logger = get_logger(__name__)

PARAGRAPH_TYPE = "paragraph"
IMAGE_TYPE = "image"


class TextLeaf(BaseModel):
    """文本叶子节点，额外字段为布尔格式标记（如 strong、italic）"""
    model_config = ConfigDict(extra="allow")

    text: str = Field(..., description="文本内容")

    @property
    def marks(self) -> Dict[str, Any]:
        """当前叶子上的全部格式标记"""
        return dict(self.model_extra or {})


class ElementNode(BaseModel):
    """容器节点，额外字段由元素钩子附加（如链接地址）"""
    model_config = ConfigDict(extra="allow")

    type: str = Field(..., description="节点语义类型：paragraph/listItem/link等")
    children: List["DocNode"] = Field(default_factory=list, description="子节点列表")


def _doc_node_kind(value: Any) -> str:
    """按是否含有 text 字段区分叶子与容器"""
    if isinstance(value, dict):
        return "leaf" if "text" in value else "node"
    return "leaf" if isinstance(value, TextLeaf) else "node"


DocNode = Annotated[
    Union[
        Annotated[TextLeaf, Tag("leaf")],
        Annotated[ElementNode, Tag("node")],
    ],
    Discriminator(_doc_node_kind),
]

ElementNode.model_rebuild()

Document = List[DocNode]

# 只校验外层是列表，元素由 _load_node 逐个校验
NODE_LIST_ADAPTER = TypeAdapter(List[Any])


def empty_paragraph() -> ElementNode:
    """只含一个空文本叶子的段落"""
    return ElementNode(type=PARAGRAPH_TYPE, children=[TextLeaf(text="")])


def load_document(value: Any, max_depth: Optional[int] = None) -> List[Union[TextLeaf, ElementNode]]:
    """
    将普通字典或模型列表验证为文档

    Args:
        value: 节点列表，元素可以是 dict 或模型实例
        max_depth: 容器节点最大嵌套深度，默认取配置

    Returns:
        List: 验证后的文档节点

    Raises:
        InvalidDocumentError: 节点结构无效
        NestingDepthError: 嵌套深度超过限制
    """
    if max_depth is None:
        max_depth = settings.max_nesting_depth

    nodes = _validate(NODE_LIST_ADAPTER.validate_python, value, ())
    return [_load_node(node, (index,), max_depth) for index, node in enumerate(nodes)]


def _load_node(value: Any, path: Tuple[Any, ...], max_depth: int) -> Union[TextLeaf, ElementNode]:
    if _doc_node_kind(value) == "leaf":
        return _validate(TextLeaf.model_validate, value, path)

    # path 形如 (0, "children", 1, ...)，容器深度为其中的下标个数
    depth = (len(path) + 1) // 2
    if depth > max_depth:
        logger.error(
            log_messages.NESTING_TOO_DEEP,
            operation="load_document_depth_exceeded",
            max_depth=max_depth
        )
        raise NestingDepthError(max_depth, details={"path": list(path)})

    if isinstance(value, ElementNode):
        fields = value.model_dump(exclude={"children"})
        children: Any = value.children
    elif isinstance(value, dict):
        fields = {key: item for key, item in value.items() if key != "children"}
        children = value.get("children", [])
    else:
        # 既不是字典也不是模型，交给 pydantic 生成类型错误
        return _validate(ElementNode.model_validate, value, path)

    node = _validate(ElementNode.model_validate, fields, path)
    children_path = path + ("children",)
    node.children = [
        _load_node(child, children_path + (index,), max_depth)
        for index, child in enumerate(_validate(NODE_LIST_ADAPTER.validate_python, children, children_path))
    ]
    return node


def _validate(validator, value: Any, path: Tuple[Any, ...]) -> Any:
    """调用 pydantic 校验单个节点，失败时附带节点路径"""
    try:
        return validator(value)
    except ValidationError as e:
        logger.error(
            log_messages.DOCUMENT_VALIDATION_FAILED,
            exception=e,
            operation="load_document_failed",
            node_path=list(path),
            error_count=e.error_count()
        )
        raise InvalidDocumentError(
            "文档结构验证失败",
            details={"path": list(path), "errors": e.errors(include_url=False)}
        ) from e


def dump_node(node: Union[TextLeaf, ElementNode]) -> Dict[str, Any]:
    """将单个节点转换为普通字典，子节点逐层转换"""
    if isinstance(node, TextLeaf):
        return node.model_dump()
    data = node.model_dump(exclude={"children"})
    return {
        "type": data.pop("type"),
        "children": [dump_node(child) for child in node.children],
        **data,
    }


def dump_document(document: Sequence[Union[TextLeaf, ElementNode]]) -> List[Dict[str, Any]]:
    """将文档转换为编辑器可直接使用的普通字典列表"""
    return [dump_node(node) for node in document]
