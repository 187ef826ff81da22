"""
纯文本转换器模块
负责将文档树展平为纯文本
"""

from typing import Any, Dict, Optional, Union

from pydantic import ValidationError

from slate_serializer.core.config import settings
from slate_serializer.core.exceptions import ConfigurationError
from slate_serializer.core.log_messages import log_messages
from slate_serializer.core.log_utils import get_logger
from slate_serializer.schemas.document import ElementNode, TextLeaf, load_document
from slate_serializer.schemas.options import PlainOptions

logger = get_logger(__name__)


class PlainTextConverter:
    """文档树到纯文本的转换器"""

    def __init__(self):
        self.max_depth = settings.max_nesting_depth

    def convert_to_text(
        self,
        value: Any,
        options: Optional[Union[PlainOptions, Dict[str, Any]]] = None
    ) -> str:
        """
        将文档转换为纯文本

        每一层（包括顶层）都使用同一个分隔符连接

        Args:
            value: 节点列表，元素可以是模型或字典
            options: 序列化选项，支持 delimiter，默认 "\\n"

        Returns:
            str: 纯文本，输入不是列表时返回空字符串
        """
        if not isinstance(value, (list, tuple)):
            logger.warning(
                log_messages.DOCUMENT_NOT_SEQUENCE,
                operation="convert_text_not_sequence",
                input_type=type(value).__name__
            )
            return ''

        delimiter = self._resolve_options(options).delimiter
        document = load_document(list(value), self.max_depth)
        text = delimiter.join(self._serialize_node(node, delimiter) for node in document)

        logger.debug(log_messages.PLAIN_SERIALIZE_SUCCESS, operation="convert_text_complete", text_length=len(text))
        return text

    def _resolve_options(self, options: Optional[Union[PlainOptions, Dict[str, Any]]]) -> PlainOptions:
        if options is None:
            return PlainOptions()
        if isinstance(options, PlainOptions):
            return options
        try:
            return PlainOptions.model_validate(options)
        except ValidationError as e:
            raise ConfigurationError(
                "纯文本选项无效",
                details={"errors": e.errors(include_url=False)}
            ) from e

    def _serialize_node(self, node: Union[ElementNode, TextLeaf], delimiter: str) -> str:
        if isinstance(node, TextLeaf):
            return node.text

        return delimiter.join(self._serialize_node(child, delimiter) for child in node.children)
