"""
纯文本解析器模块
负责将以空行分段的纯文本转换为段落文档
"""

from typing import List, Optional

from slate_serializer.core.html.html_utils import ASCII_WHITESPACE
from slate_serializer.core.log_messages import log_messages
from slate_serializer.core.log_utils import get_logger
from slate_serializer.schemas.document import PARAGRAPH_TYPE, ElementNode, TextLeaf

logger = get_logger(__name__)


class PlainTextParser:
    """纯文本到文档树的解析器"""

    def parse_text_to_document(self, text: Optional[str]) -> List[ElementNode]:
        """
        解析纯文本为段落列表

        Args:
            text: 纯文本，None 视为空字符串

        Returns:
            List[ElementNode]: 段落节点列表，至少包含一个段落
        """
        if text is None:
            text = ''

        blocks = self.split_text_into_blocks(text)
        document = [
            ElementNode(type=PARAGRAPH_TYPE, children=[TextLeaf(text=block)])
            for block in blocks
        ]

        logger.debug(
            log_messages.PLAIN_DESERIALIZE_SUCCESS,
            operation="parse_text_complete",
            node_count=len(document)
        )
        return document

    def split_text_into_blocks(self, text: str) -> List[str]:
        """
        按一个或多个空行切分文本块

        只有一个块时即使为空也保留；多个块时丢弃空块
        """
        stripped = text.strip(ASCII_WHITESPACE)
        lines = [line.strip(ASCII_WHITESPACE) for line in stripped.split('\n')] if stripped else []

        blocks = []
        current: List[str] = []
        for line in lines:
            if line == '':
                blocks.append('\n'.join(current))
                current = []
            else:
                current.append(line)
        blocks.append('\n'.join(current))

        if len(blocks) == 1:
            return blocks
        return [block for block in blocks if block != '']
