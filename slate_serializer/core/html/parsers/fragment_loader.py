"""
HTML片段加载器模块
负责规范化原始HTML并解析出顶层元素
"""

from typing import List

from bs4 import BeautifulSoup, Tag

from slate_serializer.core.html.html_utils import normalize_line_breaks
from slate_serializer.core.log_utils import get_logger

logger = get_logger(__name__)


class FragmentLoader:
    """HTML片段加载器"""

    def load(self, html: str) -> List[Tag]:
        """
        解析HTML片段，返回顶层元素

        顶层的文本节点和注释不产生文档节点

        Args:
            html: HTML片段

        Returns:
            List[Tag]: 顶层元素列表
        """
        normalized = normalize_line_breaks(html)
        # html.parser 不会补全 <html>/<body> 包裹
        soup = BeautifulSoup(normalized, 'html.parser')
        roots = [node for node in soup.contents if isinstance(node, Tag)]

        logger.debug(
            "HTML片段解析完成",
            operation="load_fragment",
            html_length=len(html),
            root_count=len(roots)
        )
        return roots
