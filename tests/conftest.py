"""
测试配置和fixtures
为所有测试提供共享的样例数据和辅助函数
"""

from typing import Any, Dict, Iterator, List

import pytest


def iter_nodes(value: List[Dict[str, Any]]) -> Iterator[Dict[str, Any]]:
    """深度优先遍历已导出的文档中的全部节点"""
    for node in value:
        yield node
        if 'children' in node:
            yield from iter_nodes(node['children'])


def build_nested_document(depth: int, text: str = "x") -> List[Dict[str, Any]]:
    """构建容器嵌套 depth 层的段落文档"""
    node: Dict[str, Any] = {"type": "paragraph", "children": [{"text": text}]}
    for _ in range(depth - 1):
        node = {"type": "paragraph", "children": [node]}
    return [node]


@pytest.fixture
def article_html() -> str:
    """覆盖段落、列表、表格、图片、链接和格式标记的HTML片段"""
    return (
        '<div>Intro with <em>emphasis</em> and <a href="/docs">a <strong>link</strong></a></div>\n'
        '<ol>\n'
        '  <li>First</li>\n'
        '  <li>Second <u>item</u></li>\n'
        '</ol>\n'
        '<figure><img src="chart.png"><figcaption>Chart</figcaption></figure>\n'
        '<table><tbody><tr><td>1</td><td></td></tr></tbody></table>\n'
        '<hr>'
    )


@pytest.fixture
def iter_document_nodes():
    """返回文档节点遍历函数"""
    return iter_nodes


@pytest.fixture
def nested_document():
    """返回嵌套文档构建函数"""
    return build_nested_document
