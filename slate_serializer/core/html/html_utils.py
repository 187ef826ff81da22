"""
HTML处理工具模块
包含解析器和转换器共享的工具函数
"""

import re

from bs4 import NavigableString, Tag
from bs4.element import Comment, Declaration, Doctype, PageElement, ProcessingInstruction

# <br>、<br/>、<br />、<BR class="x"> 等换行标签
LINE_BREAK_PATTERN = re.compile(r'<br\b[^>]*>', re.IGNORECASE)

# 只按ASCII空白判断空文本，&nbsp; 视为有效内容
ASCII_WHITESPACE = ' \t\n\r\f\v\x00'

NON_CONTENT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def normalize_line_breaks(html: str) -> str:
    """将换行标签替换为换行符"""
    return LINE_BREAK_PATTERN.sub('\n', html)


def is_content(node: PageElement) -> bool:
    """元素或文本节点返回True，注释、文档类型等返回False"""
    if isinstance(node, Tag):
        return True
    return isinstance(node, NavigableString) and not isinstance(node, NON_CONTENT_STRINGS)


def extract_text(node: PageElement) -> str:
    """提取节点的扁平文本"""
    if isinstance(node, Tag):
        return node.get_text()
    return str(node)


def is_blank(text: str) -> bool:
    return text.strip(ASCII_WHITESPACE) == ''


def lookup_key(element: Tag) -> str:
    """
    元素在分类表中的查找键

    Args:
        element: BeautifulSoup元素

    Returns:
        str: 标签名拼接 type 属性（没有该属性时就是标签名）
    """
    type_attr = element.get('type')
    if isinstance(type_attr, list):
        type_attr = ' '.join(type_attr)
    return f"{element.name}{type_attr or ''}"
