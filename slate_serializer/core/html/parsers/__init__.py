"""
解析器模块初始化文件
"""

from .fragment_loader import FragmentLoader
from .element_classifier import ElementClassifier, ChildKind

__all__ = ['FragmentLoader', 'ElementClassifier', 'ChildKind']
