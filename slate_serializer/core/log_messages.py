"""
日志消息模板模块
统一管理所有转换日志消息模板，便于维护和国际化
"""

from typing import Dict, Any


class LogMessages:
    """日志消息模板类"""

    # ==================== 通用日志消息 ====================
    OPERATION_SUCCESS = "操作成功完成: {operation_name}"

    # ==================== HTML转换相关 ====================
    HTML_DESERIALIZE_START = "开始解析HTML为文档树"
    HTML_DESERIALIZE_SUCCESS = "HTML解析完成，生成 {node_count} 个顶层节点"
    HTML_EMPTY_INPUT = "HTML内容为空，返回空文档"
    HTML_INVALID_INPUT = "HTML输入类型无效，返回空文档"
    HTML_SERIALIZE_START = "开始将文档树转换为HTML"
    HTML_SERIALIZE_SUCCESS = "文档树转换HTML完成"
    HTML_UNMAPPED_TYPE = "节点类型没有对应的HTML标签: {node_type}"

    # ==================== 纯文本转换相关 ====================
    PLAIN_DESERIALIZE_SUCCESS = "纯文本解析完成，生成 {node_count} 个段落"
    PLAIN_SERIALIZE_SUCCESS = "文档树转换纯文本完成"

    # ==================== 文档验证相关 ====================
    DOCUMENT_NOT_SEQUENCE = "文档不是节点列表，返回空字符串"
    DOCUMENT_VALIDATION_FAILED = "文档结构验证失败"
    NESTING_TOO_DEEP = "文档嵌套深度超过限制: {max_depth}"

    @classmethod
    def format_message(cls, message_template: str, **kwargs: Any) -> str:
        """格式化日志消息模板"""
        return message_template.format(**kwargs)

    @classmethod
    def get_structured_data(cls, **kwargs: Any) -> Dict[str, Any]:
        """获取结构化日志数据"""
        return kwargs


# 全局实例
log_messages = LogMessages()
