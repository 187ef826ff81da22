"""
核心模块
包含配置、日志、异常以及各格式的转换实现
"""
