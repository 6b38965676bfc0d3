"""
工具包模块
"""
from .string_tools import StringTransformer, to_upper, reverse, uppercase, reverse_string

# 导出所有工具
__all__ = [
    'StringTransformer', 'to_upper', 'reverse',
    'uppercase', 'reverse_string'
]
