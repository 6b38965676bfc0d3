"""字符串处理工具集合"""

from typing import Union
from langchain_core.tools import tool

Text = Union[str, bytes, bytearray]

# 只映射单字节字母 a-z，其余字符原样保留
_ASCII_UPPER_TABLE = str.maketrans(
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
)

class StringTransformer:
    """无状态的字符串转换器"""

    @staticmethod
    def to_upper(text: Text) -> Text:
        """
        将字符串中的小写字母转换为大写

        不使用 str.upper()，因为它会改变长度（如 "ß" -> "SS"）

        Args:
            text: 输入字符串或字节序列

        Returns:
            与输入等长、同类型的新序列
        """
        if isinstance(text, (bytes, bytearray)):
            return text.upper()
        return text.translate(_ASCII_UPPER_TABLE)

    @staticmethod
    def reverse(text: Text) -> Text:
        """按相反顺序返回新序列"""
        return text[::-1]

to_upper = StringTransformer.to_upper
reverse = StringTransformer.reverse

@tool
def uppercase(text: str) -> str:
    """Convert text to uppercase."""
    return to_upper(text)

@tool
def reverse_string(text: str) -> str:
    """Reverse the given string."""
    return reverse(text)
