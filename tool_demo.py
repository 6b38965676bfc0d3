#!/usr/bin/env python3
"""工具演示脚本"""

from tools.string_tools import uppercase, reverse_string
from tools.tool_manager import tool_manager, get_tool_descriptions
from utils.logger import setup_logger

# 设置演示脚本专用的logger
demo_logger = setup_logger("tool_demo")

SAMPLES = ["abc", "Hello World!", "racecar", ""]

def demo_string_tools():
    """演示字符串工具"""
    demo_logger.info("开始字符串工具演示")

    for text in SAMPLES:
        upper = uppercase.invoke({'text': text})
        reversed_text = reverse_string.invoke({'text': text})
        demo_logger.info(f"{text!r} -> 大写: {upper!r}, 反转: {reversed_text!r}")

    demo_logger.info("字符串工具演示完成")

def demo_tool_manager():
    """演示工具管理器调度"""
    demo_logger.info("开始工具管理器演示")

    for name, desc in get_tool_descriptions().items():
        demo_logger.info(f"- {name}: {desc}")

    result = tool_manager.execute_tool({'name': 'uppercase', 'args': {'text': 'Hello World!'}})
    demo_logger.info(f"调度结果: {result}")

    # 未知工具返回错误字典
    result = tool_manager.execute_tool({'name': 'lowercase', 'args': {'text': 'ABC'}})
    demo_logger.info(f"未知工具: {result}")

    demo_logger.info("工具管理器演示完成")

def main():
    """主函数"""
    demo_logger.info("工具包功能演示开始")
    demo_logger.info("=" * 50)
    demo_string_tools()
    demo_tool_manager()
    demo_logger.info("演示程序结束")

if __name__ == "__main__":
    main()
