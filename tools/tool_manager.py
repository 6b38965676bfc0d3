"""工具管理器 - 统一注册和调度字符串工具"""

import json
from typing import Dict, List, Any
from abc import ABC, abstractmethod
from pydantic import BaseModel, StrictStr, ValidationError
from utils.logger import setup_logger
from .string_tools import StringTransformer

# 设置工具管理器logger
tools_logger = setup_logger("tools")

class BaseTool(ABC):
    """工具基类"""

    @abstractmethod
    def get_tool_definitions(self) -> List[Dict[str, Any]]:
        """获取工具定义"""
        pass

    @abstractmethod
    def execute(self, function_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        """执行工具"""
        pass

    @abstractmethod
    def can_handle(self, function_name: str) -> bool:
        """检查是否能处理指定的函数"""
        pass

    @abstractmethod
    def is_enabled(self) -> bool:
        """检查工具是否启用"""
        pass

class TextArguments(BaseModel):
    """字符串工具参数"""
    text: StrictStr

class StringTool(BaseTool):
    """字符串工具"""

    def __init__(self):
        self.operations = {
            "uppercase": StringTransformer.to_upper,
            "reverse_string": StringTransformer.reverse,
        }

    def get_tool_definitions(self) -> List[Dict[str, Any]]:
        descriptions = {
            "uppercase": "将文本中的小写字母转换为大写",
            "reverse_string": "将文本按相反顺序输出",
        }
        return [
            {
                "type": "function",
                "function": {
                    "name": name,
                    "description": descriptions[name],
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "text": {"type": "string", "description": "要处理的文本"}
                        },
                        "required": ["text"]
                    }
                }
            }
            for name in self.operations
        ]

    def execute(self, function_name: str, arguments: Dict[str, Any]) -> Dict[str, Any]:
        operation = self.operations.get(function_name)
        if operation is None:
            return {"error": f"未知的字符串函数: {function_name}"}

        try:
            args = TextArguments.model_validate(arguments)
        except ValidationError as e:
            return {"error": f"参数无效: {e.errors()[0]['msg']}"}

        return {"result": operation(args.text), "operation": function_name}

    def can_handle(self, function_name: str) -> bool:
        return function_name in self.operations

    def is_enabled(self) -> bool:
        return True

class ToolManager:
    """统一工具管理器"""

    def __init__(self):
        self.tools: Dict[str, BaseTool] = {
            "string": StringTool(),
        }
        tools_logger.info(f"工具管理器初始化完成，注册了 {len(self.tools)} 类工具")

    def get_available_tools(self) -> List[Dict[str, Any]]:
        """获取所有可用工具的定义"""
        tools = []
        for tool in self.tools.values():
            if tool.is_enabled():
                tools.extend(tool.get_tool_definitions())
        return tools

    def execute_tool(self, tool_call) -> Dict[str, Any]:
        """执行工具调用"""
        try:
            # 兼容字典和对象两种格式
            if isinstance(tool_call, dict):
                function_name = tool_call.get('name')
                arguments = tool_call.get('args', {})
            else:
                function_name = tool_call.function.name
                arguments = json.loads(tool_call.function.arguments)
            if not isinstance(arguments, dict):
                raise TypeError(f"参数必须是对象，而不是 {type(arguments).__name__}")
        except (AttributeError, TypeError, ValueError) as e:
            error_msg = f"工具调用格式错误: {e}"
            tools_logger.error(error_msg)
            return {"error": error_msg}

        tools_logger.info(f"执行工具调用: {function_name}, 参数: {arguments}")

        # 查找对应的工具
        for tool in self.tools.values():
            if tool.is_enabled() and tool.can_handle(function_name):
                result = tool.execute(function_name, arguments)
                if "error" in result:
                    tools_logger.error(f"工具执行失败: {result['error']}")
                else:
                    tools_logger.info(f"工具执行结果: {result}")
                return result

        error_msg = f"未找到工具: {function_name}"
        tools_logger.error(error_msg)
        return {"error": error_msg}

    def get_tool_categories(self) -> Dict[str, List[str]]:
        """获取工具分类信息"""
        categories = {}
        for name, tool in self.tools.items():
            if tool.is_enabled():
                tool_defs = tool.get_tool_definitions()
                categories[name] = [t["function"]["name"] for t in tool_defs]
        return categories

    def register_tool(self, name: str, tool: BaseTool) -> bool:
        """注册新工具"""
        if not isinstance(tool, BaseTool):
            tools_logger.error(f"注册工具失败: {name} 不是 BaseTool 实例")
            return False
        self.tools[name] = tool
        tools_logger.info(f"注册新工具: {name}")
        return True

# 全局工具管理器实例
tool_manager = ToolManager()

def get_all_tools():
    """获取所有可用工具"""
    return tool_manager.get_available_tools()

def create_tool_map(tools_list):
    """创建工具映射"""
    return {tool["function"]["name"]: tool for tool in tools_list}

def _tool_call_id(tool_call) -> str:
    # 兼容字典和对象两种格式获取tool_call_id
    if isinstance(tool_call, dict):
        return tool_call.get('id') or str(id(tool_call))
    return getattr(tool_call, 'id', None) or str(id(tool_call))

def _tool_call_name(tool_call) -> str:
    if isinstance(tool_call, dict):
        return tool_call.get('name')
    return tool_call.function.name

def _run_tool_call(tool_call, tool_map) -> Dict[str, Any]:
    try:
        name = _tool_call_name(tool_call)
    except (AttributeError, TypeError) as e:
        error_msg = f"工具调用格式错误: {e}"
        tools_logger.error(error_msg)
        return {"error": error_msg}

    if tool_map is not None and name not in tool_map:
        return {"error": f"工具未绑定: {name}"}
    return tool_manager.execute_tool(tool_call)

def execute_tool_calls(tool_calls, tool_map=None):
    """执行工具调用并包装为 ToolMessage 列表

    tool_map 不为空时，只执行其中包含的工具
    """
    from langchain_core.messages import ToolMessage
    tool_messages = []

    for tool_call in tool_calls:
        result = _run_tool_call(tool_call, tool_map)

        # 格式化结果
        if "error" in result:
            content = f"错误: {result['error']}"
        else:
            content = json.dumps(result, ensure_ascii=False)

        tool_messages.append(ToolMessage(
            content=content,
            tool_call_id=_tool_call_id(tool_call)
        ))

    return tool_messages

def get_tool_descriptions():
    """获取所有工具的描述"""
    tools = tool_manager.get_available_tools()
    descriptions = {}
    for tool in tools:
        descriptions[tool["function"]["name"]] = tool["function"]["description"]
    return descriptions
