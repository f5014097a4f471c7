"""Tool definitions, tool use requests, results and tool dispatch."""

from __future__ import annotations

import abc
import json
from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Optional, Union


def _pretty(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False)


def _compact(data: Any) -> str:
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _load_object(text: str) -> Mapping[str, Any]:
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError("expected a JSON object")
    return data


def _require_str(data: Mapping[str, Any], key: str) -> str:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    value = data[key]
    if not isinstance(value, str):
        raise ValueError(f"field `{key}` must be a string")
    return value


def _require(data: Mapping[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"missing field `{key}`")
    return data[key]


class ToolCallError(Exception):
    """Calling a tool failed."""


class ToolNotFoundError(ToolCallError):
    """No tool with the requested name exists."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"tool not found: {name}")


@dataclass(frozen=True)
class TextContentBlock:
    """A block of text content."""

    text: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"type": "text", "text": self.text}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TextContentBlock":
        if not isinstance(data, Mapping):
            raise ValueError("content block must be an object")
        if data.get("type") != "text":
            raise ValueError(f"unexpected content block type: {data.get('type')!r}")
        return cls(_require_str(data, "text"))


@dataclass
class ToolDefinition:
    """A tool the assistant may use."""

    name: str = ""
    description: Optional[str] = None
    input_schema: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolDefinition":
        description = data.get("description")
        if description is not None and not isinstance(description, str):
            raise ValueError("field `description` must be a string")
        return cls(
            name=_require_str(data, "name"),
            description=description,
            input_schema=_require(data, "input_schema"),
        )

    def to_json(self) -> str:
        return _compact(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "ToolDefinition":
        return cls.from_dict(_load_object(text))

    def __str__(self) -> str:
        return _pretty(self.to_dict())


@dataclass
class ToolUse:
    """A request from the assistant to use a tool."""

    id: str = ""
    name: str = ""
    input: Any = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "input": self.input}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolUse":
        return cls(
            id=_require_str(data, "id"),
            name=_require_str(data, "name"),
            input=_require(data, "input"),
        )

    def to_json(self) -> str:
        return _compact(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "ToolUse":
        return cls.from_dict(_load_object(text))

    def __str__(self) -> str:
        return _pretty(self.to_dict())


_Content = Union[TextContentBlock, str, None]


def _as_block(content: _Content) -> Optional[TextContentBlock]:
    if content is None or isinstance(content, TextContentBlock):
        return content
    if isinstance(content, str):
        return TextContentBlock(content)
    raise TypeError(f"cannot use {content!r} as text content")


@dataclass
class ToolResult:
    """The outcome of a tool use."""

    tool_use_id: str = ""
    content: Optional[TextContentBlock] = None
    is_error: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"tool_use_id": self.tool_use_id}
        if self.content is not None:
            data["content"] = self.content.to_dict()
        if self.is_error is not None:
            data["is_error"] = self.is_error
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ToolResult":
        content = data.get("content")
        is_error = data.get("is_error")
        if is_error is not None and not isinstance(is_error, bool):
            raise ValueError("field `is_error` must be a boolean")
        return cls(
            tool_use_id=_require_str(data, "tool_use_id"),
            content=None if content is None else TextContentBlock.from_dict(content),
            is_error=is_error,
        )

    def to_json(self) -> str:
        return _compact(self.to_dict())

    @classmethod
    def from_json(cls, text: str) -> "ToolResult":
        return cls.from_dict(_load_object(text))

    def __str__(self) -> str:
        return _pretty(self.to_dict())

    @classmethod
    def success(cls, tool_use_id: str, content: _Content) -> "ToolResult":
        return cls(tool_use_id, _as_block(content), None)

    @classmethod
    def success_without_content(cls, tool_use_id: str) -> "ToolResult":
        return cls(tool_use_id, None, None)

    @classmethod
    def error(cls, tool_use_id: str, content: _Content) -> "ToolResult":
        return cls(tool_use_id, _as_block(content), True)

    @classmethod
    def error_without_content(cls, tool_use_id: str) -> "ToolResult":
        return cls(tool_use_id, None, True)


class Tool(abc.ABC):
    """A tool the assistant can call."""

    @abc.abstractmethod
    def definition(self) -> ToolDefinition:
        """Return the definition of the tool."""

    @abc.abstractmethod
    def call(self, tool_use: ToolUse) -> ToolResult:
        """Run the tool; raise ToolCallError on failure."""


class AsyncTool(abc.ABC):
    """A tool the assistant can call asynchronously."""

    @abc.abstractmethod
    def definition(self) -> ToolDefinition:
        """Return the definition of the tool."""

    @abc.abstractmethod
    async def call(self, tool_use: ToolUse) -> ToolResult:
        """Run the tool; raise ToolCallError on failure."""


class ToolList:
    """A set of tools dispatched by name."""

    def __init__(self, tools: Iterable[Tool]) -> None:
        self.tools = list(tools)

    def definitions(self) -> list[ToolDefinition]:
        return [tool.definition() for tool in self.tools]

    def call(self, tool_use: ToolUse) -> ToolResult:
        target = next(
            (tool for tool in self.tools if tool.definition().name == tool_use.name),
            None,
        )
        if target is None:
            raise ToolNotFoundError(tool_use.name)
        return target.call(tool_use)