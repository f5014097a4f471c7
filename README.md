# claudetypes

Small value types, with no dependencies, for building requests to, and
reading responses from, a chat-style messages API.

## What is inside

- `claudetypes.version.Version`: an enum of API versions (`V2023_01_01` and
  `V2023_06_01`). `Version.default()` returns `V2023_06_01`. `str()` returns
  the header value, such as `"2023-06-01"`. Versions can be compared, and the
  older one is the smaller.
- `claudetypes.top_k.TopK`: samples only from the top K options. The default
  is 50. The value must be an integer from 0 to 2**32 - 1. A value that is not
  an integer raises `TypeError`, and one out of range raises `ValueError`.
- `claudetypes.top_p.TopP`: the nucleus sampling cut-off. The default is 1.0.
  A value outside `[0.0, 1.0]` raises `claudetypes.top_p.ValidationError`, a
  subclass of `ValueError` with `type_name`, `expected` and `actual`
  attributes. `str(TopP(1.0))` is `"1"`, and `TopP(1.0).to_json()` is `"1.0"`.
- `claudetypes.usage.Usage`: the input and output token counts.
- `claudetypes.tool`: the types for tool use.
  - `TextContentBlock`: a text block, serialized as
    `{"type": "text", "text": ...}`.
  - `ToolDefinition` (`name`, `description`, `input_schema`).
  - `ToolUse` (`id`, `name`, `input`).
  - `ToolResult` (`tool_use_id`, `content`, `is_error`), with the
    constructors `success`, `success_without_content`, `error` and
    `error_without_content`. `success` and `error` take a
    `TextContentBlock`, a plain string or `None`. `content` and `is_error`
    are left out of the JSON when they are `None`.
  - `Tool` and `AsyncTool`: abstract base classes with `definition()` and
    `call(tool_use)`. In `AsyncTool`, `call` is a coroutine.
  - `ToolList`: holds `Tool` objects. `definitions()` lists their
    definitions. `call(tool_use)` sends the request to the first tool whose
    definition has the same name. An unknown name raises `ToolNotFoundError`,
    a subclass of `ToolCallError`.

### Serialization

- `TopK`, `TopP`, `Usage`, `ToolDefinition`, `ToolUse` and `ToolResult` have
  `to_json()` and the class method `from_json(text)`. `to_json()` writes
  compact JSON. `TopK` and `TopP` are written as bare numbers.
- `Usage`, `TextContentBlock`, `ToolDefinition`, `ToolUse` and `ToolResult`
  have `to_dict()` and the class method `from_dict(data)`.
- `str()` on `Usage`, `ToolDefinition`, `ToolUse` and `ToolResult` returns
  JSON indented by two spaces.
- Malformed or missing fields raise `ValueError`.

## Installation

```
pip install claudetypes
```

## Example

```python
from claudetypes.tool import Tool, ToolDefinition, ToolList, ToolResult, ToolUse


class Adder(Tool):
    def definition(self):
        return ToolDefinition(
            name="add",
            description="Adds two integers.",
            input_schema={
                "type": "object",
                "properties": {
                    "a": {"type": "integer"},
                    "b": {"type": "integer"},
                },
                "required": ["a", "b"],
            },
        )

    def call(self, tool_use):
        total = tool_use.input["a"] + tool_use.input["b"]
        return ToolResult.success(tool_use.id, str(total))


tools = ToolList([Adder()])
result = tools.call(ToolUse("call-1", "add", {"a": 2, "b": 3}))
print(result.to_json())
# {"tool_use_id":"call-1","content":{"type":"text","text":"5"}}
```

Sampling parameters are checked when they are created:

```python
from claudetypes.top_p import TopP, ValidationError

try:
    TopP(1.5)
except ValidationError as exc:
    print(exc.expected)
# The top_p must be in range: [0.0, 1.0].
```

## What this package does not do

This package only holds values and converts them to and from JSON. It has no
HTTP client. It does not send requests, read responses from the network or
stream messages. `ToolList` dispatches only to synchronous `Tool` objects.
Your own code has to await `AsyncTool.call`.

## Running the tests

```
pip install -e ".[test]"
pytest
```