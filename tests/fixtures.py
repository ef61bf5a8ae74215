"""Test doubles and sample payloads."""

from __future__ import annotations


class WordEncoding:
    """Stand-in for tiktoken.Encoding: one token per word."""

    def encode(self, text: str, disallowed_special=()) -> list[int]:
        return list(range(len(text.split())))


def word_count(text: str) -> int:
    return len(text.split())


WEATHER_TOOL = {
    "type": "function",
    "function": {
        "name": "get_weather",
        "description": "Get the weather",
        "parameters": {
            "type": "object",
            "properties": {
                "location": {"type": "string", "description": "City name"},
                "unit": {"type": "string", "enum": ["c", "f"]},
            },
            "required": ["location"],
        },
    },
}

ASSISTANT_TOOL_CALL = {
    "role": "assistant",
    "content": None,
    "tool_calls": [
        {
            "id": "call_1",
            "type": "function",
            "function": {"name": "get_weather", "arguments": '{"location": "Paris"}'},
        }
    ],
}
