from enum import Enum
from typing import Union


class OpenAIModelType(Enum):
    """
    Enumeration of available OpenAI model types.

    - GPT_4O: The versatile, high-intelligence GPT-4o model with large context.
    - GPT_4O_MINI: A faster, more cost-effective smaller variant of GPT-4o.
    - GPT_4_1: Stronger instruction following for long HTML outputs.
    - GPT_4_1_MINI: A cheaper GPT-4.1 variant.
    """

    GPT_4O = "gpt-4o"
    GPT_4O_MINI = "gpt-4o-mini"
    GPT_4_1 = "gpt-4.1"
    GPT_4_1_MINI = "gpt-4.1-mini"


class GroqModelType(Enum):
    """
    Enumeration of available Groq model types.

    - LLAMA_3_3_70B_VERSATILE: A 70B parameter Llama 3.3 variant with a large context window.
    - LLAMA_3_1_8B_INSTANT: A smaller, faster Llama 3.1 8B model with a large context.
    - GEMMA2_9B_IT: A 9-billion parameter model from Google (Gemma2) with an 8K context.
    """

    LLAMA_3_3_70B_VERSATILE = "llama-3.3-70b-versatile"
    LLAMA_3_1_8B_INSTANT = "llama-3.1-8b-instant"
    GEMMA2_9B_IT = "gemma2-9b-it"


class MockModelType(Enum):
    """Offline model that replays canned responses."""

    SCRIPTED = "mock-scripted"


BaseModelType = Union[OpenAIModelType, GroqModelType, MockModelType]


def parse_model_type(name: str) -> BaseModelType:
    """Resolve a model name such as ``gpt-4o-mini`` to its enum member.

    Raises:
        ValueError: If no supported model carries that name
    """
    for enum_cls in (OpenAIModelType, GroqModelType, MockModelType):
        for member in enum_cls:
            if member.value == name:
                return member
    raise ValueError(f"Unsupported model: {name}")


def supported_model_names() -> list:
    return [
        member.value
        for enum_cls in (OpenAIModelType, GroqModelType, MockModelType)
        for member in enum_cls
    ]
