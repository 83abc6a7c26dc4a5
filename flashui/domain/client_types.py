"""Enums for client types in FlashUI."""

from enum import Enum


class ClientType(Enum):
    """
    Enumeration of supported LLM clients.

    - OPENAI: Models and endpoints associated with OpenAI.
    - GROQ: Models and endpoints offered by the Groq service.
    - MOCK: Scripted offline client used for demos and tests.
    """

    OPENAI = "openai"
    GROQ = "groq"
    MOCK = "mock"
