from typing import Optional

from flashui.application.interfaces.illm_client import ILLMClient
from flashui.domain.client_types import ClientType
from flashui.domain.model_types import (
    BaseModelType,
    GroqModelType,
    MockModelType,
    OpenAIModelType,
)
from flashui.infrastructure.llm.groq_llm_client import GroqLLMClient
from flashui.infrastructure.llm.mock_llm_client import MockLLMClient
from flashui.infrastructure.llm.model_factory import ModelFactory
from flashui.infrastructure.llm.openai_llm_client import OpenAILLMClient


class ClientFactory:
    @staticmethod
    def get_llm_client(
        model_type: BaseModelType,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> ILLMClient:
        if isinstance(model_type, GroqModelType):
            model = ModelFactory.get_model(ClientType.GROQ, model_type)
            return GroqLLMClient(model, api_key=api_key, timeout=timeout)
        elif isinstance(model_type, OpenAIModelType):
            model = ModelFactory.get_model(ClientType.OPENAI, model_type)
            return OpenAILLMClient(model, api_key=api_key, timeout=timeout)
        elif isinstance(model_type, MockModelType):
            model = ModelFactory.get_model(ClientType.MOCK, model_type)
            return MockLLMClient(model)
        else:
            raise ValueError(f"Unsupported client type: {model_type}")
