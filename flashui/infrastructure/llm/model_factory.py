from flashui.domain.client_types import ClientType
from flashui.domain.model_types import (
    BaseModelType,
    GroqModelType,
    MockModelType,
    OpenAIModelType,
)
from flashui.domain.models import Model


class ModelFactory:
    """
    A factory class to retrieve Model instances based on the client (OpenAI, GROQ or mock)
    and a specified model type (from the respective enums).

    This class acts as a centralized registry for model configurations,
    including context windows, token limits and pricing.
    """

    OPENAI_MODELS = {
        OpenAIModelType.GPT_4O: Model(
            client_type=ClientType.OPENAI,
            name="gpt-4o",
            context_window=128000,
            max_output_tokens=16384,
            prompt_cost_per_1k=0.0025,
            completion_cost_per_1k=0.01,
        ),
        OpenAIModelType.GPT_4O_MINI: Model(
            client_type=ClientType.OPENAI,
            name="gpt-4o-mini",
            context_window=128000,
            max_output_tokens=16384,
            prompt_cost_per_1k=0.00015,
            completion_cost_per_1k=0.0006,
        ),
        OpenAIModelType.GPT_4_1: Model(
            client_type=ClientType.OPENAI,
            name="gpt-4.1",
            context_window=1047576,
            max_output_tokens=32768,
            prompt_cost_per_1k=0.002,
            completion_cost_per_1k=0.008,
        ),
        OpenAIModelType.GPT_4_1_MINI: Model(
            client_type=ClientType.OPENAI,
            name="gpt-4.1-mini",
            context_window=1047576,
            max_output_tokens=32768,
            prompt_cost_per_1k=0.0004,
            completion_cost_per_1k=0.0016,
        ),
    }

    GROQ_MODELS = {
        GroqModelType.LLAMA_3_3_70B_VERSATILE: Model(
            client_type=ClientType.GROQ,
            name="llama-3.3-70b-versatile",
            context_window=128000,
            max_output_tokens=32768,
            prompt_cost_per_1k=0.00059,
            completion_cost_per_1k=0.00079,
        ),
        GroqModelType.LLAMA_3_1_8B_INSTANT: Model(
            client_type=ClientType.GROQ,
            name="llama-3.1-8b-instant",
            context_window=128000,
            max_output_tokens=8192,
            prompt_cost_per_1k=0.00005,
            completion_cost_per_1k=0.00008,
        ),
        GroqModelType.GEMMA2_9B_IT: Model(
            client_type=ClientType.GROQ,
            name="gemma2-9b-it",
            context_window=8192,
            max_output_tokens=8192,
            prompt_cost_per_1k=0.0002,
            completion_cost_per_1k=0.0002,
        ),
    }

    MOCK_MODELS = {
        MockModelType.SCRIPTED: Model(
            client_type=ClientType.MOCK,
            name="mock-scripted",
            context_window=8192,
            max_output_tokens=8192,
            prompt_cost_per_1k=0.0,
            completion_cost_per_1k=0.0,
        ),
    }

    @staticmethod
    def get_model(client_type: ClientType, model_type: BaseModelType) -> Model:
        """
        Retrieve a Model instance for the given client and model type.

        Raises:
            ValueError: If the client type is unsupported or the model is not
                registered for that client.
        """
        registries = {
            ClientType.OPENAI: ModelFactory.OPENAI_MODELS,
            ClientType.GROQ: ModelFactory.GROQ_MODELS,
            ClientType.MOCK: ModelFactory.MOCK_MODELS,
        }
        registry = registries.get(client_type)
        if registry is None:
            raise ValueError(f"Unsupported client type: {client_type}")
        model = registry.get(model_type)
        if model is None:
            raise ValueError(f"Model type {model_type} not found for client {client_type.value}")
        return model
