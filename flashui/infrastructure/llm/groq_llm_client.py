import logging
from os import getenv
from typing import Any, AsyncIterator, List, Optional

from dotenv import load_dotenv
from groq import AsyncGroq
from groq.types.chat import ChatCompletionMessageParam, ChatCompletionUserMessageParam

from flashui.application.interfaces.illm_client import ILLMClient
from flashui.application.services.exceptions import LLMResponseError
from flashui.domain.models import Model

load_dotenv()


class GroqLLMClient(ILLMClient):
    """
    Async client for Groq's chat completions, exposing the same single-shot and
    streaming calls as the OpenAI client.
    """

    def __init__(
        self,
        model: Model,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(model)
        self.client = AsyncGroq(api_key=api_key or getenv("GROQ_API_KEY"), timeout=timeout)

    def _messages(self, prompt: str) -> List[ChatCompletionMessageParam]:
        return [ChatCompletionUserMessageParam(role="user", content=prompt)]

    async def generate_once(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> str:
        response = await self.client.chat.completions.create(
            model=self.model.name,
            messages=self._messages(prompt),
            temperature=temperature,
            max_tokens=max_tokens or self.model.max_output_tokens,
            stream=False,
        )
        if not getattr(response, "choices", None):
            raise LLMResponseError("Invalid response structure from Groq")

        self.last_usage = getattr(response, "usage", None)
        content = response.choices[0].message.content
        return content.strip() if content is not None else ""

    async def generate_stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> AsyncIterator[str]:
        logging.debug(f"Streaming from Groq model: {self.model.name}")
        stream = await self.client.chat.completions.create(
            model=self.model.name,
            messages=self._messages(prompt),
            temperature=temperature,
            max_tokens=max_tokens or self.model.max_output_tokens,
            stream=True,
        )
        async for chunk in stream:
            if not chunk.choices:
                continue
            content = chunk.choices[0].delta.content
            if content:
                yield content
