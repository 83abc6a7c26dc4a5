import logging
from os import getenv
from typing import Any, AsyncIterator, List, Optional

from dotenv import load_dotenv
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionUserMessageParam
from openai.types.completion_usage import CompletionUsage

from flashui.application.interfaces.illm_client import ILLMClient
from flashui.application.services.exceptions import LLMResponseError
from flashui.domain.models import Model

load_dotenv()


class OpenAILLMClient(ILLMClient):
    """
    Async client for OpenAI chat completions. Implements ILLMClient with a
    single-shot call and a streaming call yielding text deltas.
    """

    def __init__(
        self,
        model: Model,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(model)
        self.client = AsyncOpenAI(api_key=api_key or getenv("OPENAI_API_KEY"), timeout=timeout)
        self.last_cost = 0.0

    def _messages(self, prompt: str) -> List[ChatCompletionUserMessageParam]:
        return [ChatCompletionUserMessageParam(role="user", content=prompt)]

    async def generate_once(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> str:
        """
        Wraps a non-streaming ChatCompletion call and returns the stripped text content.
        """
        logging.debug(f"Using model name: {self.model.name}")
        response = await self.client.chat.completions.create(
            model=self.model.name,
            messages=self._messages(prompt),
            temperature=temperature,
            max_tokens=max_tokens or self.model.max_output_tokens,
            stream=False,
        )

        if not getattr(response, "choices", None):
            raise LLMResponseError("Invalid response structure from LLM")
        self._record_usage(getattr(response, "usage", None))

        message = getattr(response.choices[0], "message", None)
        if message is None:
            raise LLMResponseError("Missing message content in response.")
        content = message.content
        return content.strip() if content is not None else ""

    async def generate_stream(
        self,
        prompt: str,
        temperature: float = 0.7,
        max_tokens: Optional[int] = None,
        **kwargs: Any,
    ) -> AsyncIterator[str]:
        """
        Open a streaming ChatCompletion call and yield each non-empty content delta.
        """
        logging.debug(f"Streaming from model: {self.model.name}")
        stream = await self.client.chat.completions.create(
            model=self.model.name,
            messages=self._messages(prompt),
            temperature=temperature,
            max_tokens=max_tokens or self.model.max_output_tokens,
            stream=True,
            stream_options={"include_usage": True},
        )
        async for chunk in stream:
            usage = getattr(chunk, "usage", None)
            if usage is not None:
                self._record_usage(usage)
            if not chunk.choices:
                continue
            content = chunk.choices[0].delta.content
            if content:
                yield content

    def _record_usage(self, usage: Optional[CompletionUsage]) -> None:
        if usage is None:
            self.last_usage = CompletionUsage(
                prompt_tokens=0, completion_tokens=0, total_tokens=0
            )
            self.last_cost = 0.0
            return
        self.last_usage = usage
        self.last_cost = self.compute_cost_from_model(usage)
        logging.debug(f"LLM usage: {usage.total_tokens} tokens, cost ${self.last_cost}")

    def compute_cost_from_model(self, usage: CompletionUsage) -> float:
        prompt_cost = (usage.prompt_tokens / 1000.0) * self.model.prompt_cost_per_1k
        completion_cost = (usage.completion_tokens / 1000.0) * self.model.completion_cost_per_1k
        return round(prompt_cost + completion_cost, 6)
