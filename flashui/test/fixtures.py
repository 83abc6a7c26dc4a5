"""Scripted LLM client shared by the application and CLI tests."""

import asyncio
import json
import re
from typing import Any, AsyncIterator, Dict, List, Optional, Sequence, Union

from flashui.application.interfaces.illm_client import ILLMClient
from flashui.domain.client_types import ClientType
from flashui.domain.models import Model

# A stream step is a fragment, an exception to raise, or an event to wait on.
StreamStep = Union[str, None, BaseException, asyncio.Event]
# A single-shot response is text, an exception to raise, or an event to block on.
OnceResponse = Union[str, BaseException, asyncio.Event]

_STYLE_RE = re.compile(r"CHOSEN AESTHETIC: (.+)")


def fake_model() -> Model:
    return Model(
        client_type=ClientType.MOCK,
        name="fake",
        context_window=8192,
        max_output_tokens=1024,
        prompt_cost_per_1k=0.0,
        completion_cost_per_1k=0.0,
    )


class ScriptedLLMClient(ILLMClient):
    """Replays canned responses keyed by the kind of prompt it receives.

    Artifact streams are looked up by the style label embedded in the prompt;
    the variation stream is used for prompts asking for variations.
    """

    def __init__(
        self,
        questions: OnceResponse = "[]",
        styles: OnceResponse = '["A", "B", "C"]',
        streams: Optional[Dict[str, Sequence[StreamStep]]] = None,
        variation_stream: Sequence[StreamStep] = (),
        default_stream: Sequence[StreamStep] = ("<div>", "ok</div>"),
    ):
        super().__init__(fake_model())
        self.questions = questions
        self.styles = styles
        self.streams = streams or {}
        self.variation_stream = variation_stream
        self.default_stream = default_stream
        self.once_prompts: List[str] = []
        self.stream_prompts: List[str] = []
        self.stream_kwargs: List[Dict[str, Any]] = []

    async def generate_once(self, prompt: str, **kwargs: Any) -> str:
        self.once_prompts.append(prompt)
        await asyncio.sleep(0)
        response = self.questions if "multiple-choice questions" in prompt else self.styles
        if isinstance(response, asyncio.Event):
            await response.wait()
            return "[]"
        if isinstance(response, BaseException):
            raise response
        return response

    async def generate_stream(self, prompt: str, **kwargs: Any) -> AsyncIterator[str]:
        self.stream_prompts.append(prompt)
        self.stream_kwargs.append(kwargs)
        if "Output JSON Stream" in prompt:
            steps = self.variation_stream
        else:
            match = _STYLE_RE.search(prompt)
            style = match.group(1).strip() if match else ""
            steps = self.streams.get(style, self.default_stream)

        for step in steps:
            await asyncio.sleep(0)
            if isinstance(step, asyncio.Event):
                await step.wait()
            elif isinstance(step, BaseException):
                raise step
            else:
                yield step


def variation_fragments(records: Sequence[Dict[str, Any]], size: int = 7) -> List[str]:
    """Serialize records back to back and cut the text into fixed-size fragments."""
    text = "Sure! Here are the variations:\n" + "\n".join(json.dumps(r) for r in records)
    return [text[i : i + size] for i in range(0, len(text), size)]
