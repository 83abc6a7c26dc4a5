import asyncio
import json
import re
from typing import Any, AsyncIterator

from flashui.application.interfaces.illm_client import ILLMClient
from flashui.domain.models import Model


class MockLLMClient(ILLMClient):
    """Offline LLM client replaying canned responses, chunked like a real stream."""

    def __init__(self, model: Model, chunk_size: int = 24, delay: float = 0.0):
        super().__init__(model)
        self.chunk_size = chunk_size
        self.delay = delay

    async def generate_once(self, prompt: str, **kwargs: Any) -> str:
        if "multiple-choice questions" in prompt:
            return self._questions()
        if "visual directions" in prompt:
            return self._directions()
        return ""

    async def generate_stream(self, prompt: str, **kwargs: Any) -> AsyncIterator[str]:
        if "Output JSON Stream" in prompt:
            text = self._variations()
        else:
            text = self._component(prompt)
        for i in range(0, len(text), self.chunk_size):
            # Yield control so sibling streams interleave.
            await asyncio.sleep(self.delay)
            yield text[i : i + self.chunk_size]

    def _questions(self) -> str:
        questions = [
            {
                "id": "q1",
                "text": "Who is the primary audience?",
                "options": ["Consumers", "Developers", "Enterprise teams"],
            },
            {
                "id": "q2",
                "text": "What overall vibe fits best?",
                "options": ["Calm", "Playful", "Bold"],
            },
        ]
        return "Here are some questions:\n```json\n" + json.dumps(questions) + "\n```"

    def _directions(self) -> str:
        return '["Soft Minimal", "Neon Spatial", "Dense Dashboard"]'

    def _component(self, prompt: str) -> str:
        match = re.search(r"CHOSEN AESTHETIC: (.+)", prompt)
        style = match.group(1).strip() if match else "Default"
        return (
            "```html\n"
            "<style>.card{padding:24px;border-radius:16px;box-shadow:0 8px 24px #0003}</style>\n"
            f'<div class="card"><h2>{style}</h2><p>Mock component</p></div>\n'
            "```"
        )

    def _variations(self) -> str:
        variations = [
            {"name": "Dark/Light Mode Flip", "html": '<div style="background:#111;color:#eee">Flip</div>'},
            {"name": "Structural Shift", "html": '<div style="display:flex">Shift</div>'},
            {"name": "Motion & Depth", "html": '<div style="transform:perspective(600px) rotateX(8deg)">Depth</div>'},
        ]
        return "\n".join(json.dumps(v) for v in variations)
