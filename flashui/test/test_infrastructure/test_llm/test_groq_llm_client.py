import asyncio
from unittest.mock import MagicMock, patch

import pytest

from flashui.application.services.exceptions import LLMResponseError
from flashui.infrastructure.llm.groq_llm_client import GroqLLMClient
from flashui.test.test_infrastructure.test_llm.mocks import (
    ChunkStream,
    completion,
    delta_chunk,
    groq_llm_client,
    mock_groq_client,
    mock_model_groq,
)


def test_generate_once_returns_stripped_content(
    groq_llm_client: GroqLLMClient, mock_groq_client: MagicMock
):
    mock_groq_client.chat.completions.create.return_value = completion("\n<div>x</div>  ")

    result = asyncio.run(groq_llm_client.generate_once("hi", temperature=0.2, max_tokens=50))

    assert result == "<div>x</div>"
    mock_groq_client.chat.completions.create.assert_awaited_once_with(
        model="test-groq-model",
        messages=[{"role": "user", "content": "hi"}],
        temperature=0.2,
        max_tokens=50,
        stream=False,
    )


def test_generate_once_without_choices_raises(
    groq_llm_client: GroqLLMClient, mock_groq_client: MagicMock
):
    mock_groq_client.chat.completions.create.return_value = MagicMock(choices=None)
    with pytest.raises(LLMResponseError):
        asyncio.run(groq_llm_client.generate_once("hi"))


def test_generate_stream_yields_deltas(
    groq_llm_client: GroqLLMClient, mock_groq_client: MagicMock
):
    mock_groq_client.chat.completions.create.return_value = ChunkStream(
        [delta_chunk('{"name": '), delta_chunk(None), delta_chunk('"a"}'), MagicMock(choices=[])]
    )

    async def drain():
        return [f async for f in groq_llm_client.generate_stream("vary it")]

    assert asyncio.run(drain()) == ['{"name": ', '"a"}']
    kwargs = mock_groq_client.chat.completions.create.await_args.kwargs
    assert kwargs["stream"] is True
    assert kwargs["max_tokens"] == 2048


def test_api_key_falls_back_to_environment(mock_model_groq, monkeypatch):
    monkeypatch.setenv("GROQ_API_KEY", "gsk-from-env")
    with patch("flashui.infrastructure.llm.groq_llm_client.AsyncGroq") as sdk:
        GroqLLMClient(mock_model_groq)
    sdk.assert_called_once_with(api_key="gsk-from-env", timeout=None)
