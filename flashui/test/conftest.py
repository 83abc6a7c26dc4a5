import itertools
import logging
from typing import Generator

import pytest

from flashui.config import get_settings
from flashui.infrastructure.repositories.artifact_store import InMemoryArtifactStore
from flashui.test.fixtures import ScriptedLLMClient


@pytest.fixture(autouse=True)
def restore_logging() -> Generator[None, None, None]:
    """Undo handler changes made by configure_logging during a test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def store() -> InMemoryArtifactStore:
    """A store with predictable session ids: s1, s2, ..."""
    counter = itertools.count(1)
    return InMemoryArtifactStore(artifact_count=3, id_factory=lambda: f"s{next(counter)}")


@pytest.fixture
def llm_client() -> ScriptedLLMClient:
    return ScriptedLLMClient()
