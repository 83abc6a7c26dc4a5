"""
FlashUI: turn a natural-language UI request into several streamed HTML/CSS variants.
"""

from flashui.application.services.generation_orchestrator import GenerationOrchestrator
from flashui.application.services.fragment_decoder import decode_json_stream, iter_json_stream
from flashui.application.services.response_extractor import extract_json
from flashui.infrastructure.repositories.artifact_store import InMemoryArtifactStore
from flashui.config import Settings, get_settings

__version__ = "0.1.0"

__all__ = [
    "GenerationOrchestrator",
    "InMemoryArtifactStore",
    "decode_json_stream",
    "iter_json_stream",
    "extract_json",
    "Settings",
    "get_settings",
]
