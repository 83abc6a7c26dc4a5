"""Core domain models for FlashUI."""

from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple

from flashui.domain.client_types import ClientType

PLACEHOLDER_STYLE_NAME = "Designing..."


class ArtifactStatus(Enum):
    """Lifecycle status of a generated artifact.

    The only legal moves are STREAMING -> COMPLETE and STREAMING -> ERROR.
    """

    STREAMING = "streaming"
    COMPLETE = "complete"
    ERROR = "error"

    @property
    def is_terminal(self) -> bool:
        return self is not ArtifactStatus.STREAMING


@dataclass(frozen=True)
class Artifact:
    """One generated UI variant belonging to a session."""

    id: str
    style_name: str = PLACEHOLDER_STYLE_NAME
    html: str = ""
    status: ArtifactStatus = ArtifactStatus.STREAMING

    def with_style(self, style_name: str) -> "Artifact":
        return replace(self, style_name=style_name)

    def with_html(self, html: str) -> "Artifact":
        """Replace the streamed content, keeping the current status."""
        return replace(self, html=html)

    def finalized(self, html: str, status: ArtifactStatus) -> "Artifact":
        """Return the settled artifact with its final content and status."""
        return replace(self, html=html, status=status)


ArtifactTransform = Callable[[Artifact], Artifact]


def artifact_id_for(session_id: str, ordinal: int) -> str:
    """Build the stable id of the artifact at ``ordinal`` within a session."""
    return f"{session_id}_{ordinal}"


@dataclass(frozen=True)
class Session:
    """One user request cycle: a prompt, optional answers and its artifacts."""

    id: str
    prompt: str
    timestamp: datetime
    artifacts: Tuple[Artifact, ...]
    user_answers: Optional[Dict[str, str]] = None

    @classmethod
    def create(
        cls,
        session_id: str,
        prompt: str,
        artifact_count: int,
        user_answers: Optional[Dict[str, str]] = None,
    ) -> "Session":
        """Build a session holding ``artifact_count`` empty streaming placeholders."""
        placeholders = tuple(
            Artifact(id=artifact_id_for(session_id, i)) for i in range(artifact_count)
        )
        return cls(
            id=session_id,
            prompt=prompt,
            timestamp=datetime.now(),
            artifacts=placeholders,
            user_answers=dict(user_answers) if user_answers is not None else None,
        )

    def artifact(self, artifact_id: str) -> Optional[Artifact]:
        for art in self.artifacts:
            if art.id == artifact_id:
                return art
        return None

    def with_artifact(self, updated: Artifact) -> "Session":
        """Return a copy of this session with the artifact of the same id swapped in."""
        return replace(
            self,
            artifacts=tuple(updated if a.id == updated.id else a for a in self.artifacts),
        )

    @property
    def is_settled(self) -> bool:
        return all(a.status.is_terminal for a in self.artifacts)


@dataclass(frozen=True)
class ClarifyingQuestion:
    """A multiple-choice question used to refine the user's request."""

    id: str
    text: str
    options: Tuple[str, ...]


@dataclass(frozen=True)
class ComponentVariation:
    """A named alternative rendering of an existing artifact."""

    name: str
    html: str


@dataclass
class VariationPanel:
    """Ephemeral side panel collecting streamed variations of one artifact."""

    artifact_id: str
    variations: List[ComponentVariation] = field(default_factory=list)
    status: ArtifactStatus = ArtifactStatus.STREAMING


class Model:
    """Configuration for a specific language model."""

    def __init__(
        self,
        client_type: ClientType,
        name: str,
        context_window: int,
        max_output_tokens: int,
        prompt_cost_per_1k: float,
        completion_cost_per_1k: float,
    ):
        """Initialize a model configuration.

        Args:
            client_type: Type of LLM client
            name: Model name
            context_window: Max context length
            max_output_tokens: Max generation length
            prompt_cost_per_1k: Input cost per 1k tokens
            completion_cost_per_1k: Output cost per 1k tokens
        """
        self.client_type = client_type
        self.name = name
        self.context_window = context_window
        self.max_output_tokens = max_output_tokens
        self.prompt_cost_per_1k = prompt_cost_per_1k
        self.completion_cost_per_1k = completion_cost_per_1k
