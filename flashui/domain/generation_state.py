"""States of one generation submission.

Each state carries only the data that is meaningful while it is active, so
combinations such as "streaming while the question form is open" cannot be
represented.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple, Union

from flashui.domain.models import ClarifyingQuestion


@dataclass(frozen=True)
class Idle:
    """Nothing submitted yet."""


@dataclass(frozen=True)
class Clarifying:
    """Waiting on clarifying questions, or on the user's answers to them.

    ``questions`` is None while the question request is still in flight.
    """

    prompt: str
    style_tags: Tuple[str, ...] = ()
    questions: Optional[Tuple[ClarifyingQuestion, ...]] = None
    answers: Dict[str, str] = field(default_factory=dict)

    @property
    def awaiting_questions(self) -> bool:
        return self.questions is None


@dataclass(frozen=True)
class Planning:
    """Session created; direction labels are being requested."""

    session_id: str


@dataclass(frozen=True)
class Streaming:
    """All artifact tasks of the session are running."""

    session_id: str


@dataclass(frozen=True)
class Settled:
    """Every artifact task of the session has concluded."""

    session_id: str


GenerationState = Union[Idle, Clarifying, Planning, Streaming, Settled]


def is_busy(state: GenerationState) -> bool:
    """Whether a submission is actively waiting on the model."""
    if isinstance(state, Clarifying):
        return state.awaiting_questions
    return isinstance(state, (Planning, Streaming))
