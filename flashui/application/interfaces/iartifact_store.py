"""Interface for the session and artifact store."""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Optional, Tuple

from flashui.domain.models import ArtifactTransform, Session

SessionListener = Callable[[Session], None]


class IArtifactStore(ABC):
    """Store owning every Session and Artifact.

    Writers never hold copies of sessions: they describe a change as a pure
    transform of one artifact and hand it to :meth:`update_artifact`. Writes
    keyed by distinct (session_id, artifact_id) pairs never interfere.
    """

    @abstractmethod
    def create_session(
        self, prompt: str, answers: Optional[Dict[str, str]] = None
    ) -> str:
        """Append a new session with empty streaming artifacts.

        The new session becomes the current session.

        Args:
            prompt: The user's request
            answers: Optional clarifying-question answers

        Returns:
            The new session id
        """
        pass

    @abstractmethod
    def update_artifact(
        self, session_id: str, artifact_id: str, transform: ArtifactTransform
    ) -> Session:
        """Apply ``transform`` to one artifact of one session.

        Args:
            session_id: Owning session
            artifact_id: Artifact to transform
            transform: Pure function from the current artifact to its new value

        Returns:
            The updated session

        Raises:
            SessionNotFoundError: If the session does not exist
            ArtifactNotFoundError: If the artifact is not part of the session
            InvalidArtifactTransitionError: If the transform breaks a lifecycle invariant
        """
        pass

    @abstractmethod
    def get_session(self, session_id: str) -> Optional[Session]:
        pass

    @abstractmethod
    def current_session(self) -> Optional[Session]:
        pass

    @abstractmethod
    def session_at(self, index: int) -> Optional[Session]:
        pass

    @property
    @abstractmethod
    def sessions(self) -> Tuple[Session, ...]:
        pass

    @abstractmethod
    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register a callback invoked with the changed session after every mutation.

        Returns:
            A callable that removes the listener
        """
        pass

    @property
    @abstractmethod
    def current_index(self) -> int:
        """Index of the current session, -1 when there is none."""
        pass

    @property
    @abstractmethod
    def focused_artifact_index(self) -> Optional[int]:
        pass

    @abstractmethod
    def select_session(self, index: int) -> Session:
        pass

    @abstractmethod
    def focus_artifact(self, index: Optional[int]) -> None:
        pass
