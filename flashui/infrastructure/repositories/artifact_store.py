"""In-memory store of generation sessions and their artifacts."""

import logging
import uuid
from typing import Callable, Dict, List, Optional, Tuple

from flashui.application.interfaces.iartifact_store import IArtifactStore, SessionListener
from flashui.application.services.exceptions import (
    ArtifactNotFoundError,
    InvalidArtifactTransitionError,
    SessionNotFoundError,
)
from flashui.domain.models import Artifact, ArtifactStatus, ArtifactTransform, Session

DEFAULT_ARTIFACT_COUNT = 3


def _check_transition(before: Artifact, after: Artifact) -> None:
    """Raise if going from ``before`` to ``after`` breaks the artifact lifecycle."""
    if after.id != before.id:
        raise InvalidArtifactTransitionError(
            f"Transform changed artifact id {before.id!r} to {after.id!r}"
        )
    if before.status.is_terminal and after.status is ArtifactStatus.STREAMING:
        raise InvalidArtifactTransitionError(
            f"Artifact {before.id} is {before.status.value} and cannot resume streaming"
        )
    if (
        before.status is ArtifactStatus.STREAMING
        and after.status is ArtifactStatus.STREAMING
        and not after.html.startswith(before.html)
    ):
        raise InvalidArtifactTransitionError(
            f"Streaming content of artifact {before.id} may only grow"
        )


class InMemoryArtifactStore(IArtifactStore):
    """Append-only list of sessions with copy-on-write artifact updates.

    All access happens on one event loop. Each update reads the session,
    rebuilds it with the single transformed artifact and writes it back, so
    writers targeting different artifacts never clobber each other.
    """

    def __init__(
        self,
        artifact_count: int = DEFAULT_ARTIFACT_COUNT,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        """Initialize the store.

        Args:
            artifact_count: Number of artifacts created per session
            id_factory: Optional session id generator, defaults to uuid4 hex
        """
        if artifact_count < 1:
            raise ValueError("artifact_count must be at least 1")
        self.artifact_count = artifact_count
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._sessions: List[Session] = []
        self._index_by_id: Dict[str, int] = {}
        self._current_index = -1
        self._focused_artifact_index: Optional[int] = None
        self._listeners: List[SessionListener] = []
        self.logger = logging.getLogger(__name__)

    @property
    def sessions(self) -> Tuple[Session, ...]:
        return tuple(self._sessions)

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def focused_artifact_index(self) -> Optional[int]:
        return self._focused_artifact_index

    def create_session(
        self, prompt: str, answers: Optional[Dict[str, str]] = None
    ) -> str:
        session_id = self._id_factory()
        if session_id in self._index_by_id:
            raise ValueError(f"Session id {session_id} already exists")

        session = Session.create(session_id, prompt, self.artifact_count, answers)
        self._sessions.append(session)
        self._index_by_id[session_id] = len(self._sessions) - 1
        self._current_index = len(self._sessions) - 1
        self._focused_artifact_index = None
        self.logger.debug(
            f"Created session {session_id} with {self.artifact_count} artifacts"
        )
        self._notify(session)
        return session_id

    def update_artifact(
        self, session_id: str, artifact_id: str, transform: ArtifactTransform
    ) -> Session:
        index = self._index_by_id.get(session_id)
        if index is None:
            raise SessionNotFoundError(f"Session {session_id} not found")

        session = self._sessions[index]
        current = session.artifact(artifact_id)
        if current is None:
            raise ArtifactNotFoundError(
                f"Artifact {artifact_id} not found in session {session_id}"
            )

        updated = transform(current)
        _check_transition(current, updated)

        new_session = session.with_artifact(updated)
        self._sessions[index] = new_session
        self._notify(new_session)
        return new_session

    def get_session(self, session_id: str) -> Optional[Session]:
        index = self._index_by_id.get(session_id)
        return self._sessions[index] if index is not None else None

    def current_session(self) -> Optional[Session]:
        return self.session_at(self._current_index)

    def session_at(self, index: int) -> Optional[Session]:
        if 0 <= index < len(self._sessions):
            return self._sessions[index]
        return None

    def select_session(self, index: int) -> Session:
        """Point the current-session cursor at ``index`` and clear artifact focus."""
        session = self.session_at(index)
        if session is None:
            raise SessionNotFoundError(f"No session at index {index}")
        self._current_index = index
        self._focused_artifact_index = None
        return session

    def focus_artifact(self, index: Optional[int]) -> None:
        """Focus one artifact of the current session, or clear focus with None."""
        if index is not None:
            session = self.current_session()
            if session is None or not 0 <= index < len(session.artifacts):
                raise ArtifactNotFoundError(f"No artifact at index {index}")
        self._focused_artifact_index = index

    def focused_artifact(self) -> Optional[Artifact]:
        session = self.current_session()
        if session is None or self._focused_artifact_index is None:
            return None
        return session.artifacts[self._focused_artifact_index]

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, session: Session) -> None:
        for listener in list(self._listeners):
            try:
                listener(session)
            except Exception:
                # Listener errors never reach the writer.
                self.logger.exception(f"Session listener failed for {session.id}")
