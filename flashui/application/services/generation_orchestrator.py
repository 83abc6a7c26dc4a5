"""Service orchestrating clarification, style planning and concurrent artifact generation."""

import asyncio
import logging
from dataclasses import replace
from typing import Any, List, Optional, Sequence, Set, Tuple

from flashui.application.interfaces.iartifact_store import IArtifactStore
from flashui.application.interfaces.illm_client import ILLMClient
from flashui.application.services.exceptions import (
    GenerationInProgressError,
    InvalidStateError,
)
from flashui.application.services.fragment_decoder import decode_json_stream
from flashui.application.services.prompt_builder import (
    artifact_prompt,
    build_context,
    clarifying_questions_prompt,
    style_directions_prompt,
    variations_prompt,
)
from flashui.application.services.response_extractor import extract_json, strip_code_fences
from flashui.domain.generation_state import (
    Clarifying,
    GenerationState,
    Idle,
    Planning,
    Settled,
    Streaming,
    is_busy,
)
from flashui.domain.models import (
    ArtifactStatus,
    ClarifyingQuestion,
    ComponentVariation,
    VariationPanel,
)

GENERATION_FAILED_HTML = '<div style="padding:20px; color:red">Generation Failed</div>'
GENERATION_CANCELLED_HTML = '<div style="padding:20px; color:red">Generation Cancelled</div>'
FALLBACK_STYLES = ("Modern Clean", "Futuristic Dark", "Spatial Depth")
DEFAULT_VARIATION_TEMPERATURE = 1.1


def pad_style_labels(labels: Any, count: int) -> List[str]:
    """Return exactly ``count`` direction labels.

    Non-string and blank entries are dropped. Missing labels come from
    FALLBACK_STYLES (skipping ones already present), then "Direction N".
    """
    result = []
    if isinstance(labels, list):
        result = [label.strip() for label in labels if isinstance(label, str) and label.strip()]
    result = result[:count]

    fallbacks = [style for style in FALLBACK_STYLES if style not in result]
    fallbacks += [f"Direction {i + 1}" for i in range(count)]
    for style in fallbacks:
        if len(result) >= count:
            break
        if style not in result:
            result.append(style)
    return result


def parse_questions(data: Any) -> Tuple[ClarifyingQuestion, ...]:
    """Keep the well-formed questions from an extracted JSON array."""
    if not isinstance(data, list):
        return ()
    questions = []
    for i, item in enumerate(data):
        if not isinstance(item, dict):
            continue
        text = item.get("text")
        options = item.get("options")
        if not isinstance(text, str) or not text.strip() or not isinstance(options, list):
            continue
        options = tuple(o for o in options if isinstance(o, str) and o.strip())
        if not options:
            continue
        question_id = item.get("id")
        if not isinstance(question_id, str) or not question_id:
            question_id = f"q{i + 1}"
        questions.append(ClarifyingQuestion(id=question_id, text=text.strip(), options=options))
    return tuple(questions)


def _parse_variation(record: Any) -> Optional[ComponentVariation]:
    if not isinstance(record, dict):
        return None
    name, html = record.get("name"), record.get("html")
    if isinstance(name, str) and name and isinstance(html, str) and html:
        return ComponentVariation(name=name, html=html)
    return None


class GenerationOrchestrator:
    """Drives one submission through Idle -> Clarifying -> Planning -> Streaming -> Settled.

    All artifact writes go through the store. Each artifact is generated by
    its own asyncio task; a failing task marks only its own artifact as
    errored and never cancels its siblings.
    """

    def __init__(
        self,
        store: IArtifactStore,
        llm_client: ILLMClient,
        variation_temperature: float = DEFAULT_VARIATION_TEMPERATURE,
    ):
        """Initialize the orchestrator.

        Args:
            store: Store owning sessions and artifacts
            llm_client: Client used for both single-shot and streaming calls
            variation_temperature: Sampling temperature for variation requests
        """
        self.store = store
        self.llm_client = llm_client
        self.variation_temperature = variation_temperature
        self.logger = logging.getLogger(__name__)
        self._state: GenerationState = Idle()
        self._tasks: Set["asyncio.Task[None]"] = set()
        self._variation_panel: Optional[VariationPanel] = None

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return is_busy(self._state)

    @property
    def status_message(self) -> str:
        if isinstance(self._state, Clarifying) and self._state.awaiting_questions:
            return "Analyzing requirements..."
        if isinstance(self._state, (Planning, Streaming)):
            return "Architecting solution..."
        return ""

    @property
    def questions(self) -> Tuple[ClarifyingQuestion, ...]:
        if isinstance(self._state, Clarifying) and self._state.questions:
            return self._state.questions
        return ()

    @property
    def answers(self) -> dict:
        if isinstance(self._state, Clarifying):
            return dict(self._state.answers)
        return {}

    @property
    def variation_panel(self) -> Optional[VariationPanel]:
        return self._variation_panel

    async def submit(self, prompt: str, style_tags: Sequence[str] = ()) -> None:
        """Start a new submission.

        Asks for clarifying questions first. When none come back (or the
        request fails) generation starts immediately with no answers.

        Args:
            prompt: What the user wants built
            style_tags: Optional style presets chosen by the user

        Raises:
            GenerationInProgressError: If a previous submission is still running
        """
        prompt = prompt.strip()
        if not prompt:
            return
        if self.is_busy:
            raise GenerationInProgressError("A generation is already in progress")

        tags = tuple(style_tags)
        self._state = Clarifying(prompt=prompt, style_tags=tags)
        try:
            questions = await self._fetch_questions(prompt, tags)
        except asyncio.CancelledError:
            self._state = Idle()
            raise
        if questions:
            self._state = Clarifying(prompt=prompt, style_tags=tags, questions=questions)
            self.logger.info(f"Received {len(questions)} clarifying questions")
            return

        await self._start_generation(prompt, tags, {})

    def answer_question(self, question_id: str, option: str) -> None:
        state = self._state
        if not isinstance(state, Clarifying) or state.awaiting_questions:
            raise InvalidStateError("No clarifying questions are open")
        if not any(q.id == question_id for q in state.questions or ()):
            raise InvalidStateError(f"Unknown question {question_id}")
        self._state = replace(state, answers={**state.answers, question_id: option})

    async def confirm_generation(self) -> None:
        """Close the question form and generate with whatever answers were given."""
        state = self._state
        if not isinstance(state, Clarifying) or state.awaiting_questions:
            raise InvalidStateError("No clarifying questions are open")
        await self._start_generation(state.prompt, state.style_tags, dict(state.answers))

    async def skip_clarification(self) -> None:
        # Skipping proceeds exactly like confirming; unanswered questions are ignored.
        await self.confirm_generation()

    async def cancel_generation(self) -> None:
        """Cancel every artifact task still running for the current submission."""
        pending = [task for task in self._tasks if not task.done()]
        for task in pending:
            task.cancel()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
            self.logger.info(f"Cancelled {len(pending)} artifact tasks")

    async def _fetch_questions(
        self, prompt: str, style_tags: Tuple[str, ...]
    ) -> Tuple[ClarifyingQuestion, ...]:
        try:
            text = await self.llm_client.generate_once(
                clarifying_questions_prompt(prompt, style_tags)
            )
        except Exception as e:
            self.logger.warning(f"Clarification failed, skipping to generation: {e}")
            return ()
        return parse_questions(extract_json(text))

    async def _plan_styles(self, context: str, count: int) -> List[str]:
        try:
            text = await self.llm_client.generate_once(style_directions_prompt(context, count))
            labels = extract_json(text)
        except Exception as e:
            self.logger.warning(f"Style planning failed, using fallback styles: {e}")
            labels = None
        if not isinstance(labels, list) or len(labels) < count:
            self.logger.debug(f"Padding style labels {labels!r} to {count}")
        return pad_style_labels(labels, count)

    async def _start_generation(
        self, prompt: str, style_tags: Tuple[str, ...], answers: dict
    ) -> None:
        session_id = self.store.create_session(prompt, answers)
        self._state = Planning(session_id)
        session = self.store.get_session(session_id)
        context = build_context(prompt, style_tags, answers)

        try:
            labels = await self._plan_styles(context, len(session.artifacts))
            for artifact, label in zip(session.artifacts, labels):
                self.store.update_artifact(
                    session_id, artifact.id, lambda a, label=label: a.with_style(label)
                )

            self._state = Streaming(session_id)
            self._tasks = {
                asyncio.create_task(
                    self._generate_artifact(session_id, artifact.id, context, label),
                    name=artifact.id,
                )
                for artifact, label in zip(session.artifacts, labels)
            }
            results = await asyncio.gather(*self._tasks, return_exceptions=True)
            for result in results:
                if isinstance(result, BaseException):
                    self.logger.debug(f"Artifact task ended with {result!r}")
        finally:
            self._tasks = set()
            self._finalize_unstarted(session_id)
            self._state = Settled(session_id)
            self.logger.info(f"Session {session_id} settled")

    def _finalize_unstarted(self, session_id: str) -> None:
        # Artifacts left streaming here were never started or were cancelled early.
        session = self.store.get_session(session_id)
        for artifact in session.artifacts:
            if artifact.status is ArtifactStatus.STREAMING:
                self.store.update_artifact(
                    session_id,
                    artifact.id,
                    lambda a: a.finalized(GENERATION_CANCELLED_HTML, ArtifactStatus.ERROR),
                )

    async def _generate_artifact(
        self, session_id: str, artifact_id: str, context: str, style_name: str
    ) -> None:
        accumulated = ""
        try:
            stream = self.llm_client.generate_stream(artifact_prompt(context, style_name))
            async for fragment in stream:
                if not isinstance(fragment, str) or not fragment:
                    continue
                accumulated += fragment
                self.store.update_artifact(
                    session_id, artifact_id, lambda a, html=accumulated: a.with_html(html)
                )

            final_html = strip_code_fences(accumulated)
            status = ArtifactStatus.COMPLETE if final_html else ArtifactStatus.ERROR
            self.store.update_artifact(
                session_id, artifact_id, lambda a: a.finalized(final_html, status)
            )
            self.logger.debug(f"Artifact {artifact_id} finished with status {status.value}")
        except asyncio.CancelledError:
            self.store.update_artifact(
                session_id,
                artifact_id,
                lambda a: a.finalized(GENERATION_CANCELLED_HTML, ArtifactStatus.ERROR),
            )
            raise
        except Exception as e:
            self.logger.error(f"Generation failed for artifact {artifact_id}: {e}")
            self.store.update_artifact(
                session_id,
                artifact_id,
                lambda a: a.finalized(GENERATION_FAILED_HTML, ArtifactStatus.ERROR),
            )

    async def request_variations(self) -> VariationPanel:
        """Stream named variations of the focused artifact into a side panel.

        Variations are collected as they are decoded and never written to
        the store; use :meth:`apply_variation` to adopt one.

        Raises:
            InvalidStateError: If no artifact is focused
            GenerationInProgressError: If variations are already streaming
        """
        session = self.store.current_session()
        index = self.store.focused_artifact_index
        if session is None or index is None:
            raise InvalidStateError("Focus an artifact before requesting variations")
        panel = self._variation_panel
        if panel is not None and panel.status is ArtifactStatus.STREAMING:
            raise GenerationInProgressError("Variations are already being generated")

        artifact = session.artifacts[index]
        panel = VariationPanel(artifact_id=artifact.id)
        self._variation_panel = panel
        prompt = variations_prompt(session.prompt, session.user_answers, artifact.html)
        try:
            stream = self.llm_client.generate_stream(
                prompt, temperature=self.variation_temperature
            )
            async for record in decode_json_stream(stream):
                variation = _parse_variation(record)
                if variation is not None:
                    panel.variations.append(variation)
            panel.status = ArtifactStatus.COMPLETE
        except asyncio.CancelledError:
            panel.status = ArtifactStatus.ERROR
            raise
        except Exception as e:
            self.logger.error(f"Variation generation failed for {artifact.id}: {e}")
            panel.status = ArtifactStatus.ERROR
        return panel

    def apply_variation(self, html: str) -> None:
        """Replace the focused artifact's content with a chosen variation."""
        session = self.store.current_session()
        index = self.store.focused_artifact_index
        if session is None or index is None:
            raise InvalidStateError("No artifact is focused")
        artifact = session.artifacts[index]
        if artifact.status is ArtifactStatus.STREAMING:
            raise InvalidStateError(f"Artifact {artifact.id} is still streaming")

        self.store.update_artifact(
            session.id, artifact.id, lambda a: a.finalized(html, ArtifactStatus.COMPLETE)
        )
        self._variation_panel = None
