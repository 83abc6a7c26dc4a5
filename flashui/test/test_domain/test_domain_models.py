import pytest
from dataclasses import FrozenInstanceError

from flashui.domain.generation_state import (
    Clarifying,
    Idle,
    Planning,
    Settled,
    Streaming,
    is_busy,
)
from flashui.domain.model_types import (
    GroqModelType,
    MockModelType,
    OpenAIModelType,
    parse_model_type,
    supported_model_names,
)
from flashui.domain.models import (
    PLACEHOLDER_STYLE_NAME,
    Artifact,
    ArtifactStatus,
    ClarifyingQuestion,
    Session,
    artifact_id_for,
)


def test_session_create_builds_streaming_placeholders():
    """
    A new session holds one empty streaming placeholder per requested artifact.
    """
    session = Session.create("abc", "a login form", 3, {"q1": "Pros"})
    assert [a.id for a in session.artifacts] == ["abc_0", "abc_1", "abc_2"]
    assert all(a.style_name == PLACEHOLDER_STYLE_NAME for a in session.artifacts)
    assert all(a.html == "" for a in session.artifacts)
    assert all(a.status is ArtifactStatus.STREAMING for a in session.artifacts)
    assert session.user_answers == {"q1": "Pros"}
    assert not session.is_settled


def test_session_create_copies_answers():
    answers = {"q1": "Pros"}
    session = Session.create("abc", "x", 1, answers)
    answers["q1"] = "Kids"
    assert session.user_answers == {"q1": "Pros"}
    assert Session.create("abc", "x", 1).user_answers is None


def test_with_artifact_replaces_only_matching_id():
    session = Session.create("s", "x", 3)
    updated = session.with_artifact(session.artifacts[1].with_html("<p>"))
    assert updated.artifacts[1].html == "<p>"
    assert updated.artifacts[0] is session.artifacts[0]
    assert updated.artifacts[2] is session.artifacts[2]
    assert session.artifacts[1].html == ""


def test_session_lookup_and_settled():
    session = Session.create("s", "x", 2)
    assert session.artifact("s_1") is session.artifacts[1]
    assert session.artifact("missing") is None

    for artifact in session.artifacts:
        session = session.with_artifact(artifact.finalized("<p>", ArtifactStatus.COMPLETE))
    assert session.is_settled


def test_artifact_transitions_return_new_values():
    artifact = Artifact(id="s_0")
    styled = artifact.with_style("Cyberpunk")
    grown = styled.with_html("<div>").with_html("<div></div>")
    done = grown.finalized("<div>done</div>", ArtifactStatus.ERROR)

    assert artifact.style_name == PLACEHOLDER_STYLE_NAME
    assert grown.html == "<div></div>"
    assert grown.with_html("<div>x").status is ArtifactStatus.STREAMING
    assert (done.style_name, done.html, done.status) == (
        "Cyberpunk",
        "<div>done</div>",
        ArtifactStatus.ERROR,
    )
    with pytest.raises(FrozenInstanceError):
        artifact.html = "x"  # type: ignore


def test_artifact_status_terminality():
    assert not ArtifactStatus.STREAMING.is_terminal
    assert ArtifactStatus.COMPLETE.is_terminal
    assert ArtifactStatus.ERROR.is_terminal


def test_artifact_id_for():
    assert artifact_id_for("sess", 2) == "sess_2"


def test_is_busy_per_state():
    question = ClarifyingQuestion(id="q1", text="Audience?", options=("Kids",))
    assert not is_busy(Idle())
    assert is_busy(Clarifying(prompt="x"))
    assert not is_busy(Clarifying(prompt="x", questions=(question,)))
    assert is_busy(Planning("s"))
    assert is_busy(Streaming("s"))
    assert not is_busy(Settled("s"))


def test_parse_model_type():
    assert parse_model_type("gpt-4o-mini") is OpenAIModelType.GPT_4O_MINI
    assert parse_model_type("gemma2-9b-it") is GroqModelType.GEMMA2_9B_IT
    assert parse_model_type("mock-scripted") is MockModelType.SCRIPTED
    with pytest.raises(ValueError, match="Unsupported model"):
        parse_model_type("gpt-2")


def test_supported_model_names_cover_every_enum():
    names = supported_model_names()
    assert "gpt-4o" in names
    assert "llama-3.3-70b-versatile" in names
    assert "mock-scripted" in names
    assert len(names) == len(set(names))
