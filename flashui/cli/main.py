"""
Main CLI module for FlashUI.
"""

import asyncio
from pathlib import Path
from typing import Dict, Optional, Tuple

import click

from flashui import __version__
from flashui.application.services.generation_orchestrator import GenerationOrchestrator
from flashui.application.services.prompt_builder import STYLE_PRESETS
from flashui.cli.config_cmd import config
from flashui.config import get_settings
from flashui.domain.generation_state import Clarifying
from flashui.domain.model_types import MockModelType, parse_model_type, supported_model_names
from flashui.domain.models import ArtifactStatus, Session, VariationPanel
from flashui.infrastructure.llm.client_factory import ClientFactory
from flashui.infrastructure.logging_config import configure_logging
from flashui.infrastructure.repositories.artifact_store import InMemoryArtifactStore


@click.group()
def cli():
    """FlashUI command line interface."""
    pass


cli.add_command(config, name="config")


@cli.command()
def version():
    """Show FlashUI version information."""
    click.echo(f"FlashUI version {__version__}")


@cli.command()
def styles():
    """List the style presets that can be passed with --style."""
    click.echo("\nAvailable style presets:")
    for preset in STYLE_PRESETS:
        click.echo(f"- {preset}")


@cli.command()
def models():
    """List the supported model names."""
    for name in supported_model_names():
        click.echo(name)


def _progress_printer():
    """Build a store listener that reports each artifact once it settles."""
    reported: Dict[str, ArtifactStatus] = {}

    def on_change(session: Session) -> None:
        for artifact in session.artifacts:
            if artifact.status.is_terminal and reported.get(artifact.id) is not artifact.status:
                reported[artifact.id] = artifact.status
                mark = "✅" if artifact.status is ArtifactStatus.COMPLETE else "❌"
                click.echo(f"{mark} {artifact.style_name} ({artifact.status.value})")

    return on_change


async def _run_session(
    orchestrator: GenerationOrchestrator,
    prompt: str,
    style_tags: Tuple[str, ...],
    ask_questions: bool,
    variation_index: Optional[int],
) -> Optional[VariationPanel]:
    await orchestrator.submit(prompt, style_tags)
    if isinstance(orchestrator.state, Clarifying):
        if ask_questions:
            for question in orchestrator.questions:
                answer = click.prompt(
                    question.text,
                    type=click.Choice(list(question.options)),
                    default=question.options[0],
                    show_choices=True,
                )
                orchestrator.answer_question(question.id, answer)
            await orchestrator.confirm_generation()
        else:
            await orchestrator.skip_clarification()

    if variation_index is None or orchestrator.store.current_session() is None:
        return None
    orchestrator.store.focus_artifact(variation_index)
    return await orchestrator.request_variations()


@cli.command()
@click.argument("prompt")
@click.option("--style", "style_tags", multiple=True, type=click.Choice(STYLE_PRESETS))
@click.option("--model", default=None, help="Model name, defaults to DEFAULT_MODEL")
@click.option("--count", type=click.IntRange(min=1), default=None, help="Artifacts to generate")
@click.option("--no-questions", is_flag=True, help="Skip the clarifying questions")
@click.option("--variations", "variation_index", type=click.IntRange(min=0), default=None,
              help="Stream variations of the artifact at this index afterwards")
@click.option("--output-dir", type=click.Path(file_okay=False), default=None)
@click.option("--mock", is_flag=True, help="Use the offline scripted client")
def generate(
    prompt: str,
    style_tags: Tuple[str, ...],
    model: Optional[str],
    count: Optional[int],
    no_questions: bool,
    variation_index: Optional[int],
    output_dir: Optional[str],
    mock: bool,
):
    """Generate several HTML/CSS variants of the component described by PROMPT."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    try:
        model_type = MockModelType.SCRIPTED if mock else parse_model_type(model or settings.DEFAULT_MODEL)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--model")

    artifact_count = count or settings.ARTIFACT_COUNT
    if variation_index is not None and variation_index >= artifact_count:
        raise click.BadParameter(
            f"must be below the artifact count ({artifact_count})", param_hint="--variations"
        )

    client = ClientFactory.get_llm_client(model_type, timeout=settings.LLM_TIMEOUT_SECONDS)
    store = InMemoryArtifactStore(artifact_count=artifact_count)
    orchestrator = GenerationOrchestrator(
        store, client, variation_temperature=settings.VARIATION_TEMPERATURE
    )
    store.subscribe(_progress_printer())

    panel = asyncio.run(
        _run_session(orchestrator, prompt, style_tags, not no_questions, variation_index)
    )
    session = store.current_session()
    if session is None:
        click.echo("Nothing to generate.")
        return

    target = Path(output_dir) if output_dir else None
    if target is not None:
        target.mkdir(parents=True, exist_ok=True)
        for artifact in session.artifacts:
            (target / f"{artifact.id}.html").write_text(artifact.html, encoding="utf-8")
        click.echo(f"Wrote {len(session.artifacts)} artifacts to {target}")

    if panel is not None:
        click.echo(f"\nVariations ({panel.status.value}):")
        for i, variation in enumerate(panel.variations):
            click.echo(f"- {variation.name}")
            if target is not None:
                path = target / f"{panel.artifact_id}_variation_{i}.html"
                path.write_text(variation.html, encoding="utf-8")


if __name__ == "__main__":
    cli()
