#!/usr/bin/env python3
"""Command-line entry point for Melodic Dictation."""

import random
import sys

import click

from .core.config import ConfigManager
from .core.factory import ComponentFactory
from .logger import get_logger
from .logging_config import setup_logging
from .note_matcher import NoteFormatError, NoteMatcher
from .note_utils import to_asset_key, to_display
from .questions import NOTES_TO_LOAD
from .ui import TerminalUI

logger = get_logger(__name__)


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Configuration directory (default: ~/.config/melodic_dictation).",
)
@click.pass_context
def cli(ctx, debug, config_dir):
    """Melodic Dictation - identify four notes by ear."""
    setup_logging(level="DEBUG" if debug else "WARNING")
    ctx.ensure_object(dict)
    ctx.obj["config_dir"] = config_dir


@cli.command()
@click.option("--sounds-dir", type=click.Path(file_okay=False), default=None, help="Directory with note clips (C4.wav, Fs4.wav, ...).")
@click.option("--questions", "-n", type=int, default=None, help="Number of questions (default: 15).")
@click.option("--duration", "-d", type=float, default=None, help="Seconds between notes (0.2-0.8).")
@click.option("--retry/--no-retry", default=None, help="Retry a question after a wrong answer.")
@click.option("--device", type=int, default=None, help="Audio output device ID.")
@click.option("--seed", type=int, default=None, help="Random seed for question order.")
@click.option("--no-audio", is_flag=True, help="Run without sound.")
@click.pass_context
def play(ctx, sounds_dir, questions, duration, retry, device, seed, no_audio):
    """Run an interactive dictation quiz."""
    factory = ComponentFactory(ConfigManager(ctx.obj["config_dir"]))

    quiz_overrides = {}
    if questions is not None:
        quiz_overrides["total_questions"] = questions
    if retry is not None:
        quiz_overrides["retry_on_incorrect"] = retry
    session = factory.create_session(rng=random.Random(seed), **quiz_overrides)

    sequencer = None
    if not no_audio:
        try:
            player = factory.create_audio_player(device_id=device)
        except OSError as e:
            # sounddevice raises OSError when the PortAudio library is missing
            logger.error(f"Audio output unavailable: {e}")
            click.secho("Audio output unavailable, continuing without sound.", fg="yellow")
        else:
            assets = factory.create_asset_cache(
                **({"sounds_dir": sounds_dir} if sounds_dir else {})
            )
            assets.preload(NOTES_TO_LOAD)
            playback_overrides = {"note_duration": duration} if duration is not None else {}
            sequencer = factory.create_sequencer(assets=assets, player=player, **playback_overrides)

    ui = TerminalUI(session, sequencer)
    try:
        ui.run()
    finally:
        if sequencer is not None:
            sequencer.player.stop()
        logger.info("Melodic Dictation is shutting down.")


@cli.command()
@click.argument("tokens", nargs=-1, required=True)
def normalize(tokens):
    """Show the canonical, display and asset forms of note TOKENS."""
    failed = False
    for token in tokens:
        try:
            note = NoteMatcher.normalize(token)
        except NoteFormatError as e:
            click.secho(str(e), fg="red", err=True)
            failed = True
            continue
        click.echo(f"{token}\t{note}\t{to_display(note)}\t{to_asset_key(note)}")
    if failed:
        sys.exit(1)


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
