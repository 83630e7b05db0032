#!/usr/bin/env python3
"""Japanese Mahjong shanten calculator - terminal CLI"""

import argparse

from rich.console import Console
from rich.panel import Panel

from mjshanten.engine.analysis_logger import AnalysisLogger
from mjshanten.engine.command import LANGUAGES, OutputFormat
from mjshanten.engine.event import EventBus
from mjshanten.engine.session import AnalysisSession, AnalyzerConfig, ReplyType
from mjshanten.ui.i18n import t, set_language
from mjshanten.ui.renderer import Renderer

console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the command-line argument parser."""
    parser = argparse.ArgumentParser(description="Japanese Mahjong shanten calculator")
    parser.add_argument("--json", action="store_true", help="start with JSON output")
    parser.add_argument("--lang", choices=LANGUAGES, default="zh", help="UI language")
    parser.add_argument("--no-log", action="store_true", help="do not save a session log")
    parser.add_argument("--no-useful", action="store_true", help="hide useful tiles")
    parser.add_argument("--log-dir", help="directory for session logs")
    return parser


def build_config(args: argparse.Namespace) -> AnalyzerConfig:
    return AnalyzerConfig(
        language=args.lang,
        output_format=OutputFormat.JSON if args.json else OutputFormat.STANDARD,
        show_useful_tiles=not args.no_useful,
        save_log=not args.no_log,
        log_dir=args.log_dir,
    )


def input_prompt(config: AnalyzerConfig) -> str:
    """Prompt text for the next line; empty in JSON mode."""
    if config.output_format == OutputFormat.JSON:
        return ""
    return f"{t('prompt.input')} "


def show_banner(session_id: str):
    console.print()
    console.print(Panel(
        f"[bold cyan]{t('label.title')}[/bold cyan]\n"
        f"[dim]{t('label.subtitle')}[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    console.print(f"  [dim]{t('msg.session_id', id=session_id)}[/dim]")
    console.print()


def run_session(config: AnalyzerConfig):
    """Read one line per command until exit or end of input."""
    event_bus = EventBus()
    logger = AnalysisLogger(config.to_dict(), log_dir=config.log_dir)
    logger.subscribe_events(event_bus)

    session = AnalysisSession(config, event_bus)
    renderer = Renderer(console)

    if config.output_format == OutputFormat.STANDARD:
        show_banner(logger.session_id)
    session.start()

    try:
        while not session.is_finished:
            try:
                line = console.input(input_prompt(config))
            except EOFError:
                break
            reply = session.execute(line)
            renderer.render(reply, config.output_format)
            if reply.reply_type == ReplyType.EXIT:
                break
    finally:
        session.finish()
        if config.save_log:
            log_path = logger.save()
            if config.output_format == OutputFormat.STANDARD:
                console.print(f"  [dim]{t('msg.log_saved', path=log_path)}[/dim]")

    if config.output_format == OutputFormat.STANDARD:
        console.print(f"\n  {t('msg.goodbye')}\n")


def main():
    """Main entry point."""
    args = create_parser().parse_args()
    config = build_config(args)
    set_language(config.language)
    try:
        run_session(config)
    except KeyboardInterrupt:
        console.print(f"\n\n  [dim]{t('msg.goodbye')}[/dim]\n")


if __name__ == "__main__":
    main()
