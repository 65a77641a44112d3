from __future__ import annotations

import json
from typing import Any, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import SegmentConfig
from .doctor import collect_doctor_info
from .errors import InvalidConfigError, OptionalDependencyError
from .notify import default_press_handlers, get_notifier
from .rendering import to_rich_text
from .segment_render import analyze_segments_with_config

app = typer.Typer(add_completion=False, no_args_is_help=True)
_console = Console()


def _load_api() -> tuple[Any, Any]:
    try:
        import uvicorn

        from .api_service import app as api_app
    except ImportError as e:
        raise OptionalDependencyError(
            "HTTP API dependencies are not installed. Install with: `pip install -e \".[api]\"`"
        ) from e
    return uvicorn, api_app


@app.command()
def segment(
    text: str = typer.Argument(..., help="Input text to segment."),
    hashtags: bool = typer.Option(True, help="Recognize #hashtags."),
    mentions: bool = typer.Option(True, help="Recognize @mentions."),
    links: bool = typer.Option(True, help="Recognize links (URLs, e-mail addresses, bare domains)."),
    props: bool = typer.Option(True, help="Recognize ?prop tokens."),
    emoji: bool = typer.Option(True, help="Tag emoji-only tokens."),
    as_json: bool = typer.Option(False, "--json", help="Print segments as JSON instead of styled text."),
    table: bool = typer.Option(False, "--table", help="Print one row per segment."),
    notifier: Optional[str] = typer.Option(
        None, help="Notifier for default press handlers: alert or log (default: $TTK_NOTIFIER, then log)."
    ),
    press: Optional[int] = typer.Option(
        None, "--press", help="Press the segment at this index after printing (runs its default handler)."
    ),
) -> None:
    """Split text into styled, tappable segments."""
    cfg = SegmentConfig(
        extract_hashtags=hashtags,
        extract_mentions=mentions,
        extract_links=links,
        extract_props=props,
        extract_emoji=emoji,
    )
    try:
        handlers = default_press_handlers(notifier=get_notifier(notifier))
    except InvalidConfigError as e:
        raise typer.BadParameter(str(e), param_hint="--notifier") from e
    a = analyze_segments_with_config(text, config=cfg, handlers=handlers)
    if press is not None and not 0 <= press < len(a.segments):
        raise typer.BadParameter(
            f"segment index out of range (0..{len(a.segments) - 1})", param_hint="--press"
        )

    if as_json:
        typer.echo(json.dumps(a.to_dict(), ensure_ascii=False, indent=2))
    elif table:
        t = Table("#", "kind", "text", "value", "tappable")
        for i, s in enumerate(a.segments):
            t.add_row(str(i), s.kind.value, escape(repr(s.text)), escape(s.value or ""), "yes" if s.tappable else "")
        _console.print(t)
    else:
        _console.print(to_rich_text(a.segments))

    if press is not None:
        a.segments[press].press()


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind address."),
    port: int = typer.Option(8000, help="Bind port."),
) -> None:
    """Run the HTTP API (needs the `api` extra)."""
    try:
        uvicorn, api_app = _load_api()
    except OptionalDependencyError as e:
        _console.print(f"[red]{escape(str(e))}[/red]")
        raise typer.Exit(code=2)
    uvicorn.run(api_app, host=host, port=port)


@app.command()
def doctor() -> None:
    """Print an environment report as JSON."""
    typer.echo(json.dumps(collect_doctor_info(), ensure_ascii=True, indent=2))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
