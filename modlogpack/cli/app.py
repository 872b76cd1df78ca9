import json
from importlib.metadata import PackageNotFoundError, version as package_version
import logging
from pathlib import Path
import sys
import time
import webbrowser
from dataclasses import dataclass
from typing import Any

import typer

from modlogpack.core.exceptions import ClipboardUnavailableError, InvalidInputError
from modlogpack.markup import render_markup
from modlogpack.session import ChangelogSession
from modlogpack.ui import UIServerConfig, build_ui_url, start_ui_server

app = typer.Typer(help="ModlogKit CLI")

_STDIN_PATH = "-"


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    no_color: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("modlogkit")
    except PackageNotFoundError:
        from modlogpack import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show ModlogKit version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable ANSI color output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Log diagnostic details to stderr.",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.no_color = no_color
    _OUTPUT_OPTIONS.stable_json = stable_json
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def _echo(message: str, *, err: bool = False, force: bool = False, newline: bool = True) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err, nl=newline, color=not _OUTPUT_OPTIONS.no_color)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err, color=not _OUTPUT_OPTIONS.no_color)


def _read_source(path: Path) -> str:
    if str(path) == _STDIN_PATH:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _report_failure(
    command: str,
    message: str,
    *,
    json_output: bool,
    extra: dict[str, Any] | None = None,
) -> None:
    text = f"{command} failed: {message}"
    if json_output:
        _echo_json(
            {
                "status": "error",
                "exit_code": 1,
                "message": text,
                **(extra or {}),
            }
        )
    else:
        _echo(text, err=True)


@app.command()
def generate(
    old: Path = typer.Argument(..., help="Path to the old mod list JSON ('-' for stdin)."),
    new: Path = typer.Argument(..., help="Path to the new mod list JSON ('-' for stdin)."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable changelog output.",
    ),
    html: bool = typer.Option(
        False,
        "--html",
        help="Print the rendered HTML preview instead of markup.",
    ),
    out: Path | None = typer.Option(
        None,
        "--out",
        help="Write the changelog markup to this file.",
    ),
    copy: bool = typer.Option(
        False,
        "--copy",
        help="Copy the changelog markup to the system clipboard.",
    ),
) -> None:
    """Generate a changelog from two mod list snapshots."""
    paths = {"old_path": str(old), "new_path": str(new)}
    if str(old) == _STDIN_PATH and str(new) == _STDIN_PATH:
        _report_failure(
            "generate",
            "stdin can be used for only one of OLD and NEW",
            json_output=json_output,
            extra=paths,
        )
        raise typer.Exit(code=1)

    session = ChangelogSession()
    try:
        old_text = _read_source(old)
        new_text = _read_source(new)
        result = session.generate(old_text, new_text)
    except InvalidInputError as error:
        _report_failure(
            "generate",
            f"{error.user_message} ({error})",
            json_output=json_output,
            extra=paths,
        )
        raise typer.Exit(code=1) from error
    except (OSError, UnicodeDecodeError) as error:
        _report_failure("generate", str(error), json_output=json_output, extra=paths)
        raise typer.Exit(code=1) from error

    if out is not None:
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(result.markup, encoding="utf-8")

    copied_with: str | None = None
    if copy:
        try:
            copied_with = session.copy()
        except ClipboardUnavailableError as error:
            _report_failure(
                "copy",
                f"{error.user_message} ({error})",
                json_output=json_output,
                extra=paths,
            )
            raise typer.Exit(code=1) from error

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "changelog generated",
                "out_path": str(out) if out is not None else None,
                "copied_with": copied_with,
                **paths,
            }
        )
        return

    _echo(result.html if html else result.markup, newline=html)
    if out is not None:
        _echo(f"changelog written: {out}", err=True)
    if copied_with is not None:
        _echo(f"copied to clipboard via {copied_with}", err=True)


@app.command()
def render(
    markup: Path = typer.Argument(..., help="Path to changelog markup ('-' for stdin)."),
) -> None:
    """Render changelog markup as sanitized HTML."""
    try:
        markup_text = _read_source(markup)
    except (OSError, UnicodeDecodeError) as error:
        _report_failure("render", str(error), json_output=False)
        raise typer.Exit(code=1) from error

    _echo(render_markup(markup_text))


@app.command()
def ui(
    host: str = typer.Option(
        "127.0.0.1",
        "--host",
        help="Host interface to bind local UI server.",
    ),
    port: int = typer.Option(
        4320,
        "--port",
        help="Port for local UI server (0 selects an ephemeral port).",
    ),
    browser: bool = typer.Option(
        False,
        "--browser/--no-browser",
        help="Open the local UI URL in default browser.",
    ),
    check: bool = typer.Option(
        False,
        "--check",
        help="Start server, verify startup path, then exit.",
    ),
) -> None:
    """Launch the local changelog generator page."""
    # Check mode should avoid fixed-port collisions in CI/local test runners.
    effective_port = 0 if check else port
    config = UIServerConfig(host=host, port=effective_port)

    with start_ui_server(config) as (server, _thread):
        bound_host, bound_port = server.server_address[:2]
        ui_url = build_ui_url(bound_host, bound_port)

        if check:
            _echo(f"ui check ok: {ui_url}")
            return

        _echo(f"ui running: {ui_url}")

        if browser:
            webbrowser.open(ui_url)

        try:
            while True:
                time.sleep(0.25)
        except KeyboardInterrupt:
            _echo("ui stopped")


def main() -> None:
    app()
