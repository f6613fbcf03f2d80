"""Page Inspector CLI — run inspections from the terminal or serve the API.

Usage:
    python cli/main.py --help

Commands:
    section   → look for a phrase inside a named page section
    links     → list matching links inside a container element
    result    → the full ``GET /result`` envelope as JSON
    serve     → run the HTTP API under uvicorn
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from inspector.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import typer

from cli.rendering import render_json, render_links, render_outcome
from inspector.config import configure_logging
from inspector.dispatcher import InspectRequest, build_result
from inspector.scraper import find_specific_links_in_div, search_text_in_section

app = typer.Typer(
    name="inspector",
    help="Page Inspector CLI.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    configure_logging(verbose=verbose)


@app.command("section")
def section(
    url: str = typer.Option(..., help="Page to fetch."),
    search_text: str = typer.Option(..., help="Phrase to look for."),
    section_identifier: str = typer.Option(
        ..., "--section", help="Text identifying the section (e.g. 'Winter 2024')."
    ),
) -> None:
    """Check whether a phrase appears inside a named section of a page."""
    outcome = search_text_in_section(url, search_text, section_identifier)
    typer.echo(render_outcome(outcome))
    if not outcome.found:
        raise typer.Exit(1)


@app.command("links")
def links(
    url: str = typer.Option(..., help="Page to fetch."),
    div_id: str = typer.Option(..., help="Id of the container element."),
    link_text: str = typer.Option("", help="Substring the link text must contain."),
) -> None:
    """List the links inside a container whose text contains a substring."""
    matches = find_specific_links_in_div(url, div_id, link_text)
    if not matches:
        typer.echo(f"[links] No links matching {link_text!r} inside #{div_id}.")
        return
    typer.echo(f"[links] {len(matches)} link(s) inside #{div_id}:")
    typer.echo(render_links(matches))


@app.command("result")
def result(
    url: str = typer.Option(..., help="Page to fetch."),
    search_text: str = typer.Option("", help="Phrase to look for."),
    section_identifier: str = typer.Option("", "--section", help="Section identifier."),
    div_id: str = typer.Option("", help="Id of the container element."),
    link_text: str = typer.Option("", help="Substring the link text must contain."),
) -> None:
    """Print the same JSON envelope ``GET /result`` returns."""
    request = InspectRequest(
        path="/result",
        url=url,
        search_text=search_text,
        section_identifier=section_identifier,
        div_id=div_id,
        link_text_to_find=link_text,
    )
    typer.echo(render_json(build_result(request)))


@app.command("serve")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Reload on code changes."),
) -> None:
    """Run the HTTP API under uvicorn."""
    import uvicorn  # noqa: PLC0415

    uvicorn.run("inspector.api.app:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
