"""CLI entry point for figscribe."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
import yaml
from pydantic import ValidationError
from rich import print as rprint
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax

from figscribe.config import FigscribeConfig, load_config
from figscribe.config.loader import DEFAULT_CONFIG_TEMPLATE
from figscribe.nodes import Node, load_nodes, select_supported
from figscribe.prompt import GenerateRequest, PromptBuilder
from figscribe.render import render_nodes

app = typer.Typer(
    name="figscribe",
    help="Describe design node trees as text for code-generation prompts.",
)

config_app = typer.Typer(help="Manage figscribe configuration.")
app.add_typer(config_app, name="config")

# Global state
_config: FigscribeConfig | None = None

_LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}


class _JsonFormatter(logging.Formatter):
    """One JSON object per log record."""

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps({
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        })


def _configure_logging(cfg: FigscribeConfig) -> None:
    handler = logging.StreamHandler()
    if cfg.log_format == "json":
        handler.setFormatter(_JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("figscribe")
    root.handlers = [handler]
    root.setLevel(_LOG_LEVELS[cfg.log_level])


def _get_config() -> FigscribeConfig:
    if _config is None:
        return load_config()
    return _config


@app.callback()
def main(
    config: Annotated[
        str | None, typer.Option("--config", "-c", help="Path to figscribe.yaml")
    ] = None,
) -> None:
    """Global options."""
    global _config
    try:
        _config = load_config(config)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    _configure_logging(_config)


def _load_selection(nodes_file: str) -> list[Node]:
    try:
        return load_nodes(nodes_file)
    except FileNotFoundError:
        rprint(f"[red]Error:[/red] file not found: {nodes_file}")
        raise typer.Exit(1)
    except ValueError as e:
        rprint(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)


@app.command()
def render(
    nodes_file: str = typer.Argument(..., help="JSON or YAML export of the selected nodes"),
) -> None:
    """Print the layout description for a node selection."""
    cfg = _get_config()
    selection = _load_selection(nodes_file)
    if not selection:
        rprint(f"[yellow]{cfg.prompt.no_selection_notice}[/yellow]")
        raise typer.Exit(0)
    text = render_nodes(select_supported(selection), indent_width=cfg.render.indent_width)
    typer.echo(text)


@app.command()
def prompt(
    nodes_file: str = typer.Argument(..., help="JSON or YAML export of the selected nodes"),
    framework: Annotated[
        str | None, typer.Option("--framework", "-f", help="Target UI framework")
    ] = None,
    database: Annotated[
        str | None, typer.Option("--database", "-d", help="Database technology, or 'none'")
    ] = None,
    description: Annotated[
        str, typer.Option("--description", help="Free-form component description")
    ] = "",
    output: Annotated[
        str | None, typer.Option("--output", "-o", help="Write the prompt to this file")
    ] = None,
) -> None:
    """Build the full code-generation prompt for a node selection."""
    cfg = _get_config()
    selection = _load_selection(nodes_file)

    try:
        request = GenerateRequest(
            framework=framework or cfg.prompt.default_framework,
            database=database if database is not None else cfg.prompt.default_database,
            description=description,
        )
    except ValidationError as e:
        rprint(f"[red]Error:[/red] invalid prompt options: {escape(str(e))}")
        raise typer.Exit(1)

    builder = PromptBuilder(cfg.prompt, cfg.render)
    text = builder.build(selection, request)

    if output:
        dest = Path(output)
        dest.parent.mkdir(parents=True, exist_ok=True)
        dest.write_text(text, encoding="utf-8")
        rprint(Panel(
            f"[dim]File:[/dim]       {dest}\n"
            f"[dim]Framework:[/dim]  {request.framework}\n"
            f"[dim]Nodes:[/dim]      {len(selection)}\n"
            f"[dim]Size:[/dim]       {len(text)} bytes",
            title="Prompt Written",
            border_style="green",
        ))
    else:
        typer.echo(text)


@config_app.command("show")
def config_show() -> None:
    """Show current resolved configuration."""
    cfg = _get_config()
    rprint(Syntax(yaml.dump(cfg.model_dump(), default_flow_style=False), "yaml"))


@config_app.command("init")
def config_init(
    force: bool = typer.Option(False, "--force", help="Overwrite existing config"),
) -> None:
    """Create default figscribe.yaml in current directory."""
    target = Path("figscribe.yaml")
    if target.exists() and not force:
        rprint("[yellow]figscribe.yaml already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)
    target.write_text(DEFAULT_CONFIG_TEMPLATE)
    rprint(f"[green]Created[/green] {target}")
