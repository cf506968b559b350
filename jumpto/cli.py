"""jumpto CLI — main entry point."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config import JumptoConfig
from .errors import JumptoError

app = typer.Typer(
    name="jumpto",
    help="Open the GitHub, CI and doc pages for the current git checkout",
    add_completion=False,
    no_args_is_help=True,
)
console = Console()

# --- Sub-command groups ---

config_app = typer.Typer(help="View and modify configuration and shortcuts")
app.add_typer(config_app, name="config")


# --- Helpers ---


@contextmanager
def _report_errors() -> Iterator[None]:
    """Turn jumpto errors into a message and a non-zero exit."""
    try:
        yield
    except JumptoError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc


def _local_repo_url() -> str:
    from .git import get_origin_url, parse_origin_url

    return parse_origin_url(get_origin_url(Path.cwd()))


def _launch(url: str, label: str, config: JumptoConfig, print_only: bool = False) -> None:
    """Print or open a URL. Shared by every command that ends in a browser."""
    from .opener import open_url

    if print_only:
        console.print(url, soft_wrap=True, markup=False, highlight=False)
        return
    open_url(url, browser=config.browser)
    console.print(f"[green]{label} has opened successfully[/green]")


def _print_shortcuts(entries: list[tuple[str, str]]) -> None:
    table = Table(show_header=True)
    table.add_column("Key", style="cyan")
    table.add_column("URL")
    for key, url in entries:
        table.add_row(escape(key), escape(url))
    console.print(table)


_PRINT_OPTION = typer.Option(False, "--print", "-p", help="Print the URL instead of opening it")


# --- Top-level commands ---


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """jumpto — jump from a terminal to the web pages behind a repository."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


@app.command()
def github(
    commit: str | None = typer.Option(None, "--commit", "-c", help="Open this commit"),
    head: bool = typer.Option(False, "--head", help="Open the current HEAD commit"),
    print_only: bool = _PRINT_OPTION,
) -> None:
    """Open the repository page of the origin remote."""
    from .urls import with_commit

    if commit and head:
        raise typer.BadParameter("Use either --commit or --head, not both")

    with _report_errors():
        config = JumptoConfig.load()
        url = _local_repo_url()
        if head:
            from .git import get_head_sha

            commit = get_head_sha(Path.cwd())
            if commit is None:
                raise JumptoError("Could not resolve HEAD (empty repository?)")
        if commit:
            url = with_commit(url, commit)
        _launch(url, "github", config, print_only)


@app.command()
def travis(print_only: bool = _PRINT_OPTION) -> None:
    """Open the CI page of the origin remote."""
    from .urls import to_ci_url

    with _report_errors():
        config = JumptoConfig.load()
        url = to_ci_url(_local_repo_url(), ci_host=config.ci_host, web_host=config.web_host)
        _launch(url, "travis", config, print_only)


@app.command()
def rust(
    search: str = typer.Option("", "--search", "-s", help="Term to search for"),
    print_only: bool = _PRINT_OPTION,
) -> None:
    """Search the Rust standard library docs."""
    from .urls import doc_search_url

    with _report_errors():
        config = JumptoConfig.load()
        _launch(doc_search_url(search, base=config.doc_search_url), "rust docs", config, print_only)


@app.command()
def url(
    key: str | None = typer.Argument(None, help="Shortcut to open. Omit to list all"),
    print_only: bool = _PRINT_OPTION,
) -> None:
    """Open a saved URL shortcut, or list them."""
    from .registry import ShortcutRegistry

    with _report_errors():
        config = JumptoConfig.load()
        registry = ShortcutRegistry.load(config.resolved_registry_path)

        if key is None:
            if not registry:
                console.print("[dim]No shortcuts yet. Add one with:[/dim] jumpto config url KEY URL")
                return
            _print_shortcuts(registry.list_sorted())
            return

        target = registry.get(key)
        if target is None:
            console.print(f"[yellow]No shortcut named[/yellow] {escape(key)}")
            if registry:
                console.print("Available shortcuts:")
                _print_shortcuts(registry.list_sorted())
            else:
                console.print("[dim]Add one with:[/dim] jumpto config url KEY URL")
            return

        _launch(target, key, config, print_only)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"jumpto v{__version__}")


# --- Config sub-commands ---


@config_app.command("url")
def config_url(
    key: str = typer.Argument(..., help="Shortcut key"),
    target: str = typer.Argument(..., metavar="URL", help="URL the shortcut opens"),
) -> None:
    """Add or update a URL shortcut."""
    from .registry import ShortcutRegistry

    if not key:
        console.print("[red]Shortcut key must not be empty[/red]")
        raise typer.Exit(code=1)

    with _report_errors():
        config = JumptoConfig.load()
        path = config.resolved_registry_path
        registry = ShortcutRegistry.load(path)
        updated = registry.upsert(key, target)
        registry.save(path)

    verb = "Updated" if updated else "Added"
    console.print(f"[green]{verb}[/green] {escape(key)} -> {escape(target)}", soft_wrap=True)


@config_app.command("show")
def config_show() -> None:
    """Show current configuration."""
    from dataclasses import asdict

    import yaml
    from rich.syntax import Syntax

    with _report_errors():
        config = JumptoConfig.load()
    content = yaml.dump(asdict(config), default_flow_style=False)
    console.print(Syntax(content, "yaml", theme="monokai"))
