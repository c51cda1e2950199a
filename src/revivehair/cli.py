"""Command-line interface for ReviveHair."""

from __future__ import annotations

import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from revivehair import __version__
from revivehair.content import FAQ_TIPS, FAQ_TITLE, RECOMMENDATIONS, RECOMMENDATIONS_HEADING
from revivehair.errors import ConfigError, get_friendly_message

# Load environment variables from .env file
load_dotenv()

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="revivehair")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """ReviveHair - Hair loss detection and prevention demo app."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@main.command()
@click.option("--web", is_flag=True, help="Open in a web browser instead of a native window")
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Config file to use (default: search standard locations)",
)
def gui(web: bool, config_file: Path | None) -> None:
    """Launch the ReviveHair app."""
    from revivehair.gui.app import run_app

    run_app(web_mode=web, config_path=config_file)


@main.command()
@click.option("-v", "--verbose", is_flag=True, help="Show the full text of each tip")
@click.pass_context
def tips(ctx: click.Context, verbose: bool) -> None:
    """Show hair care tips from the FAQ."""
    verbose = verbose or ctx.obj.get("verbose", False)

    table = Table(title=FAQ_TITLE, show_lines=verbose)
    table.add_column("#", style="dim", justify="right")
    table.add_column("Tip", style="bold")
    if verbose:
        table.add_column("Details")

    for index, tip in enumerate(FAQ_TIPS, start=1):
        if verbose:
            table.add_row(str(index), tip.title, tip.detail)
        else:
            table.add_row(str(index), tip.title)

    console.print(table)
    if not verbose:
        console.print("[dim]Use -v for details.[/dim]")


@main.command()
def recommendations() -> None:
    """Show personalized hair health recommendations."""
    console.print(f"[bold blue]{RECOMMENDATIONS_HEADING}[/bold blue]")
    console.print()
    for rec in RECOMMENDATIONS:
        console.print(f"  - {rec.title}")


@main.group()
def config() -> None:
    """Manage ReviveHair configuration."""
    pass


@config.command(name="show")
def config_show() -> None:
    """Show current configuration."""
    from revivehair.config import find_config_file, load_config

    config_file = find_config_file()
    try:
        cfg = load_config(config_file)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {get_friendly_message(e)}")
        sys.exit(1)

    console.print("[bold]Current Configuration[/bold]")
    console.print()
    if config_file:
        console.print(f"[dim]Config file:[/dim] {config_file}")
    else:
        console.print("[dim]Config file:[/dim] (none - using defaults)")
    console.print()

    console.print("[bold]Splash:[/bold]")
    console.print(f"  Delay: {cfg.splash.delay_seconds:g}s")
    console.print()

    console.print("[bold]Carousel:[/bold]")
    console.print(f"  Interval: {cfg.carousel.interval_seconds:g}s")
    console.print(f"  Transition: {cfg.carousel.transition_ms} ms")
    console.print(f"  Images: {', '.join(cfg.carousel.images) or '(none)'}")
    console.print()

    console.print("[bold]Window:[/bold]")
    console.print(f"  Size: {cfg.window.width}x{cfg.window.height}")
    console.print(f"  Dark mode: {cfg.appearance.dark_mode}")


@config.command(name="path")
def config_path() -> None:
    """Show configuration file paths."""
    from revivehair.config import find_config_file, get_config_paths
    from revivehair.gui.errors import get_log_file_path

    console.print("[bold]Configuration paths (in priority order):[/bold]")
    config_file = find_config_file()

    for path in get_config_paths():
        if path.exists():
            if path == config_file:
                console.print(f"  [green]{path}[/green] (active)")
            else:
                console.print(f"  {path} (exists)")
        else:
            console.print(f"  [dim]{path}[/dim]")

    console.print()
    console.print("[bold]Other paths:[/bold]")
    console.print(f"  Log file: {get_log_file_path()}")
    console.print(f"  .env file: {Path.cwd() / '.env'}")


@config.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite existing config file")
def config_init(force: bool) -> None:
    """Create a default configuration file."""
    from revivehair.config import get_config_dir, save_default_config

    config_file = get_config_dir() / "revivehair.ini"

    if config_file.exists() and not force:
        console.print(f"[yellow]Config file already exists:[/yellow] {config_file}")
        console.print("Use --force to overwrite.")
        sys.exit(1)

    save_default_config(config_file)
    console.print(f"[green]Created config file:[/green] {config_file}")
    console.print("Edit this file to customize your settings.")


if __name__ == "__main__":
    main()
