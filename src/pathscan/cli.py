"""Command-line interface for pathscan."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from pathscan import __version__
from pathscan.exceptions import ArchiveOpenError
from pathscan.exceptions import MalformedLocationError
from pathscan.exceptions import PathscanError
from pathscan.exceptions import ResolutionError
from pathscan.exceptions import SettingsValidationError
from pathscan.exceptions import SettingsVersionError
from pathscan.exceptions import WalkError
from pathscan.files.paths import package_to_path
from pathscan.models import RootErrorMode
from pathscan.operations import ResourceCollector
from pathscan.operations import RootLocator
from pathscan.operations import SearchPathLoader
from pathscan.output import print_error
from pathscan.output import print_resources
from pathscan.output import print_roots
from pathscan.settings import Settings

app = typer.Typer(help="Search-path resource scanner")

PathOption = Annotated[
    list[Path] | None,
    typer.Option(
        "--path",
        "-p",
        help="Directory or zip file to search (repeatable, default: sys.path)",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Settings file (default: user config dir)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathscan {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log every root and resource")
    ] = False,
) -> None:
    """Search-path resource scanner."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_settings(config: Path | None) -> Settings:
    try:
        return Settings.load(config)
    except (SettingsValidationError, SettingsVersionError) as e:
        print_error(f"Settings error: {e}")
        raise typer.Exit(1) from None


def _search_path(paths: list[Path] | None, settings: Settings) -> list[str] | None:
    # --path beats the settings file; neither means sys.path
    if paths:
        return [str(p) for p in paths]
    if settings.search_path:
        return settings.search_path
    return None


@app.command()
def scan(
    package: Annotated[str, typer.Argument(help="Dotted package, e.g. app.data")],
    path: PathOption = None,
    on_error: Annotated[
        RootErrorMode | None,
        typer.Option(help="What to do when one root cannot be read"),
    ] = None,
    follow_symlinks: Annotated[
        bool | None,
        typer.Option(
            "--follow-symlinks/--no-follow-symlinks",
            help="Descend into symlinked directories (default: from settings)",
        ),
    ] = None,
    locations: Annotated[
        bool, typer.Option("--locations", "-l", help="Show where each file lives")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """List every file under a package across all search roots."""
    settings = _load_settings(config)
    collector = ResourceCollector(
        loader=SearchPathLoader(_search_path(path, settings)),
        on_root_error=on_error or settings.on_root_error,
        follow_symlinks=(
            settings.follow_symlinks if follow_symlinks is None else follow_symlinks
        ),
    )

    try:
        resources = collector.scan(package, lambda resource: resource)
    except ResolutionError as e:
        print_error(f"Cannot resolve search path: {e}")
        raise typer.Exit(1) from None
    except MalformedLocationError as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except (ArchiveOpenError, WalkError) as e:
        print_error(f"Scan aborted: {e}")
        typer.secho("   Run with --on-error=skip to scan remaining roots", err=True)
        raise typer.Exit(1) from None
    except PathscanError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None

    print_resources(package, resources, show_locations=locations)


@app.command()
def roots(
    package: Annotated[str, typer.Argument(help="Dotted package, e.g. app.data")],
    path: PathOption = None,
    config: ConfigOption = None,
) -> None:
    """List the search roots that contain a package."""
    settings = _load_settings(config)
    locator = RootLocator(SearchPathLoader(_search_path(path, settings)))

    try:
        uris = locator.locate(package_to_path(package))
    except ResolutionError as e:
        print_error(f"Cannot resolve search path: {e}")
        raise typer.Exit(1) from None

    print_roots(package, uris)


def main() -> None:
    """Main entry point for the pathscan CLI."""
    app()


if __name__ == "__main__":
    main()
