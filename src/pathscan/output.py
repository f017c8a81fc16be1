"""Output formatting for pathscan commands."""

from collections.abc import Sequence

import typer

from pathscan.models import Resource


def print_resources(
    package: str, resources: Sequence[Resource], show_locations: bool = False
) -> None:
    """Print scanned resources to stdout.

    Args:
        package: Dotted package that was scanned
        resources: Resources in scan order
        show_locations: Also print where each resource lives
    """
    for resource in resources:
        if show_locations:
            typer.echo(f"{resource.name} -> {resource.location}")
        else:
            typer.echo(resource.name)

    count = len(resources)
    if count == 0:
        typer.secho(
            f"No resources found in {package}", fg=typer.colors.YELLOW, err=True
        )
        return
    typer.secho(
        f"✓ Found {count} resource{'s' if count != 1 else ''} in {package}",
        fg=typer.colors.GREEN,
        bold=True,
        err=True,
    )


def print_roots(package: str, uris: Sequence[str]) -> None:
    """Print located search roots to stdout.

    Args:
        package: Dotted package that was located
        uris: Root location URIs in search order
    """
    for uri in uris:
        typer.echo(uri)

    count = len(uris)
    typer.secho(
        f"{count} root{'s' if count != 1 else ''} for {package}",
        fg=typer.colors.BRIGHT_BLACK,
        err=True,
    )


def print_error(message: str) -> None:
    """Print an error line to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
