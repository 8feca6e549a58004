"""Command-line interface for gql-tsgen."""

import asyncio
import logging
from pathlib import Path

import click
from pydantic import ValidationError

from .core.config import GeneratorSettings
from .core.emitter import EmissionDriver, generate_artifacts, list_operations
from .core.errors import GeneratorError
from .core.policies import TruncationPolicy, WriteConflictPolicy

OPERATION_KINDS = click.Choice(["query", "mutation"])


def configure_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def build_settings(**options) -> GeneratorSettings:
    """Validate CLI options into settings."""
    try:
        return GeneratorSettings(**options)
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e


def timeout_option(f):
    return click.option(
        "--timeout",
        default=30.0,
        show_default=True,
        type=float,
        help="Introspection request timeout in seconds.",
    )(f)


def verbose_option(f):
    return click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output.",
    )(f)


@click.group()
@click.version_option(package_name="gql-tsgen")
def main():
    """Generate graphql-tag operation modules from a GraphQL endpoint.

    The schema is fetched with an introspection query.
    """
    pass


@main.command(name="list")
@click.argument("url")
@click.argument("kind", type=OPERATION_KINDS)
@timeout_option
@verbose_option
def list_command(url: str, kind: str, timeout: float, verbose: bool):
    """List the queries or mutations available at URL.

    Examples:

        gql-tsgen list https://api.example.com/graphql query
    """
    configure_logging(verbose)
    settings = build_settings(timeout=timeout)

    try:
        names = asyncio.run(list_operations(url, kind, settings))
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    for name in names:
        click.echo(name)


@main.command()
@click.argument("url")
@click.argument("kind", type=OPERATION_KINDS)
@click.argument("operations", nargs=-1)
@click.option(
    "--write",
    is_flag=True,
    help="Write the generated code to the filesystem instead of stdout.",
)
@click.option(
    "--output-dir",
    "-o",
    default=".",
    show_default=True,
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Existing directory the files are written to.",
)
@click.option(
    "--max-depth",
    default=2,
    show_default=True,
    type=click.IntRange(min=0),
    help="Maximum nesting of object selections.",
)
@click.option(
    "--truncation",
    default=TruncationPolicy.BARE_FIELD.value,
    show_default=True,
    type=click.Choice([p.value for p in TruncationPolicy]),
    help="What to emit for object fields at the depth limit.",
)
@click.option(
    "--on-conflict",
    default=WriteConflictPolicy.ALL_OR_NOTHING.value,
    show_default=True,
    type=click.Choice([p.value for p in WriteConflictPolicy]),
    help="How to handle files that already exist.",
)
@timeout_option
@verbose_option
def generate(
    url: str,
    kind: str,
    operations: tuple[str, ...],
    write: bool,
    output_dir: Path,
    max_depth: int,
    truncation: str,
    on_conflict: str,
    timeout: float,
    verbose: bool,
):
    """Generate the code for the listed OPERATIONS of KIND at URL.

    Examples:

        gql-tsgen generate https://api.example.com/graphql query user users

        gql-tsgen generate https://api.example.com/graphql mutation addUser --write
    """
    configure_logging(verbose)
    settings = build_settings(
        max_depth=max_depth,
        truncation=TruncationPolicy(truncation),
        conflict_policy=WriteConflictPolicy(on_conflict),
        timeout=timeout,
    )

    try:
        artifacts = asyncio.run(generate_artifacts(url, kind, list(operations), settings))
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    if not write:
        click.echo(EmissionDriver.render_listing(artifacts), nl=False)
        return

    result = EmissionDriver.write(artifacts, output_dir, settings.conflict_policy)
    for path in result.written:
        click.echo(f"Written to {path}")
    if result.skipped:
        existing = ", ".join(path.name for path in result.conflicts)
        click.echo(f"Already exists: {existing}. Not written: {len(result.skipped)} file(s).", err=True)


if __name__ == "__main__":
    main()
