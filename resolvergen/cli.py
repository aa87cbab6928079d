"""
Command line entry point for resolvergen.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from resolvergen import __version__
from resolvergen.exceptions import ConfigurationError, ResolverGenError
from resolvergen.formatting import format_code
from resolvergen.generator import GenerateArgs, generate
from resolvergen.introspection import SDL_EXTENSIONS, load_schema_graph
from resolvergen.logging import configure_logging, get_logger
from resolvergen.settings import (
    DEFAULT_CONFIG_FILE,
    ResolverGenSettings,
    generate_args_from_settings,
    load_settings,
    resolvergen_settings,
)

logger = get_logger(__name__)

_config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_CONFIG_FILE,
    show_default=True,
    help="YAML configuration file",
)
_schema_option = click.option(
    "--schema",
    default=None,
    help="SDL file or `module:symbol` of a schema, overrides the configuration",
)
_app_dir_option = click.option(
    "--app-dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory added to the module search path when importing a schema",
)
_log_level_option = click.option(
    "--log-level",
    default="info",
    type=click.Choice(["debug", "info", "warning", "error"]),
    help="Log level (default: info)",
)


@click.group()
@click.version_option(version=__version__, prog_name="resolvergen")
def cli() -> None:
    """resolvergen - TypeScript resolver types for GraphQL schemas."""


def _load_args(
    config_path: Path,
    schema: Optional[str],
    output: Optional[str],
    app_dir: Path,
) -> tuple[ResolverGenSettings, GenerateArgs]:
    if config_path.exists():
        settings = load_settings(config_path)
        base_dir = config_path.parent
    elif schema is not None:
        settings = resolvergen_settings()
        base_dir = Path.cwd()
    else:
        raise ConfigurationError(
            f"Configuration file {config_path} not found and no --schema given",
        )

    if schema is not None:
        if Path(schema).suffix in SDL_EXTENSIONS:
            schema = str(Path(schema).resolve())
        settings["SCHEMA"] = schema
    if output is not None:
        settings["OUTPUT"] = str(Path(output).resolve())

    if not settings["SCHEMA"]:
        raise ConfigurationError("No schema configured")

    app_path = str(app_dir.resolve())
    if app_path not in sys.path:
        sys.path.insert(0, app_path)
    graph = load_schema_graph(settings["SCHEMA"], base_dir=base_dir)
    return settings, generate_args_from_settings(settings, graph, base_dir=base_dir)


@cli.command("generate")
@_config_option
@_schema_option
@click.option(
    "--output",
    "-o",
    default=None,
    help="Output file, overrides the configuration. Use - for stdout.",
)
@_app_dir_option
@click.option(
    "--format/--no-format",
    "format_",
    default=None,
    help="Run the output through prettier (default: from configuration)",
)
@_log_level_option
def generate_command(
    config_path: Path,
    schema: Optional[str],
    output: Optional[str],
    app_dir: Path,
    format_: Optional[bool],
    log_level: str,
) -> None:
    """Generate resolver type declarations."""
    configure_logging(debug=(log_level == "debug"))

    to_stdout = output == "-"
    try:
        settings, args = _load_args(
            config_path,
            schema,
            None if to_stdout else output,
            app_dir,
        )
        code = generate(args)
        if settings["FORMAT"] if format_ is None else format_:
            code = format_code(code, command=settings["PRETTIER_COMMAND"])
    except ResolverGenError as e:
        raise click.ClickException(e.message) from e

    if to_stdout or args.output is None:
        click.echo(code, nl=False)
        return

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(code, encoding="utf-8")
    logger.info(
        "Generated resolver types",
        output=str(args.output),
        objects=len(args.graph.objects),
        interfaces=len(args.graph.interfaces),
        unions=len(args.graph.unions),
    )


@cli.command("check-config")
@_config_option
@_schema_option
@_app_dir_option
@_log_level_option
def check_config_command(
    config_path: Path,
    schema: Optional[str],
    app_dir: Path,
    log_level: str,
) -> None:
    """Validate the configuration and list types without a backing model."""
    configure_logging(debug=(log_level == "debug"))

    try:
        _, args = _load_args(config_path, schema, None, app_dir)
    except ResolverGenError as e:
        raise click.ClickException(e.message) from e

    graph = args.graph
    unbound = args.models.unbound(graph.resolver_type_names)
    click.echo(
        f"Schema: {len(graph.objects)} object(s), {len(graph.interfaces)} "
        f"interface(s), {len(graph.unions)} union(s)",
    )
    if unbound:
        click.echo(f"Without backing model: {', '.join(unbound)}")
    else:
        click.echo("Every type has a backing model")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
