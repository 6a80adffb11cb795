"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from class_json_sampler.configuration import (
    DEFAULT_CONFIG_FILENAME,
    write_placeholder_configuration,
)
from class_json_sampler.conversion import (
    CatalogRequest,
    ConversionError,
    ConversionRequest,
    execute_class_conversion,
    list_catalog_types,
)
from class_json_sampler.sample_resolution import DepthExceededError

CONVERSION_FAILED_MESSAGE = "Convert to JSON failed."

_LOGGER = logging.getLogger(__name__)


class CliError(Exception):
    """Custom CLI error."""


def _catalog_options(command):
    command = click.option(
        "--config",
        "config_path",
        required=False,
        type=click.Path(path_type=str),
        help="Path to a YAML configuration file listing type catalogs",
    )(command)
    return click.option(
        "--catalog",
        "catalog_paths",
        multiple=True,
        type=click.Path(path_type=str),
        help="Type catalog document (YAML or JSON); may be repeated",
    )(command)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="class-json-sampler")
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
def cli(verbose: bool) -> None:
    """Generate sample JSON documents from declared class types."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML configuration template to write",
)
def generate_config(output_path: str) -> None:
    """Generate a placeholder YAML configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="convert")
@click.argument("type_name")
@_catalog_options
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="Write the JSON to this file instead of stdout",
)
def convert(
    type_name: str, catalog_paths: tuple[str, ...], config_path: str | None, output_path: str | None
) -> None:
    """Convert a declared class to a sample JSON document."""
    request = ConversionRequest(
        type_name=type_name,
        catalog=CatalogRequest(catalog_paths=catalog_paths, config_path=config_path),
        output_path=output_path,
    )
    try:
        outcome = execute_class_conversion(request)
    except DepthExceededError as exc:
        raise CliError(str(exc)) from exc
    except ConversionError as exc:
        raise CliError(str(exc)) from exc
    except Exception as exc:
        _LOGGER.debug("Conversion of %s failed", type_name, exc_info=True)
        raise CliError(CONVERSION_FAILED_MESSAGE) from exc

    if outcome.output_path is None:
        click.echo(outcome.json_text)
        return
    click.echo(
        f"Convert {outcome.type_name} to JSON success, written to {outcome.output_path}.",
        err=True,
    )


@cli.command(name="list-types")
@_catalog_options
@click.option(
    "--all",
    "include_builtin_types",
    is_flag=True,
    default=False,
    help="Also list the built-in JDK types.",
)
def list_types(
    catalog_paths: tuple[str, ...], config_path: str | None, include_builtin_types: bool
) -> None:
    """List the types declared by the configured catalogs."""
    request = CatalogRequest(catalog_paths=catalog_paths, config_path=config_path)
    try:
        names = list_catalog_types(request, include_builtin_types=include_builtin_types)
    except ConversionError as exc:
        raise CliError(str(exc)) from exc
    for name in names:
        click.echo(name)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
