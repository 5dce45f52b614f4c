"""Command-line interface for SchemaCraft.

This module provides commands to render schema definitions written in
Python to JSON and to check them for inconsistencies.
"""

import importlib
import importlib.util
import json
import sys
from pathlib import Path
from typing import Any

import click
from pydantic import ValidationError

from schemacraft import __version__
from schemacraft.core.config import get_settings
from schemacraft.core.exceptions import SchemaLoadError
from schemacraft.core.logging import configure_logging, get_logger
from schemacraft.domain.entities.collection import Collection
from schemacraft.domain.services.builder import Builder
from schemacraft.domain.services.schema_validator import SchemaValidator
from schemacraft.schemas.render_schemas import RenderedSchema


def _import_module(reference: str):
    """Import a module given as a dotted name or a path to a ``.py`` file."""
    if reference.endswith(".py"):
        path = Path(reference)
        if not path.is_file():
            raise SchemaLoadError(f"Schema file not found: {reference}")
        # Prefixed so a schema file never replaces an installed module
        module_name = f"_schemacraft_target_{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise SchemaLoadError(f"Cannot load schema file: {reference}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as e:
            sys.modules.pop(module_name, None)
            raise SchemaLoadError(f"Error while loading {reference}: {e}") from e
        return module

    try:
        return importlib.import_module(reference)
    except ImportError as e:
        raise SchemaLoadError(f"Cannot import module '{reference}': {e}") from e
    except Exception as e:
        raise SchemaLoadError(f"Error while loading {reference}: {e}") from e


def load_target(target: str) -> Builder | Collection:
    """Resolve ``module:attr`` (or ``file.py:attr``) to a builder or collection.

    The attribute may also be a callable taking no arguments that returns
    one. The attribute name defaults to ``builder``.

    Raises:
        SchemaLoadError: If the target cannot be imported or resolved.
    """
    reference, _, attribute = target.rpartition(":")
    if not reference:
        reference, attribute = attribute, "builder"

    module = _import_module(reference)

    try:
        obj: Any = getattr(module, attribute)
    except AttributeError as e:
        raise SchemaLoadError(f"'{reference}' has no attribute '{attribute}'") from e

    if callable(obj) and not isinstance(obj, (Builder, Collection)):
        try:
            obj = obj()
        except Exception as e:
            raise SchemaLoadError(f"Error while calling '{target}': {e}") from e

    if not isinstance(obj, (Builder, Collection)):
        raise SchemaLoadError(
            f"'{target}' must be a Builder, a Collection or a callable returning one"
        )
    return obj


def _as_builder(obj: Builder | Collection) -> Builder:
    return obj if isinstance(obj, Builder) else obj.builder


@click.group()
@click.version_option(version=__version__, prog_name="SchemaCraft")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default=None,
    help="Set log level (overrides environment)",
)
def cli(log_level: str | None) -> None:
    """SchemaCraft - code-first collection schema definitions.

    Declare collections, fields and relations in Python and render them to
    the descriptor format consumed by schema appliers.
    """
    settings = get_settings()
    if log_level is not None:
        settings = settings.model_copy(update={"log_level": log_level})
    configure_logging(settings)


@cli.command()
@click.argument("target")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write to this file instead of stdout",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=None,
    help="JSON indentation (overrides config)",
)
def render(target: str, output: str | None, indent: int | None) -> None:
    """Render TARGET (module:attr or file.py:attr) to JSON.

    A Collection target renders only that collection's descriptor.
    """
    logger = get_logger(__name__)
    settings = get_settings()

    try:
        obj = load_target(target)
    except SchemaLoadError as e:
        raise click.ClickException(str(e)) from e

    if isinstance(obj, Collection):
        document: dict[str, Any] = obj.render()
        rendered = {"collections": [document]}
    else:
        document = obj.render()
        rendered = document
    collections = rendered["collections"]

    try:
        RenderedSchema.model_validate(rendered)
    except ValidationError as e:
        raise click.ClickException(f"Rendered schema is malformed:\n{e}") from e

    text = json.dumps(document, indent=indent if indent is not None else settings.render_indent)

    if output:
        Path(output).write_text(text + "\n", encoding="utf-8")
        logger.info("Schema written", target=target, output=output, collections=len(collections))
    else:
        click.echo(text)


@cli.command()
@click.argument("target")
def check(target: str) -> None:
    """Check TARGET for inconsistent references and primary keys."""
    logger = get_logger(__name__)

    try:
        obj = load_target(target)
    except SchemaLoadError as e:
        raise click.ClickException(str(e)) from e

    errors = SchemaValidator.validate(_as_builder(obj))
    if not errors:
        click.echo("OK: no problems found")
        return

    for error in errors:
        click.echo(f"{error.path}: {error.message} [{error.code}]", err=True)
    logger.warning("Schema check failed", target=target, errors=len(errors))
    sys.exit(1)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
